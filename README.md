# dsakit

A small collection of classic algorithms over lists, matrices and strings,
written as plain functions that take ordinary Python values and return new
ones. No function changes its arguments.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `dsakit.matrix`

Matrices are sequences of rows, each a sequence of integers.

- `count_zeros(matrix)`: number of zeros in a square matrix whose rows and
  columns are sorted with zeros before ones.
- `diagonal_order(matrix)`: elements of a square matrix read along its
  anti-diagonals, each one from top to bottom.
- `snake_order(matrix)`: rows read alternately left to right and right to left.
- `transpose(matrix)`, `rotate_180(matrix)`, `rotate_90_anticlockwise(matrix)`:
  new lists of lists.
- `format_matrix(matrix)`: the values space-separated, one row per line.
- `row_with_max_ones(matrix)`: index of the first row with the most ones in a
  binary matrix whose rows are zeros followed by ones. Raises `ValueError` if
  the matrix is empty or holds no ones.
- `search_sorted_matrix(matrix, target)`: whether `target` occurs in a matrix
  sorted along its rows and columns; `False` for an empty matrix.

```python
from dsakit.matrix import rotate_90_anticlockwise, snake_order

rotate_90_anticlockwise([[1, 2], [3, 4]])   # [[2, 4], [1, 3]]
snake_order([[1, 2], [3, 4]])               # [1, 2, 4, 3]
```

### `dsakit.strings`

- `rotate_clockwise(text)`, `rotate_anticlockwise(text)`: rotation by one place.
- `is_rotated_by_two(first, second)`: whether `second` is `first` rotated two
  places either way.
- `counting_sort(text)`: sorts a string of lower-case ASCII letters; raises
  `ValueError` for any other character.
- `case_sort(text)`: sorts the lower-case and the upper-case letters separately,
  each position keeping its case; raises `ValueError` for characters that are
  not ASCII letters.
- `prefix_function(text)`: the KMP failure table.
- `longest_prefix_suffix(text)`: length of the longest proper prefix that is
  also a suffix (0 for an empty string).
- `find_pattern(pattern, text)`: every start index of `pattern` in `text`,
  overlapping matches included; raises `ValueError` for an empty pattern.

```python
from dsakit.strings import case_sort, find_pattern

case_sort("srbDKi")                          # "birDKs"
find_pattern("aaba", "aabaacaadaabaaba")     # [0, 9, 12]
```

### `dsakit.arrays`

- `has_four_sum(values, target)`, `has_triplet_sum(values, target)`: whether
  four (three) items at distinct positions add up to `target`.
- `has_product_pair(values, target)`: two-pointer search of the sorted values
  for a product equal to `target`.
- `frequency_count(values)`: how often each of `1..n` occurs, `n` being the
  number of values; raises `ValueError` for values outside that range.
- `missing_and_repeating(values)`: the tuple `(repeating, missing)`; raises
  `ValueError` if there is no such pair.
- `segregate_zeros_and_ones(values)`: the zeros followed by the ones; raises
  `ValueError` for anything but 0 and 1.
- `factorial_digits(n)`: the decimal digits of `n!`, most significant first;
  raises `ValueError` for negative `n`.
- `max_subarray_sum(values)`: Kadane's algorithm; raises `ValueError` for an
  empty sequence.
- `majority_element(values)`: the value in more than half the positions, or
  `None`.
- `search_almost_sorted(values, target)`: index of `target` in a sorted
  sequence whose items may sit one place off, or `None`.

### `dsakit.partition`

Binary search over the answer:

- `min_painting_time(lengths, painters)`: least possible largest total length
  given to one painter, boards being split into contiguous runs; raises
  `ValueError` if `painters` is below 1.
- `allocate_min_pages(pages, students)`: the same for books and students;
  raises `ValueError` if there are more students than books.
- `max_min_distance(stalls, cows)`: largest minimum distance between cows
  placed in the stalls; raises `ValueError` for no stalls.

```python
from dsakit.partition import allocate_min_pages, max_min_distance

max_min_distance([10, 1, 2, 7, 5], 3)                 # 4
allocate_min_pages([15, 10, 19, 10, 5, 18, 7], 5)     # 25
```

## What it does not do

dsakit is a library only: it has no command-line program, and its functions
print nothing and read no input. Call them from your own code.