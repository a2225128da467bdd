import pytest
from hypothesis import given, strategies as st

from dsakit.matrix import (
    count_zeros,
    diagonal_order,
    format_matrix,
    rotate_180,
    rotate_90_anticlockwise,
    row_with_max_ones,
    search_sorted_matrix,
    snake_order,
    transpose,
)

SQUARE = [
    [1, 2, 3, 4],
    [5, 6, 7, 8],
    [9, 10, 11, 12],
    [13, 14, 15, 16],
]

SORTED_GRID = [
    [4, 8, 15, 25, 60],
    [18, 22, 26, 42, 80],
    [36, 40, 45, 68, 104],
    [48, 50, 72, 83, 130],
    [70, 99, 114, 128, 170],
]


@st.composite
def square_matrices(draw):
    size = draw(st.integers(min_value=1, max_value=6))
    return [
        draw(st.lists(st.integers(-50, 50), min_size=size, max_size=size))
        for _ in range(size)
    ]


@st.composite
def binary_sorted_rows(draw):
    size = draw(st.integers(min_value=1, max_value=7))
    zeros = draw(st.lists(st.integers(0, size), min_size=size, max_size=size))
    return [[0] * k + [1] * (size - k) for k in zeros]


def test_rotate_180_matches_documented_output():
    assert format_matrix(rotate_180(SQUARE)) == (
        "16 15 14 13\n12 11 10 9\n8 7 6 5\n4 3 2 1"
    )


def test_rotate_90_anticlockwise_matches_documented_output():
    assert format_matrix(rotate_90_anticlockwise(SQUARE)) == (
        "4 8 12 16\n3 7 11 15\n2 6 10 14\n1 5 9 13"
    )


def test_rotations_do_not_modify_input():
    original = [row[:] for row in SQUARE]
    rotate_180(SQUARE)
    rotate_90_anticlockwise(SQUARE)
    transpose(SQUARE)
    assert SQUARE == original


@given(square_matrices())
def test_two_quarter_turns_make_a_half_turn(matrix):
    assert rotate_90_anticlockwise(rotate_90_anticlockwise(matrix)) == rotate_180(matrix)


@given(square_matrices())
def test_four_quarter_turns_are_identity(matrix):
    result = matrix
    for _ in range(4):
        result = rotate_90_anticlockwise(result)
    assert result == [list(row) for row in matrix]


@given(square_matrices())
def test_transpose_is_involution(matrix):
    assert transpose(transpose(matrix)) == matrix


@given(square_matrices())
def test_transpose_swaps_indices(matrix):
    result = transpose(matrix)
    assert all(
        result[j][i] == matrix[i][j]
        for i in range(len(matrix))
        for j in range(len(matrix))
    )


def test_count_zeros_example():
    grid = [[0, 0, 0], [0, 0, 1], [0, 1, 1]]
    assert count_zeros(grid) == 6


def test_count_zeros_empty():
    assert count_zeros([]) == 0


def test_snake_order_example():
    grid = [[3, 6, 4, 2], [7, 8, 11, 5], [9, 3, 2, 1], [17, 8, 5, 9]]
    assert snake_order(grid) == [3, 6, 4, 2, 5, 11, 8, 7, 9, 3, 2, 1, 9, 5, 8, 17]


@given(square_matrices())
def test_snake_order_keeps_rows_together(matrix):
    result = snake_order(matrix)
    size = len(matrix)
    chunks = [result[i * size:(i + 1) * size] for i in range(size)]
    assert all(
        chunk == (row if i % 2 == 0 else row[::-1])
        for i, (chunk, row) in enumerate(zip(chunks, matrix))
    )


def test_diagonal_order_example():
    assert diagonal_order(SQUARE) == [1, 2, 5, 3, 6, 9, 4, 7, 10, 13, 8, 11, 14, 12, 15, 16]


@given(square_matrices())
def test_diagonal_order_visits_every_cell(matrix):
    result = diagonal_order(matrix)
    assert sorted(result) == sorted(v for row in matrix for v in row)
    assert result[0] == matrix[0][0]
    assert result[-1] == matrix[-1][-1]


def test_row_with_max_ones_documented_output():
    grid = [[0, 1, 1, 1], [0, 0, 1, 1], [1, 1, 1, 1], [0, 0, 0, 0]]
    assert row_with_max_ones(grid) == 2


@given(binary_sorted_rows())
def test_row_with_max_ones_picks_first_best_row(matrix):
    ones = [sum(row) for row in matrix]
    if max(ones) == 0:
        with pytest.raises(ValueError):
            row_with_max_ones(matrix)
    else:
        assert row_with_max_ones(matrix) == ones.index(max(ones))


def test_row_with_max_ones_rejects_empty():
    with pytest.raises(ValueError):
        row_with_max_ones([])


def test_search_sorted_matrix_finds_every_element():
    assert all(search_sorted_matrix(SORTED_GRID, v) for row in SORTED_GRID for v in row)


@pytest.mark.parametrize("target", [0, 5, 61, 171, 100])
def test_search_sorted_matrix_misses_absent_values(target):
    assert search_sorted_matrix(SORTED_GRID, target) is False


def test_search_sorted_matrix_empty():
    assert search_sorted_matrix([], 3) is False