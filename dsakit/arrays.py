"""Searching, counting and summing over one-dimensional integer sequences."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence


def _pair_sums_to(ordered: Sequence[int], start: int, remain: int) -> bool:
    """Whether two distinct items of ordered[start:] add up to remain."""
    end = len(ordered) - 1
    while start < end:
        total = ordered[start] + ordered[end]
        if total == remain:
            return True
        if total < remain:
            start += 1
        else:
            end -= 1
    return False


def has_four_sum(values: Sequence[int], target: int) -> bool:
    """Whether four items at distinct positions add up to target."""
    ordered = sorted(values)
    size = len(ordered)
    for i in range(size - 3):
        for j in range(i + 1, size - 2):
            if _pair_sums_to(ordered, j + 1, target - ordered[i] - ordered[j]):
                return True
    return False


def has_triplet_sum(values: Sequence[int], target: int) -> bool:
    """Whether three items at distinct positions add up to target."""
    ordered = sorted(values)
    return any(
        _pair_sums_to(ordered, i + 1, target - ordered[i])
        for i in range(len(ordered) - 2)
    )


def _counts_in_range(values: Sequence[int]) -> Counter[int]:
    size = len(values)
    counts = Counter(values)
    stray = sorted(value for value in counts if not 1 <= value <= size)
    if stray:
        raise ValueError(f"values must lie between 1 and {size}: {stray}")
    return counts


def frequency_count(values: Sequence[int]) -> list[int]:
    """How often each of 1..n occurs, where n is the number of values."""
    counts = _counts_in_range(values)
    return [counts[value] for value in range(1, len(values) + 1)]


def missing_and_repeating(values: Sequence[int]) -> tuple[int, int]:
    """Return (repeating, missing) for values drawn from 1..n with one repeat.

    Raises ValueError if no value occurs twice or none is missing.
    """
    counts = _counts_in_range(values)
    span = range(1, len(values) + 1)
    repeating = next((value for value in span if counts[value] == 2), None)
    missing = next((value for value in span if counts[value] == 0), None)
    if repeating is None or missing is None:
        raise ValueError("values have no single repeated and missing number")
    return repeating, missing


def segregate_zeros_and_ones(values: Sequence[int]) -> list[int]:
    """Return the zeros of a binary sequence followed by its ones."""
    if any(value not in (0, 1) for value in values):
        raise ValueError("values must all be 0 or 1")
    zeros = values.count(0) if isinstance(values, list) else sum(1 for v in values if v == 0)
    return [0] * zeros + [1] * (len(values) - zeros)


def factorial_digits(n: int) -> list[int]:
    """Decimal digits of n factorial, most significant first."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return [int(digit) for digit in str(math.factorial(n))]


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run of values."""
    if not values:
        raise ValueError("values must not be empty")
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    assert best is not None
    return best


def majority_element(values: Sequence[int]) -> int | None:
    """The value occurring in more than half the positions, or None."""
    candidate: int | None = None
    count = 0
    for value in values:
        if count == 0:
            candidate = value
            count = 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if candidate is None:
        return None
    occurrences = sum(1 for value in values if value == candidate)
    return candidate if occurrences > len(values) // 2 else None


def has_product_pair(values: Sequence[int], target: int) -> bool:
    """Two-pointer search of the sorted values for a product equal to target."""
    ordered = sorted(values)
    start, end = 0, len(ordered) - 1
    while start <= end:
        product = ordered[start] * ordered[end]
        if product == target:
            return True
        if product > target:
            end -= 1
        else:
            start += 1
    return False


def search_almost_sorted(values: Sequence[int], target: int) -> int | None:
    """Index of target in a sorted sequence whose items may sit one place off."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == target:
            return mid
        if mid > start and values[mid - 1] == target:
            return mid - 1
        if mid < end and values[mid + 1] == target:
            return mid + 1
        if values[mid] >= target:
            end = mid - 1
        else:
            start = mid + 1
    return None