"""Binary search over the answer for partitioning and spacing problems."""

from __future__ import annotations

from collections.abc import Sequence


def _parts_needed(weights: Sequence[int], limit: int) -> int:
    """Contiguous parts needed so that no part exceeds limit."""
    parts, load = 1, 0
    for weight in weights:
        load += weight
        if load > limit:
            parts += 1
            load = weight
    return parts


def _min_max_load(weights: Sequence[int], parts: int) -> int:
    if parts < 1:
        raise ValueError("at least one part is required")
    start, end = max(weights, default=0), sum(weights)
    answer = end
    while start <= end:
        mid = (start + end) // 2
        if _parts_needed(weights, mid) <= parts:
            answer = mid
            end = mid - 1
        else:
            start = mid + 1
    return answer


def min_painting_time(lengths: Sequence[int], painters: int) -> int:
    """Least time for painters to paint contiguous boards, one unit per length."""
    return _min_max_load(lengths, painters)


def allocate_min_pages(pages: Sequence[int], students: int) -> int:
    """Smallest possible maximum of pages any student gets for contiguous books.

    Raises ValueError if there are more students than books.
    """
    if len(pages) < students:
        raise ValueError("more students than books")
    return _min_max_load(pages, students)


def _cows_placed(ordered: Sequence[int], gap: int) -> int:
    count, last = 1, ordered[0]
    for position in ordered[1:]:
        if last + gap <= position:
            count += 1
            last = position
    return count


def max_min_distance(stalls: Sequence[int], cows: int) -> int:
    """Largest minimum distance achievable when placing cows in stalls."""
    if not stalls:
        raise ValueError("stalls must not be empty")
    ordered = sorted(stalls)
    start, end = 1, ordered[-1] - ordered[0]
    answer = 1
    while start <= end:
        mid = (start + end) // 2
        if _cows_placed(ordered, mid) >= cows:
            answer = mid
            start = mid + 1
        else:
            end = mid - 1
    return answer