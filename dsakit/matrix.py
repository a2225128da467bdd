"""Algorithms on square and rectangular integer matrices."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def format_matrix(matrix: Matrix) -> str:
    """Render a matrix as space-separated rows, one row per line."""
    return "\n".join(" ".join(str(value) for value in row) for row in matrix)


def count_zeros(matrix: Matrix) -> int:
    """Count zeros in a square matrix whose rows are zeros followed by ones."""
    size = len(matrix)
    row, col = 0, size - 1
    count = 0
    while row < size and col >= 0:
        if matrix[row][col] == 0:
            count += col + 1
            row += 1
        else:
            col -= 1
    return count


def diagonal_order(matrix: Matrix) -> list[int]:
    """Walk a square matrix along its anti-diagonals, each one top to bottom."""
    size = len(matrix)
    return [
        matrix[row][diagonal - row]
        for diagonal in range(2 * size - 1)
        for row in range(max(0, diagonal - size + 1), min(diagonal, size - 1) + 1)
    ]


def rotate_180(matrix: Matrix) -> list[list[int]]:
    """Return the matrix turned through half a revolution."""
    return [list(reversed(row)) for row in reversed(matrix)]


def rotate_90_anticlockwise(matrix: Matrix) -> list[list[int]]:
    """Return the matrix turned a quarter revolution anticlockwise."""
    return [list(column) for column in zip(*matrix)][::-1]


def snake_order(matrix: Matrix) -> list[int]:
    """Read rows alternately left to right and right to left."""
    result: list[int] = []
    for index, row in enumerate(matrix):
        result.extend(row if index % 2 == 0 else reversed(row))
    return result


def transpose(matrix: Matrix) -> list[list[int]]:
    """Return the transpose of the matrix."""
    return [list(column) for column in zip(*matrix)]


def row_with_max_ones(matrix: Matrix) -> int:
    """Index of the first row with the most ones, rows being sorted 0s then 1s.

    Raises ValueError if the matrix is empty or holds no ones at all.
    """
    if not matrix or not matrix[0]:
        raise ValueError("matrix is empty")
    col = len(matrix[0]) - 1
    best: int | None = None
    for index, row in enumerate(matrix):
        while col >= 0 and row[col] == 1:
            col -= 1
            best = index
    if best is None:
        raise ValueError("matrix contains no ones")
    return best


def search_sorted_matrix(matrix: Matrix, target: int) -> bool:
    """Whether target occurs in a matrix sorted along both rows and columns."""
    if not matrix or not matrix[0]:
        return False
    rows = len(matrix)
    row, col = 0, len(matrix[0]) - 1
    while row < rows and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            row += 1
        else:
            col -= 1
    return False