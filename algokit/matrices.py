"""Matrix algorithms: bounded rectangle sums and spiral order."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections.abc import Sequence


def _best_bounded_run(values: Sequence[int], k: int) -> int | None:
    prefixes = [0]
    running = 0
    best = None
    for value in values:
        running += value
        index = bisect_left(prefixes, running - k)
        if index < len(prefixes):
            candidate = running - prefixes[index]
            if best is None or candidate > best:
                best = candidate
        insort(prefixes, running)
    return best


def max_sum_submatrix(matrix: Sequence[Sequence[int]], k: int) -> int:
    """Return the largest sum of a rectangle that is no larger than ``k``."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix must not be empty")
    cols = len(matrix[0])
    best = None
    for top in range(len(matrix)):
        column_sums = [0] * cols
        for row in matrix[top:]:
            column_sums = [total + cell for total, cell in zip(column_sums, row)]
            candidate = _best_bounded_run(column_sums, k)
            if candidate is not None and (best is None or candidate > best):
                best = candidate
    if best is None:
        raise ValueError(f"no rectangle has a sum of at most {k}")
    return best


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements in clockwise spiral order from the top-left corner."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[int] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        result.extend(matrix[row][right] for row in range(top + 1, bottom + 1))
        if top < bottom:
            result.extend(matrix[bottom][col] for col in range(right - 1, left - 1, -1))
        if left < right:
            result.extend(matrix[row][left] for row in range(bottom - 1, top, -1))
        top += 1
        bottom -= 1
        left += 1
        right -= 1
    return result