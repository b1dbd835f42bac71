"""Searching a matrix whose rows, read in order, form one sorted sequence."""

from __future__ import annotations

from collections.abc import Sequence


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Binary-search a row-major sorted matrix for target."""
    if not matrix or not matrix[0]:
        return False
    width = len(matrix[0])
    lo, hi = 0, len(matrix) * width - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        row, col = divmod(mid, width)
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return False