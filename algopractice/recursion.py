"""Backtracking searches: permutations, sudoku, maze paths and subsets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

EMPTY = "."
DIGITS = "123456789"
SIZE = 9

# Moves tried in this order, so paths come out in lexicographic order.
_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def permutations(values: Iterable[int]) -> list[list[int]]:
    """Return every ordering of values, generated by successive swaps."""
    perms: list[list[int]] = []

    def permute(nums: list[int], i: int) -> None:
        if i == len(nums):
            perms.append(nums)
            return
        for j in range(i, len(nums)):
            nums[i], nums[j] = nums[j], nums[i]
            permute(list(nums), i + 1)

    permute(list(values), 0)
    return perms


def _check_board(board: Sequence[Sequence[str]]) -> None:
    if len(board) != SIZE or any(len(row) != SIZE for row in board):
        raise ValueError("a sudoku board must be 9 rows of 9 cells")


def is_valid_placement(
    board: Sequence[Sequence[str]], row: int, col: int, digit: str
) -> bool:
    """Tell whether digit may go at (row, col) without clashing in row, column or box."""
    box_row, box_col = 3 * (row // 3), 3 * (col // 3)
    for i in range(SIZE):
        if board[i][col] == digit or board[row][i] == digit:
            return False
        if board[box_row + i // 3][box_col + i % 3] == digit:
            return False
    return True


def solve_sudoku(board: list[list[str]]) -> None:
    """Fill the empty cells ('.') of a 9x9 board in place.

    Raises ValueError if the board has no solution; the board is then unchanged.
    """
    _check_board(board)
    empty = [
        (r, c)
        for r, line in enumerate(board)
        for c, cell in enumerate(line)
        if cell == EMPTY
    ]

    def fill(index: int) -> bool:
        if index == len(empty):
            return True
        row, col = empty[index]
        for digit in DIGITS:
            if is_valid_placement(board, row, col, digit):
                board[row][col] = digit
                if fill(index + 1):
                    return True
                board[row][col] = EMPTY
        return False

    if not fill(0):
        raise ValueError("the sudoku has no solution")


def find_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path of moves (D, L, R, U) from the top-left to the bottom-right.

    Only cells holding 1 may be entered and no cell is visited twice.
    """
    size = len(maze)
    if any(len(line) != size for line in maze):
        raise ValueError("the maze must be square")
    if size == 0 or maze[0][0] != 1:
        return []

    paths: list[str] = []
    visited: set[tuple[int, int]] = set()
    moves: list[str] = []

    def walk(i: int, j: int) -> None:
        if i == size - 1 and j == size - 1:
            paths.append("".join(moves))
            return
        visited.add((i, j))
        for letter, di, dj in _MOVES:
            ni, nj = i + di, j + dj
            if (
                0 <= ni < size
                and 0 <= nj < size
                and (ni, nj) not in visited
                and maze[ni][nj] == 1
            ):
                moves.append(letter)
                walk(ni, nj)
                moves.pop()
        visited.discard((i, j))

    walk(0, 0)
    return paths


def subsets_with_dup(values: Iterable[int]) -> list[list[int]]:
    """Return every distinct subset of values, each sorted, in lexicographic order."""
    nums = sorted(values)
    subsets: list[list[int]] = []
    subset: list[int] = []

    def collect(begin: int) -> None:
        subsets.append(list(subset))
        for i in range(begin, len(nums)):
            if i != begin and nums[i] == nums[i - 1]:
                continue
            subset.append(nums[i])
            collect(i + 1)
            subset.pop()

    collect(0)
    return subsets