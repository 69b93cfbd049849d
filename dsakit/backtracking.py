"""Backtracking searches: permutations, subsets, grid paths, N-Queens and Sudoku."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

Board = tuple[str, ...]
Grid = list[list[int]]

_DIGITS = range(1, 10)


def permutations(text: str) -> list[str]:
    """Return every arrangement of the characters of ``text``.

    Characters are picked left to right at each step, so the result is in
    the order of the positions in ``text``.
    """

    def build(rest: str, prefix: str) -> Iterator[str]:
        if not rest:
            yield prefix
            return
        for index, char in enumerate(rest):
            yield from build(rest[:index] + rest[index + 1:], prefix + char)

    return list(build(text, ""))


def grid_ways(rows: int, cols: int) -> int:
    """Return the number of right/down paths from the top-left to the bottom-right cell."""
    if rows < 1 or cols < 1:
        return 0
    return math.comb(rows + cols - 2, rows - 1)


def n_queens(n: int) -> list[Board]:
    """Return every placement of ``n`` non-attacking queens on an ``n`` x ``n`` board.

    Each board is a tuple of rows; a row is a string of ``.`` and one ``Q``.
    Solutions come in the order found by trying columns left to right, row by row.
    """
    if n < 0:
        raise ValueError(f"board size must not be negative, got {n}")

    solutions: list[Board] = []
    placed: list[int] = []
    used_cols: set[int] = set()
    used_diagonals: set[int] = set()
    used_anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(
                tuple("." * col + "Q" + "." * (n - col - 1) for col in placed)
            )
            return
        for col in range(n):
            if (
                col in used_cols
                or row - col in used_diagonals
                or row + col in used_anti_diagonals
            ):
                continue
            placed.append(col)
            used_cols.add(col)
            used_diagonals.add(row - col)
            used_anti_diagonals.add(row + col)
            place(row + 1)
            placed.pop()
            used_cols.discard(col)
            used_diagonals.discard(row - col)
            used_anti_diagonals.discard(row + col)

    place(0)
    return solutions


def format_board(board: Sequence[str]) -> str:
    """Render a board with its cells separated by spaces, one row per line."""
    return "\n".join(" ".join(row) for row in board)


def subsets(text: str) -> list[str]:
    """Return every subsequence of ``text``, taking each character before leaving it out."""

    def build(rest: str, chosen: str) -> Iterator[str]:
        if not rest:
            yield chosen
            return
        yield from build(rest[1:], chosen + rest[0])
        yield from build(rest[1:], chosen)

    return list(build(text, ""))


def _box(row: int, col: int) -> int:
    return (row // 3) * 3 + col // 3


def _checked_grid(grid: Sequence[Sequence[int]]) -> Grid:
    board = [list(row) for row in grid]
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("sudoku grid must be 9 x 9")
    for row in board:
        for value in row:
            if not isinstance(value, int) or not 0 <= value <= 9:
                raise ValueError(f"sudoku cells must be integers 0-9, got {value!r}")
    return board


def solve_sudoku(grid: Sequence[Sequence[int]]) -> Grid:
    """Return a solved copy of a 9 x 9 Sudoku in which 0 marks an empty cell.

    Empty cells are filled in row-major order, trying digits from 1 to 9.
    Raises ValueError if the grid is malformed, its givens clash, or it has
    no solution.
    """
    board = _checked_grid(grid)
    row_used: list[set[int]] = [set() for _ in range(9)]
    col_used: list[set[int]] = [set() for _ in range(9)]
    box_used: list[set[int]] = [set() for _ in range(9)]
    empty: list[tuple[int, int]] = []

    for r, row in enumerate(board):
        for c, value in enumerate(row):
            if value == 0:
                empty.append((r, c))
                continue
            b = _box(r, c)
            if value in row_used[r] or value in col_used[c] or value in box_used[b]:
                raise ValueError(f"digit {value} repeats at row {r}, column {c}")
            row_used[r].add(value)
            col_used[c].add(value)
            box_used[b].add(value)

    def fill(position: int) -> bool:
        if position == len(empty):
            return True
        r, c = empty[position]
        b = _box(r, c)
        for digit in _DIGITS:
            if digit in row_used[r] or digit in col_used[c] or digit in box_used[b]:
                continue
            board[r][c] = digit
            row_used[r].add(digit)
            col_used[c].add(digit)
            box_used[b].add(digit)
            if fill(position + 1):
                return True
            row_used[r].discard(digit)
            col_used[c].discard(digit)
            box_used[b].discard(digit)
            board[r][c] = 0
        return False

    if not fill(0):
        raise ValueError("sudoku has no solution")
    return board


def format_sudoku(grid: Sequence[Sequence[int]]) -> str:
    """Render a Sudoku grid with its digits separated by spaces, one row per line."""
    return "\n".join(" ".join(str(value) for value in row) for row in grid)