"""N-queens enumeration with two different search orders."""

from __future__ import annotations

from typing import Iterator, Sequence

Board = tuple[str, ...]


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError("board size must not be negative")


def _snapshot(board: list[list[str]]) -> Board:
    return tuple("".join(row) for row in board)


def solve_by_rows(n: int) -> Iterator[Board]:
    """Yield every placement of ``n`` queens, placing one queen per row."""
    _check_size(n)
    board = [["."] * n for _ in range(n)]
    cols: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> Iterator[Board]:
        if row == n:
            yield _snapshot(board)
            return
        for col in range(n):
            if col in cols or row + col in diagonals or col - row in anti_diagonals:
                continue
            board[row][col] = "Q"
            cols.add(col)
            diagonals.add(row + col)
            anti_diagonals.add(col - row)
            yield from place(row + 1)
            cols.discard(col)
            diagonals.discard(row + col)
            anti_diagonals.discard(col - row)
            board[row][col] = "."

    yield from place(0)


def solve_by_cells(n: int) -> Iterator[Board]:
    """Yield every placement of ``n`` queens, deciding cell by cell.

    Each cell is first left empty and then, when allowed, given a queen.
    """
    _check_size(n)
    board = [["."] * n for _ in range(n)]
    rows: set[int] = set()
    cols: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def visit(x: int, y: int, placed: int) -> Iterator[Board]:
        if y == n:
            x, y = x + 1, 0
        if x == n:
            if placed == n:
                yield _snapshot(board)
            return

        yield from visit(x, y + 1, placed)

        if x in rows or y in cols or x + y in diagonals or x - y in anti_diagonals:
            return
        board[x][y] = "Q"
        rows.add(x)
        cols.add(y)
        diagonals.add(x + y)
        anti_diagonals.add(x - y)
        yield from visit(x, y + 1, placed + 1)
        rows.discard(x)
        cols.discard(y)
        diagonals.discard(x + y)
        anti_diagonals.discard(x - y)
        board[x][y] = "."

    yield from visit(0, 0, 0)


def format_board(board: Sequence[str]) -> str:
    """Render a board as lines of text, each ending with a newline."""
    return "".join(f"{row}\n" for row in board)