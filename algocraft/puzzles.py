"""Towers of Hanoi and the N-Queens puzzle."""

from __future__ import annotations

import sys
from collections.abc import Sequence

DEFAULT_BOARD_WIDTH = 8


class NoSolutionError(Exception):
    """Raised when no arrangement of queens exists for a board size."""


def hanoi(n: int, source: int, target: int, via: int) -> list[tuple[int, int]]:
    """Return the moves that carry ``n`` discs from ``source`` to ``target``."""
    if n <= 0:
        return []
    return [
        *hanoi(n - 1, source, via, target),
        (source, target),
        *hanoi(n - 1, via, target, source),
    ]


def _is_safe(rows: list[int], column: int) -> bool:
    row = len(rows)
    return all(
        placed != column and abs(placed - column) != row - placed_row
        for placed_row, placed in enumerate(rows)
    )


def nqueens(board_width: int) -> list[int]:
    """Return the first placement of queens found by backtracking.

    Element ``i`` of the result is the column of the queen on row ``i``.
    """
    if board_width < 1:
        raise ValueError("board width must be positive")

    rows: list[int] = []
    column = 0
    while len(rows) < board_width:
        if column == board_width:
            if not rows:
                raise NoSolutionError("No solution exists for specified board size.")
            column = rows.pop() + 1
        elif _is_safe(rows, column):
            rows.append(column)
            column = 0
        else:
            column += 1
    return rows


def format_board(board: Sequence[int]) -> str:
    """Render a placement as one line per row: the column, a tab and the squares."""
    width = len(board)
    return "\n".join(
        f"{queen}\t" + "".join("Q" if column == queen else "." for column in range(width))
        for queen in board
    )


def _board_width_from(args: Sequence[str]) -> int:
    for arg in args:
        try:
            width = int(arg)
        except ValueError:
            continue
        if width != 0:
            return width
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Solve N-Queens for the first non-zero integer argument, or 8 by default."""
    args = sys.argv[1:] if argv is None else argv
    board_width = _board_width_from(args)

    if board_width < 4:
        print(
            f"Running algorithm with {DEFAULT_BOARD_WIDTH} as a default. Specify an "
            "alternative Chess board size for N-Queens as a command line argument.\n"
        )
        board_width = DEFAULT_BOARD_WIDTH

    board = nqueens(board_width)
    print(f"N-Queens {board_width} by {board_width} board result:")
    print(format_board(board))
    return 0


if __name__ == "__main__":
    sys.exit(main())