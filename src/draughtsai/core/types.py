"""Square type alias and coordinate helpers.

Board layout (international draughts, white at the bottom):
    row 0 is black's back rank, row 9 is white's back rank.
    Dark (playable) squares satisfy ``(row + col) % 2 == 1``.
    Squares are numbered 1-50 row by row over the dark squares::

        row 0:  .  1  .  2  .  3  .  4  .  5
        row 1:  6  .  7  .  8  .  9  . 10  .
        ...
        row 9: 46  . 47  . 48  . 49  . 50  .
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

Square: TypeAlias = int  # 1–50

BOARD_SIZE = 10
SQUARES_PER_ROW = BOARD_SIZE // 2
SQUARE_COUNT = BOARD_SIZE * SQUARES_PER_ROW


def is_on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_dark(row: int, col: int) -> bool:
    """Only dark squares can ever hold a piece."""
    return (row + col) % 2 == 1


def row_of(sq: Square) -> int:
    """Row index 0–9 of square number *sq*."""
    return (sq - 1) // SQUARES_PER_ROW


def col_of(sq: Square) -> int:
    """Column index 0–9 of square number *sq*."""
    row = row_of(sq)
    return 2 * ((sq - 1) % SQUARES_PER_ROW) + (1 if row % 2 == 0 else 0)


def make_square(row: int, col: int) -> Square:
    """Square number of the dark square at (*row*, *col*)."""
    if not is_on_board(row, col) or not is_dark(row, col):
        raise ValueError(f"({row}, {col}) is not a playable square")
    return row * SQUARES_PER_ROW + col // 2 + 1


def dark_squares() -> Iterator[tuple[int, int]]:
    """All playable (row, col) pairs, in square-number order."""
    for row in range(BOARD_SIZE):
        for col in range((row + 1) % 2, BOARD_SIZE, 2):
            yield row, col


def rotate(row: int, col: int) -> tuple[int, int]:
    """Coordinates after turning the board 180 degrees."""
    last = BOARD_SIZE - 1
    return last - row, last - col
