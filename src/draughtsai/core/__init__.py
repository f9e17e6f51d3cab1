"""Core domain layer — board geometry, pieces and the game-state protocol.

Quick start::

    from draughtsai.core import Board, Piece

    board = Board.initial()
    assert board.piece_at(9, 0) is Piece.WHITE_MAN
"""

from draughtsai.core.board import Board
from draughtsai.core.enums import Color, Piece
from draughtsai.core.state import DraughtsMove, DraughtsState
from draughtsai.core.types import (
    BOARD_SIZE,
    SQUARE_COUNT,
    Square,
    col_of,
    dark_squares,
    is_dark,
    make_square,
    row_of,
)
from draughtsai.core.zobrist import fingerprint

__all__ = [
    # Enums
    "Color",
    "Piece",
    # Types / helpers
    "BOARD_SIZE",
    "SQUARE_COUNT",
    "Square",
    "col_of",
    "dark_squares",
    "is_dark",
    "make_square",
    "row_of",
    # Domain objects
    "Board",
    "DraughtsMove",
    "DraughtsState",
    "fingerprint",
]
