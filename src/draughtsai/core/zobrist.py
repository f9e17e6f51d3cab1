"""Zobrist keys and position fingerprints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from draughtsai.core.enums import Piece
from draughtsai.core.types import SQUARE_COUNT, Square, dark_squares, make_square

if TYPE_CHECKING:
    from draughtsai.core.state import DraughtsState

_SEED: Final = 0xA5B3C7D9E1F23412
_MASK_64: Final = 0xFFFFFFFFFFFFFFFF
_PIECE_KINDS: Final = 4


def _splitmix64(state: int) -> int:
    """Deterministic 64-bit bit-mixer suitable for static key generation."""
    z = (state + 0x9E3779B97F4A7C15) & _MASK_64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK_64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK_64
    return z ^ (z >> 31)


def _nth_key(index: int) -> int:
    return _splitmix64(_SEED + index)


# [piece - 1][square]; square index 0 is unused.
_PIECE_KEYS: Final = tuple(
    tuple(_nth_key(kind * (SQUARE_COUNT + 1) + sq) for sq in range(SQUARE_COUNT + 1))
    for kind in range(_PIECE_KINDS)
)
_SIDE_TO_MOVE_KEY: Final = _nth_key(_PIECE_KINDS * (SQUARE_COUNT + 1))


def piece_key(piece: Piece, sq: Square) -> int:
    """Hash key for a specific piece on a square."""
    return _PIECE_KEYS[int(piece) - 1][sq]


def side_to_move_key() -> int:
    """Hash toggle key, applied when black is to move."""
    return _SIDE_TO_MOVE_KEY


def fingerprint(position: DraughtsState) -> int:
    """64-bit key of the piece placement and side to move.

    Distinct positions may collide; callers must treat equal fingerprints as
    a hint, not as proof of equal positions.
    """
    key = 0
    for row, col in dark_squares():
        piece = Piece(position.piece_at(row, col))
        if piece is not Piece.EMPTY:
            key ^= piece_key(piece, make_square(row, col))
    if not position.is_side_to_move_maximizing():
        key ^= _SIDE_TO_MOVE_KEY
    return key
