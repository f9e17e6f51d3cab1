"""Plain piece-count evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from draughtsai.core.enums import Piece
from draughtsai.core.types import dark_squares
from draughtsai.evaluation.base import Evaluator, terminal_score

if TYPE_CHECKING:
    from draughtsai.core.state import DraughtsState


class MaterialEvaluator(Evaluator):
    """Counts men and kings, nothing else. Default values are 1 and 5."""

    __slots__ = ("_man", "_king")

    def __init__(self, man_value: int = 1, king_value: int = 5) -> None:
        if man_value <= 0 or king_value <= 0:
            raise ValueError("Piece values must be positive")
        self._man = man_value
        self._king = king_value

    def evaluate(self, position: DraughtsState) -> int:
        if position.is_terminal():
            return terminal_score(position)
        value = 0
        for row, col in dark_squares():
            piece = Piece(position.piece_at(row, col))
            if piece is Piece.EMPTY:
                continue
            worth = self._king if piece.is_king else self._man
            value += piece.color.sign * worth
        return value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(man_value={self._man}, king_value={self._king})"
