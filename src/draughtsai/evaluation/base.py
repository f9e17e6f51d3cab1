"""
Abstract Evaluator Interface

Every evaluator scores a position from white's perspective, so the search can
swap evaluators without changing its min/max logic.

Convention:
    - Positive = white advantage, negative = black advantage
    - A decided game returns +/-WIN_SCORE, a drawn one exactly 0
    - Values are plain ints; WIN_SCORE is half of INF_SCORE so that a few
      additions on top of a win score can never overflow the search window
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from draughtsai.core.enums import Color, Piece
from draughtsai.core.types import dark_squares

if TYPE_CHECKING:
    from draughtsai.core.state import DraughtsState

# Search window bounds, matching the host framework's 32-bit score range.
INF_SCORE = 2**31 - 1
WIN_SCORE = INF_SCORE // 2


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    Evaluators are stateless: the same position always yields the same value,
    and evaluating never mutates the position.
    """

    @abstractmethod
    def evaluate(self, position: DraughtsState) -> int:
        """
        Evaluate a position from white's perspective.

        Args:
            position: Game state to score (not modified)

        Returns:
            int: Evaluation, positive when white is better
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def terminal_score(position: DraughtsState) -> int:
    """Score a finished game: the side to move without pieces has lost.

    Any other terminal position is a draw and scores exactly 0.
    """
    mover = Color.WHITE if position.is_side_to_move_maximizing() else Color.BLACK
    for row, col in dark_squares():
        if Piece(position.piece_at(row, col)).color == mover:
            return 0
    return -mover.sign * WIN_SCORE
