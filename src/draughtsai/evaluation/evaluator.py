"""Multi-term positional evaluation for 10x10 draughts."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from draughtsai.core.enums import Color, Piece
from draughtsai.core.types import BOARD_SIZE, dark_squares, is_on_board
from draughtsai.evaluation.base import Evaluator, terminal_score
from draughtsai.evaluation.tables import table_for
from draughtsai.evaluation.weights import EvaluationWeights

if TYPE_CHECKING:
    from draughtsai.core.state import DraughtsState

Grid = list[list[Piece]]

_LAST = BOARD_SIZE - 1
_LEFT_EDGE = 2
_RIGHT_EDGE = 7
_SUPPORT_OFFSETS = ((-2, 0), (-1, -1), (-1, 1), (1, -1), (1, 1), (2, 0))
# ceil(exp(advancement - 4.5)): support further up the board counts more.
_SUPPORT_FACTOR = tuple(math.ceil(math.exp(a - 4.5)) for a in range(BOARD_SIZE))


def _tent(x: int) -> int:
    """Peaks at the middle of the board, 0 at either edge."""
    return min(x, _LAST - x)


def _third(col: int) -> int:
    if col <= _LEFT_EDGE:
        return 0
    if col >= _RIGHT_EDGE:
        return 2
    return 1


def _advancement(row: int, color: Color) -> int:
    """Rows travelled from the owner's back rank."""
    return _LAST - row if color == Color.WHITE else row


def _backward(color: Color) -> int:
    """Row step toward the owner's back rank."""
    return 1 if color == Color.WHITE else -1


class DraughtsEvaluator(Evaluator):
    """Additive evaluation: material, placement, shape and distribution.

    Material dominates: the default man is worth 10 000 while positional
    terms stay in the low hundreds, so the search never trades a man for
    position.
    """

    __slots__ = ("_weights",)

    def __init__(self, weights: EvaluationWeights | None = None) -> None:
        self._weights = weights or EvaluationWeights()

    @property
    def weights(self) -> EvaluationWeights:
        return self._weights

    def evaluate(self, position: DraughtsState) -> int:
        if position.is_terminal():
            return terminal_score(position)
        grid = _read_grid(position)

        w = self._weights
        value = 0
        thirds = {Color.WHITE: [0, 0, 0], Color.BLACK: [0, 0, 0]}

        for row, col in dark_squares():
            piece = grid[row][col]
            if piece is Piece.EMPTY:
                continue
            color = piece.color
            assert color is not None
            sign = color.sign

            if piece.is_king:
                value += sign * w.king_value
                continue

            advancement = _advancement(row, color)
            score = w.man_value
            if w.placement_table is not None:
                score += table_for(w.placement_table, color)[row][col] * w.table_scale
            score += w.advancement * _tent(advancement) + w.centering * _tent(col)
            if w.support:
                score += w.support * _support(grid, row, col, piece, advancement)
            if w.v_formation:
                score += self._v_formation(grid, row, col, piece, color, advancement)
            value += sign * score
            thirds[color][_third(col)] += 1

        return value + self._distribution(thirds)

    def _v_formation(
        self,
        grid: Grid,
        row: int,
        col: int,
        piece: Piece,
        color: Color,
        advancement: int,
    ) -> int:
        w = self._weights
        full = w.v_formation * advancement**w.v_exponent
        step = _backward(color)
        score = 0
        for side in (-1, 1):
            near_row, near_col = row + step, col + side
            far_row, far_col = row + 2 * step, col + 2 * side
            if not is_on_board(near_row, near_col):
                continue
            if grid[near_row][near_col] is not piece:
                continue
            if not is_on_board(far_row, far_col):
                # Against the edge a single supporter is the whole chain.
                score += full // 2
            elif grid[far_row][far_col] is piece:
                score += full
        return score

    def _distribution(self, thirds: dict[Color, list[int]]) -> int:
        w = self._weights
        value = 0
        for color, counts in thirds.items():
            men = sum(counts)
            if men == 0:
                continue
            fair = (men // 3, -(-men // 3))
            bonus = 0
            balanced = 0
            for idx, count in enumerate(counts):
                if count in fair:
                    bonus += w.balance[idx]
                    balanced += 1
            if balanced == 3:
                bonus += w.balance_all
            value += color.sign * bonus

        for idx in range(3):
            diff = thirds[Color.WHITE][idx] - thirds[Color.BLACK][idx]
            if diff and w.domination[idx]:
                sign = 1 if diff > 0 else -1
                value += sign * w.domination[idx] * abs(diff) ** w.domination_exponent
        return value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._weights!r})"


def _read_grid(position: DraughtsState) -> Grid:
    grid = [[Piece.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for row, col in dark_squares():
        grid[row][col] = Piece(position.piece_at(row, col))
    return grid


def _support(grid: Grid, row: int, col: int, piece: Piece, advancement: int) -> int:
    count = 0
    for d_row, d_col in _SUPPORT_OFFSETS:
        r, c = row + d_row, col + d_col
        if is_on_board(r, c) and grid[r][c] is piece:
            count += 1
    return count * _SUPPORT_FACTOR[advancement]

