"""Horizon handling: capture extension, quiescence check and leaf scoring."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from draughtsai.engine.search import CaptureExtension, SearchConfig

if TYPE_CHECKING:
    from draughtsai.core.state import DraughtsMove, DraughtsState
    from draughtsai.evaluation.base import Evaluator


class SearchExtensionPolicy:
    """Decides child depths and how a horizon node is scored."""

    __slots__ = ("_capture", "_quiescence", "_margin", "_penalty")

    def __init__(self, config: SearchConfig) -> None:
        self._capture = config.capture_extension
        self._quiescence = config.quiescence_check
        self._margin = config.quiet_margin
        self._penalty = config.quiet_penalty

    def child_depth(self, move: DraughtsMove, depth: int) -> int:
        if move.is_capture:
            if self._capture is CaptureExtension.HOLD:
                return depth
            if self._capture is CaptureExtension.EXTEND:
                return depth + 1
        return depth - 1

    def at_horizon(self, depth: int, moves: Sequence[DraughtsMove]) -> bool:
        """True when the node is scored statically instead of expanded.

        With a capture extension active, a pending capture keeps the node
        open past the horizon.
        """
        if depth >= 0:
            return False
        if self._capture is CaptureExtension.NONE:
            return True
        return not any(move.is_capture for move in moves)

    def settle(
        self,
        position: DraughtsState,
        moves: Sequence[DraughtsMove],
        value: int,
        evaluator: Evaluator,
        static: int | None = None,
    ) -> int:
        """Apply the not-quiet penalty to a horizon *value* when enabled.

        *static* is the plain evaluation of the position when *value* came
        from another leaf evaluator; it defaults to *value*.
        """
        if not self._quiescence:
            return value
        if static is None:
            static = value
        if self.is_quiet(position, moves, static, evaluator):
            return value
        if position.is_side_to_move_maximizing():
            return value - self._penalty
        return value + self._penalty

    def is_quiet(
        self,
        position: DraughtsState,
        moves: Sequence[DraughtsMove],
        value: int,
        evaluator: Evaluator,
    ) -> bool:
        """Whether the best one-ply reply stays within the quiet margin."""
        if not moves:
            return True
        replies = []
        for move in moves:
            position.apply_move(move)
            try:
                replies.append(evaluator.evaluate(position))
            finally:
                position.undo_move(move)
        extreme = max(replies) if position.is_side_to_move_maximizing() else min(replies)
        return abs(value - extreme) <= self._margin
