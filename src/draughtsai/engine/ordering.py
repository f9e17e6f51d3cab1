"""Move ordering: preferred moves first, optional static sort and capping."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from draughtsai.engine.search import SearchConfig

if TYPE_CHECKING:
    from draughtsai.core.state import DraughtsMove, DraughtsState
    from draughtsai.evaluation.base import Evaluator


class MoveOrderer:
    """Orders candidate moves; never drops moves unless capping is asked for."""

    __slots__ = ("_evaluator", "_sort_plies", "_fraction")

    def __init__(self, config: SearchConfig, evaluator: Evaluator) -> None:
        self._evaluator = evaluator
        self._sort_plies = config.static_sort_plies
        self._fraction = config.root_move_fraction

    def order(
        self,
        position: DraughtsState,
        moves: Sequence[DraughtsMove],
        *,
        ply: int,
        preferred: Iterable[DraughtsMove | None] = (),
        capped: bool = False,
    ) -> list[DraughtsMove]:
        ordered = list(moves)
        if ply < self._sort_plies and len(ordered) > 1:
            ordered = self._static_sort(position, ordered)

        front: list[DraughtsMove] = []
        for move in preferred:
            # Stale hints and moves from another position are dropped here.
            if move is not None and move in ordered and move not in front:
                front.append(move)
        if front:
            ordered = front + [move for move in ordered if move not in front]

        if capped and self._fraction is not None:
            keep = min(len(ordered), int(len(ordered) * self._fraction) + 1)
            ordered = ordered[:keep]
        return ordered

    def _static_sort(
        self, position: DraughtsState, moves: list[DraughtsMove]
    ) -> list[DraughtsMove]:
        scores = []
        for move in moves:
            position.apply_move(move)
            try:
                scores.append(self._evaluator.evaluate(position))
            finally:
                position.undo_move(move)
        maximizing = position.is_side_to_move_maximizing()
        ranked = sorted(
            range(len(moves)),
            key=lambda idx: -scores[idx] if maximizing else scores[idx],
        )
        return [moves[idx] for idx in ranked]
