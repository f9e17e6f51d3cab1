"""Horizon evaluation by short random playouts."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from draughtsai.evaluation.base import Evaluator

if TYPE_CHECKING:
    from draughtsai.core.state import DraughtsState


class RolloutEvaluator(Evaluator):
    """Averages *base* over random playouts started from the position.

    Playouts run on ``position.clone()``; the searched position itself is
    never touched. Terminal positions are scored by *base* directly.
    """

    __slots__ = ("_base", "_tries", "_depth", "_rng")

    def __init__(
        self,
        base: Evaluator,
        *,
        tries: int = 10,
        depth: int = 3,
        rng: random.Random | None = None,
    ) -> None:
        if tries < 1:
            raise ValueError("Rollout tries must be >= 1")
        if depth < 0:
            raise ValueError("Rollout depth must be >= 0")
        self._base = base
        self._tries = tries
        self._depth = depth
        self._rng = rng or random.Random()

    def evaluate(self, position: DraughtsState) -> int:
        if position.is_terminal():
            return self._base.evaluate(position)

        total = 0
        for _ in range(self._tries):
            state = position.clone()
            for _ in range(self._depth):
                moves = list(state.legal_moves())
                if not moves:
                    break
                state.apply_move(self._rng.choice(moves))
            total += self._base.evaluate(state)
        return int(total / self._tries)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self._base!r}, "
            f"tries={self._tries}, depth={self._depth})"
        )
