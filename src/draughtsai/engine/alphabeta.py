"""Depth-limited alpha-beta minimax over a single live position."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from draughtsai.engine.cancellation import CancellationController
from draughtsai.engine.extensions import SearchExtensionPolicy
from draughtsai.engine.hints import TranspositionHintCache
from draughtsai.engine.ordering import MoveOrderer
from draughtsai.engine.search import SearchConfig
from draughtsai.evaluation.base import INF_SCORE
from draughtsai.evaluation.rollout import RolloutEvaluator

if TYPE_CHECKING:
    from draughtsai.core.state import DraughtsMove, DraughtsState
    from draughtsai.evaluation.base import Evaluator


@dataclass(slots=True)
class SearchNode:
    """One recursion frame: the live position, its ply and its best move."""

    position: DraughtsState
    ply: int = 0
    best_move: DraughtsMove | None = None


class AlphaBetaEngine:
    """Fail-hard alpha-beta with capture extension and optional quiescence.

    Values are from white's perspective: white maximizes, black minimizes.
    Every ``apply_move`` is undone before the call returns, including when a
    stop unwinds the recursion.
    """

    __slots__ = (
        "_config",
        "_evaluator",
        "_leaf",
        "_policy",
        "_orderer",
        "_cancel",
        "_hints",
        "_rng",
        "nodes",
    )

    def __init__(
        self,
        config: SearchConfig,
        evaluator: Evaluator,
        *,
        cancellation: CancellationController | None = None,
        hints: TranspositionHintCache | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config
        self._evaluator = evaluator
        self._rng = rng or random.Random(config.seed)
        self._leaf: Evaluator = evaluator
        if config.rollout_tries > 0:
            self._leaf = RolloutEvaluator(
                evaluator,
                tries=config.rollout_tries,
                depth=config.rollout_depth,
                rng=self._rng,
            )
        self._policy = SearchExtensionPolicy(config)
        self._orderer = MoveOrderer(config, evaluator)
        self._cancel = cancellation or CancellationController()
        self._hints = hints
        self.nodes = 0

    @property
    def hints(self) -> TranspositionHintCache | None:
        return self._hints

    @hints.setter
    def hints(self, cache: TranspositionHintCache | None) -> None:
        self._hints = cache

    def search(
        self,
        node: SearchNode,
        alpha: int,
        beta: int,
        depth: int,
        *,
        preferred: Iterable[DraughtsMove | None] = (),
        capped: bool = False,
    ) -> int:
        """Return the value of ``node.position`` searched *depth* plies deep.

        Raises:
            SearchAborted: A stop was requested; the position is restored.
        """
        self._cancel.checkpoint()
        self.nodes += 1

        position = node.position
        if position.is_terminal():
            return self._evaluator.evaluate(position)
        moves = position.legal_moves()
        if not moves:
            return self._evaluator.evaluate(position)
        if self._policy.at_horizon(depth, moves):
            return self._horizon_value(position, moves)

        hint = None
        if self._config.use_hint_cache and self._hints is not None:
            hint = self._hints.lookup(position)
        ordered = self._orderer.order(
            position,
            moves,
            ply=node.ply,
            preferred=(*preferred, hint),
            capped=capped,
        )

        if position.is_side_to_move_maximizing():
            return self._maximize(node, ordered, alpha, beta, depth)
        return self._minimize(node, ordered, alpha, beta, depth)

    def _maximize(
        self,
        node: SearchNode,
        moves: list[DraughtsMove],
        alpha: int,
        beta: int,
        depth: int,
    ) -> int:
        margin = self._config.tie_break_margin
        best = moves[0]
        scored: list[tuple[DraughtsMove, int]] = []
        for move in moves:
            if self._config.pruning:
                value = self._child_value(node, move, alpha - margin, beta, depth)
            else:
                value = self._child_value(node, move, -INF_SCORE, INF_SCORE, depth)
            scored.append((move, value))
            if value > alpha:
                alpha = value
                best = move
                if self._config.pruning and alpha >= beta:
                    return beta
        if margin:
            best = self._pick_near_best(scored, lambda v: v > alpha - margin, best)
        self._record(node, best)
        return alpha

    def _minimize(
        self,
        node: SearchNode,
        moves: list[DraughtsMove],
        alpha: int,
        beta: int,
        depth: int,
    ) -> int:
        margin = self._config.tie_break_margin
        best = moves[0]
        scored: list[tuple[DraughtsMove, int]] = []
        for move in moves:
            if self._config.pruning:
                value = self._child_value(node, move, alpha, beta + margin, depth)
            else:
                value = self._child_value(node, move, -INF_SCORE, INF_SCORE, depth)
            scored.append((move, value))
            if value < beta:
                beta = value
                best = move
                if self._config.pruning and alpha >= beta:
                    return alpha
        if margin:
            best = self._pick_near_best(scored, lambda v: v < beta + margin, best)
        self._record(node, best)
        return beta

    def _child_value(
        self,
        node: SearchNode,
        move: DraughtsMove,
        alpha: int,
        beta: int,
        depth: int,
    ) -> int:
        position = node.position
        child_depth = self._policy.child_depth(move, depth)
        position.apply_move(move)
        try:
            child = SearchNode(position, node.ply + 1)
            return self.search(child, alpha, beta, child_depth)
        finally:
            position.undo_move(move)

    def _horizon_value(
        self, position: DraughtsState, moves: Sequence[DraughtsMove]
    ) -> int:
        if self._leaf is self._evaluator:
            value = self._evaluator.evaluate(position)
            return self._policy.settle(position, moves, value, self._evaluator)
        value = self._leaf.evaluate(position)
        if not self._config.quiescence_check:
            return value
        static = self._evaluator.evaluate(position)
        return self._policy.settle(position, moves, value, self._evaluator, static)

    def _pick_near_best(
        self,
        scored: list[tuple[DraughtsMove, int]],
        is_near: Callable[[int], bool],
        fallback: DraughtsMove,
    ) -> DraughtsMove:
        candidates = [move for move, value in scored if is_near(value)]
        if not candidates:
            return fallback
        return self._rng.choice(candidates)

    def _record(self, node: SearchNode, move: DraughtsMove) -> None:
        node.best_move = move
        if self._config.use_hint_cache and self._hints is not None:
            self._hints.store(node.position, move)
