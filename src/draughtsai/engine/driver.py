"""Iterative deepening on top of :class:`AlphaBetaEngine`."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from typing import TYPE_CHECKING

from draughtsai.engine.alphabeta import AlphaBetaEngine, SearchNode
from draughtsai.engine.cancellation import CancellationController, SearchAborted
from draughtsai.engine.hints import TranspositionHintCache
from draughtsai.engine.search import (
    CancelCheck,
    NoLegalMovesError,
    SearchConfig,
    SearchResult,
)
from draughtsai.evaluation.base import INF_SCORE

if TYPE_CHECKING:
    from draughtsai.core.state import DraughtsMove, DraughtsState
    from draughtsai.evaluation.base import Evaluator

_LOGGER = logging.getLogger(__name__)

IterationCallback = Callable[[SearchResult], None]


class IterativeDeepeningDriver:
    """Searches depth 1, 2, ... until stopped and keeps the last full result.

    ``request_stop`` may be called from any thread while ``search`` runs on
    another; the iteration in progress is discarded and the previous one's
    best move is returned.
    """

    __slots__ = (
        "_config",
        "_cancel",
        "_rng",
        "_engine",
        "_last_result",
        "on_iteration",
    )

    def __init__(
        self,
        evaluator: Evaluator,
        config: SearchConfig | None = None,
        *,
        on_iteration: IterationCallback | None = None,
    ) -> None:
        self._config = config or SearchConfig()
        self._cancel = CancellationController()
        self._rng = random.Random(self._config.seed)
        self._engine = AlphaBetaEngine(
            self._config,
            evaluator,
            cancellation=self._cancel,
            rng=self._rng,
        )
        self._last_result: SearchResult | None = None
        self.on_iteration = on_iteration

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def last_result(self) -> SearchResult | None:
        return self._last_result

    @property
    def hints(self) -> TranspositionHintCache | None:
        return self._engine.hints

    def request_stop(self) -> None:
        self._cancel.request_stop()

    def last_evaluation_value(self) -> int:
        """Value of the last completed iteration of the last search (0 if none)."""
        if self._last_result is None:
            return 0
        return self._last_result.value

    def choose_move(self, position: DraughtsState) -> DraughtsMove:
        result = self.search(position)
        assert result.best_move is not None
        return result.best_move

    def search(
        self,
        position: DraughtsState,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        """Run iterative deepening on *position* until stopped or max depth.

        Raises:
            NoLegalMovesError: *position* has no legal moves.
        """
        moves = list(position.legal_moves())
        if not moves:
            raise NoLegalMovesError("Position has no legal moves")

        self._cancel.attach(is_cancelled)
        self._engine.nodes = 0
        self._engine.hints = (
            TranspositionHintCache() if self._config.use_hint_cache else None
        )
        try:
            result = self._deepen(position)
        finally:
            self._cancel.reset()

        if result is None:
            move = self._rng.choice(moves)
            _LOGGER.warning(
                "No completed search iteration, playing random move %s",
                move,
            )
            result = SearchResult(move, 0, 0, self._engine.nodes)
        else:
            _LOGGER.info(
                "Search done: depth=%d best=%s value=%d nodes=%d",
                result.depth,
                result.best_move,
                result.value,
                result.nodes,
            )
        self._last_result = result
        return result

    def _deepen(self, position: DraughtsState) -> SearchResult | None:
        config = self._config
        margin = config.tie_break_margin
        alpha = -INF_SCORE + 2 * margin
        beta = INF_SCORE - 2 * margin

        result: SearchResult | None = None
        depth = 0
        while not self._cancel.stop_requested and depth < config.max_depth:
            depth += 1
            preferred = ()
            if config.reuse_root_move and result is not None:
                preferred = (result.best_move,)
            node = SearchNode(position)
            try:
                value = self._engine.search(
                    node,
                    alpha,
                    beta,
                    depth,
                    preferred=preferred,
                    capped=result is not None,
                )
            except SearchAborted:
                _LOGGER.debug("Search aborted during depth %d", depth)
                break
            if node.best_move is None:
                # Root scored as terminal although the host still lists moves.
                _LOGGER.debug("No root move recorded at depth %d", depth)
                break

            result = SearchResult(node.best_move, value, depth, self._engine.nodes)
            _LOGGER.debug(
                "depth=%d best=%s value=%d nodes=%d",
                depth,
                node.best_move,
                value,
                self._engine.nodes,
            )
            if self.on_iteration is not None:
                self.on_iteration(result)
        return result
