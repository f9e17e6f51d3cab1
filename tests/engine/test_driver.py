"""Tests for the iterative deepening driver."""

from __future__ import annotations

import logging
import threading

import pytest

from draughtsai.engine.driver import IterativeDeepeningDriver
from draughtsai.engine.search import NoLegalMovesError, SearchConfig, SearchResult
from draughtsai.testing import (
    EndlessPosition,
    GameTreePosition,
    TreeEvaluator,
    TreeMove,
)


class _StoppingEvaluator(TreeEvaluator):
    """Stops its driver after *limit* evaluations."""

    def __init__(self, limit: int) -> None:
        super().__init__()
        self.limit = limit
        self.driver: IterativeDeepeningDriver | None = None

    def evaluate(self, position) -> int:
        value = super().evaluate(position)
        if self.calls == self.limit and self.driver is not None:
            self.driver.request_stop()
        return value


class _DrawnPosition(GameTreePosition):
    """Reports game over (e.g. a draw rule) while moves are still listed."""

    __slots__ = ()

    def is_terminal(self) -> bool:
        return True


class TestIterativeDeepening:
    def test_choose_move_on_classic_tree(
        self, classic_tree: GameTreePosition, tree_evaluator: TreeEvaluator
    ) -> None:
        driver = IterativeDeepeningDriver(tree_evaluator, SearchConfig(max_depth=3))

        move = driver.choose_move(classic_tree)

        assert move == TreeMove("0")
        assert driver.last_evaluation_value() == 3
        assert driver.last_result is not None
        assert driver.last_result.depth == 3

    def test_depth_increases_one_per_iteration(
        self, tree_evaluator: TreeEvaluator
    ) -> None:
        results: list[SearchResult] = []
        driver = IterativeDeepeningDriver(
            tree_evaluator,
            SearchConfig(max_depth=5),
            on_iteration=results.append,
        )

        final = driver.search(EndlessPosition(branching=2))

        assert [r.depth for r in results] == [1, 2, 3, 4, 5]
        nodes = [r.nodes for r in results]
        assert nodes == sorted(nodes)
        assert final == results[-1]

    def test_no_legal_moves_raises(self, tree_evaluator: TreeEvaluator) -> None:
        driver = IterativeDeepeningDriver(tree_evaluator)
        with pytest.raises(NoLegalMovesError):
            driver.choose_move(GameTreePosition.from_nested(4))

    def test_terminal_root_with_moves_falls_back_to_random_move(
        self, tree_evaluator: TreeEvaluator, caplog: pytest.LogCaptureFixture
    ) -> None:
        tree = GameTreePosition.from_nested([1, 2, 3])
        position = _DrawnPosition(tree.node)
        driver = IterativeDeepeningDriver(tree_evaluator, SearchConfig(max_depth=3))

        with caplog.at_level(logging.WARNING, logger="draughtsai.engine.driver"):
            result = driver.search(position)

        assert result.best_move in position.legal_moves()
        assert result.depth == 0
        assert driver.choose_move(position) in position.legal_moves()
        assert any(r.levelno == logging.WARNING for r in caplog.records)

    def test_last_evaluation_defaults_to_zero(
        self, tree_evaluator: TreeEvaluator
    ) -> None:
        assert IterativeDeepeningDriver(tree_evaluator).last_evaluation_value() == 0

    def test_node_counter_is_per_call(
        self, classic_tree: GameTreePosition, tree_evaluator: TreeEvaluator
    ) -> None:
        driver = IterativeDeepeningDriver(tree_evaluator, SearchConfig(max_depth=2))
        first = driver.search(classic_tree)
        second = driver.search(classic_tree)
        assert first.nodes == second.nodes

    def test_fresh_hint_cache_per_call(
        self, classic_tree: GameTreePosition, tree_evaluator: TreeEvaluator
    ) -> None:
        config = SearchConfig(max_depth=2, use_hint_cache=True)
        driver = IterativeDeepeningDriver(tree_evaluator, config)
        driver.search(classic_tree)
        first = driver.hints
        driver.search(classic_tree)
        assert first is not None
        assert driver.hints is not first
        assert driver.hints is not None and driver.hints.stores > 0

    def test_hint_cache_disabled_by_default(
        self, classic_tree: GameTreePosition, tree_evaluator: TreeEvaluator
    ) -> None:
        driver = IterativeDeepeningDriver(tree_evaluator, SearchConfig(max_depth=2))
        driver.search(classic_tree)
        assert driver.hints is None

    def test_logs_summary(
        self,
        classic_tree: GameTreePosition,
        tree_evaluator: TreeEvaluator,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        driver = IterativeDeepeningDriver(tree_evaluator, SearchConfig(max_depth=2))
        with caplog.at_level(logging.DEBUG, logger="draughtsai.engine.driver"):
            driver.search(classic_tree)
        levels = [record.levelno for record in caplog.records]
        assert levels.count(logging.DEBUG) == 2
        assert levels.count(logging.INFO) == 1


class TestStopping:
    def test_stop_before_search_falls_back_to_random_move(
        self,
        tree_evaluator: TreeEvaluator,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        position = GameTreePosition.from_nested([1, 2, 3])
        driver = IterativeDeepeningDriver(tree_evaluator, SearchConfig(seed=3))
        driver.request_stop()

        with caplog.at_level(logging.WARNING, logger="draughtsai.engine.driver"):
            result = driver.search(position)

        assert result.best_move in position.legal_moves()
        assert result.value == 0
        assert result.depth == 0
        assert any(r.levelno == logging.WARNING for r in caplog.records)

    def test_single_move_with_immediate_stop(
        self, tree_evaluator: TreeEvaluator
    ) -> None:
        position = GameTreePosition.from_nested([(5, [1, 2])])
        driver = IterativeDeepeningDriver(tree_evaluator)
        driver.request_stop()
        assert driver.choose_move(position) == TreeMove("0")
        assert driver.last_evaluation_value() == 0

    def test_stale_stop_does_not_leak_into_next_search(
        self, classic_tree: GameTreePosition, tree_evaluator: TreeEvaluator
    ) -> None:
        driver = IterativeDeepeningDriver(
            tree_evaluator,
            SearchConfig(max_depth=2),
            on_iteration=lambda _result: driver.request_stop(),
        )
        first = driver.search(classic_tree)
        driver.on_iteration = None
        second = driver.search(classic_tree)

        assert first.depth == 1
        assert second.depth == 2

    @pytest.mark.parametrize("limit", [1, 3, 10, 40, 200])
    def test_injected_stop_keeps_position_and_last_result(self, limit: int) -> None:
        evaluator = _StoppingEvaluator(limit)
        results: list[SearchResult] = []
        driver = IterativeDeepeningDriver(evaluator, on_iteration=results.append)
        evaluator.driver = driver
        position = EndlessPosition(branching=3)

        result = driver.search(position)

        assert position.path == ()
        assert position.applied == position.undone
        assert result.best_move in position.legal_moves()
        if results:
            assert result == results[-1]
        else:
            assert result.depth == 0

    def test_stop_from_another_thread(self, tree_evaluator: TreeEvaluator) -> None:
        driver = IterativeDeepeningDriver(tree_evaluator)
        position = EndlessPosition(branching=3)
        timer = threading.Timer(0.2, driver.request_stop)

        timer.start()
        try:
            result = driver.search(position)
        finally:
            timer.cancel()

        assert result.depth >= 1
        assert result.best_move in position.legal_moves()
        assert position.path == ()

    def test_external_cancel_callback(
        self, classic_tree: GameTreePosition, tree_evaluator: TreeEvaluator
    ) -> None:
        polls = 0

        def is_cancelled() -> bool:
            nonlocal polls
            polls += 1
            return polls > 20

        driver = IterativeDeepeningDriver(tree_evaluator)
        result = driver.search(EndlessPosition(branching=2), is_cancelled)

        assert result.best_move is not None
        # The callback is detached once the search returns.
        assert driver.search(classic_tree, None).depth > 0
