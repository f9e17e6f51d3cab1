"""Tests for RolloutEvaluator."""

import random

import pytest

from draughtsai.evaluation import RolloutEvaluator
from draughtsai.testing import GameTreePosition, TreeEvaluator


class TestRolloutEvaluator:
    def test_averages_playout_results(self) -> None:
        # Every playout of up to three plies ends on a leaf worth 7.
        position = GameTreePosition.from_nested((0, [(1, [7, 7]), (2, [7])]))
        evaluator = RolloutEvaluator(TreeEvaluator(), tries=5, rng=random.Random(1))
        assert evaluator.evaluate(position) == 7

    def test_depth_zero_is_static_value(self) -> None:
        position = GameTreePosition.from_nested((42, [1, 2, 3]))
        evaluator = RolloutEvaluator(TreeEvaluator(), tries=3, depth=0)
        assert evaluator.evaluate(position) == 42

    def test_mean_of_random_children(self) -> None:
        position = GameTreePosition.from_nested((0, [10, 20]))
        base = TreeEvaluator()
        evaluator = RolloutEvaluator(base, tries=10, depth=1, rng=random.Random(3))
        value = evaluator.evaluate(position)
        assert 10 <= value <= 20
        assert base.calls == 10

    def test_terminal_uses_base(self) -> None:
        position = GameTreePosition.from_nested(-5)
        base = TreeEvaluator()
        evaluator = RolloutEvaluator(base, tries=10)
        assert evaluator.evaluate(position) == -5
        assert base.calls == 1

    def test_live_position_is_untouched(self) -> None:
        position = GameTreePosition.from_nested((0, [(1, [2, 3]), (4, [5])]))
        RolloutEvaluator(TreeEvaluator(), rng=random.Random(0)).evaluate(position)
        assert position.path == ()
        assert position.applied == 0

    @pytest.mark.parametrize(("tries", "depth"), [(0, 3), (1, -1)])
    def test_rejects_bad_settings(self, tries: int, depth: int) -> None:
        with pytest.raises(ValueError):
            RolloutEvaluator(TreeEvaluator(), tries=tries, depth=depth)
