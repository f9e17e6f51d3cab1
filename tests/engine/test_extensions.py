"""Tests for SearchExtensionPolicy."""

import pytest

from draughtsai.engine.extensions import SearchExtensionPolicy
from draughtsai.engine.search import CaptureExtension, SearchConfig
from draughtsai.testing import GameTreePosition, TreeEvaluator, TreeMove

QUIET = TreeMove("q")
CAPTURE = TreeMove("c", is_capture=True)


class TestChildDepth:
    @pytest.mark.parametrize(
        ("mode", "capture_depth"),
        [
            (CaptureExtension.NONE, 2),
            (CaptureExtension.HOLD, 3),
            (CaptureExtension.EXTEND, 4),
        ],
    )
    def test_capture_depth(self, mode: CaptureExtension, capture_depth: int) -> None:
        policy = SearchExtensionPolicy(SearchConfig(capture_extension=mode))
        assert policy.child_depth(CAPTURE, 3) == capture_depth
        assert policy.child_depth(QUIET, 3) == 2


class TestHorizon:
    def test_not_before_depth_goes_negative(self) -> None:
        policy = SearchExtensionPolicy(SearchConfig())
        assert not policy.at_horizon(0, [QUIET])

    def test_quiet_node_below_zero(self) -> None:
        policy = SearchExtensionPolicy(SearchConfig())
        assert policy.at_horizon(-1, [QUIET])

    def test_pending_capture_keeps_node_open(self) -> None:
        policy = SearchExtensionPolicy(SearchConfig())
        assert not policy.at_horizon(-3, [QUIET, CAPTURE])

    def test_without_extension_captures_are_cut(self) -> None:
        config = SearchConfig(capture_extension=CaptureExtension.NONE)
        assert SearchExtensionPolicy(config).at_horizon(-1, [CAPTURE])


class TestQuiescence:
    CONFIG = SearchConfig(quiescence_check=True, quiet_margin=150, quiet_penalty=500)

    def _settle(self, tree, *, maximizing: bool = True, static=None) -> int:
        position = GameTreePosition.from_nested(tree, maximizing=maximizing)
        policy = SearchExtensionPolicy(self.CONFIG)
        value = position.static_value()
        return policy.settle(
            position, position.legal_moves(), value, TreeEvaluator(), static
        )

    def test_exactly_at_margin_is_quiet(self) -> None:
        assert self._settle((0, [150, -300])) == 0

    def test_one_past_margin_is_penalised(self) -> None:
        assert self._settle((0, [151, -300])) == -500

    def test_minimizer_penalty_is_added(self) -> None:
        assert self._settle((0, [-151, 300]), maximizing=False) == 500

    def test_minimizer_uses_lowest_reply(self) -> None:
        # The 400 reply is irrelevant: black would pick -100.
        assert self._settle((0, [-100, 400]), maximizing=False) == 0

    def test_separate_static_value(self) -> None:
        # Playout value 40 is penalised because the static 0 is not quiet.
        position = GameTreePosition.from_nested((0, [200]))
        policy = SearchExtensionPolicy(self.CONFIG)
        value = policy.settle(position, position.legal_moves(), 40, TreeEvaluator(), 0)
        assert value == -460

    def test_disabled_check_is_a_no_op(self) -> None:
        position = GameTreePosition.from_nested((0, [10_000]))
        policy = SearchExtensionPolicy(SearchConfig())
        assert policy.settle(position, position.legal_moves(), 0, TreeEvaluator()) == 0

    def test_replies_are_undone(self) -> None:
        position = GameTreePosition.from_nested((0, [1, 2, 3]))
        policy = SearchExtensionPolicy(self.CONFIG)
        assert policy.is_quiet(position, position.legal_moves(), 0, TreeEvaluator())
        assert position.path == ()
        assert position.undone == 3
