"""Tests for named engine presets."""

import pytest

from draughtsai.engine.driver import IterativeDeepeningDriver
from draughtsai.engine.presets import (
    PRESETS,
    UnknownPresetError,
    load_preset,
    preset_names,
)
from draughtsai.evaluation import DraughtsEvaluator, MaterialEvaluator
from draughtsai.testing import GameTreePosition


class TestPresets:
    def test_known_names(self) -> None:
        assert preset_names() == sorted(
            [
                "fortified",
                "hinted",
                "material",
                "quiescent",
                "randomized",
                "rollout",
                "tables",
                "tent",
            ]
        )

    @pytest.mark.parametrize("name", sorted(PRESETS))
    def test_every_preset_builds_and_searches(self, name: str) -> None:
        driver = load_preset(name, max_depth=2, seed=0).build_driver()
        position = GameTreePosition.from_nested([[1, 2], [3]])
        assert isinstance(driver, IterativeDeepeningDriver)
        assert driver.choose_move(position) in position.legal_moves()
        assert position.path == ()

    def test_material_presets_use_material_evaluator(self) -> None:
        assert isinstance(PRESETS["material"].evaluator(), MaterialEvaluator)
        assert isinstance(PRESETS["hinted"].evaluator(), MaterialEvaluator)
        assert isinstance(PRESETS["tables"].evaluator(), DraughtsEvaluator)

    def test_overrides_replace_config_fields(self) -> None:
        preset = load_preset("quiescent", max_depth=4)
        assert preset.config.max_depth == 4
        assert preset.config.quiescence_check
        assert PRESETS["quiescent"].config.max_depth == 20

    def test_without_overrides_returns_registered_preset(self) -> None:
        assert load_preset("tent") is PRESETS["tent"]

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownPresetError):
            load_preset("nope")
        with pytest.raises(KeyError):
            load_preset("nope")

    def test_unknown_field(self) -> None:
        with pytest.raises(TypeError):
            load_preset("tent", depth=3)

    def test_invalid_override(self) -> None:
        with pytest.raises(ValueError):
            load_preset("tent", root_move_fraction=2.0)
