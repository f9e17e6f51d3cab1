"""Named engine configurations.

Each preset pairs a :class:`SearchConfig` with an evaluation. A preset with
no weights evaluates by plain material count.

Example:
    >>> preset = load_preset("quiescent", max_depth=6)
    >>> driver = preset.build_driver()
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from draughtsai.engine.driver import IterationCallback, IterativeDeepeningDriver
from draughtsai.engine.search import CaptureExtension, SearchConfig
from draughtsai.evaluation.base import Evaluator
from draughtsai.evaluation.evaluator import DraughtsEvaluator
from draughtsai.evaluation.material import MaterialEvaluator
from draughtsai.evaluation.tables import FORTIFIED_BASE, FORWARD_PRESSURE
from draughtsai.evaluation.weights import EvaluationWeights

DEFAULT_PRESET = "tables"


class UnknownPresetError(KeyError):
    """Raised when a preset name is not registered."""


@dataclass(slots=True, frozen=True)
class Preset:
    name: str
    description: str
    config: SearchConfig
    weights: EvaluationWeights | None = None

    def evaluator(self) -> Evaluator:
        if self.weights is None:
            return MaterialEvaluator()
        return DraughtsEvaluator(self.weights)

    def build_driver(
        self, on_iteration: IterationCallback | None = None
    ) -> IterativeDeepeningDriver:
        return IterativeDeepeningDriver(
            self.evaluator(), self.config, on_iteration=on_iteration
        )


_TENT_WEIGHTS = EvaluationWeights(
    advancement=1,
    centering=1,
    balance=(10, 15, 10),
    balance_all=20,
    domination=(20, 25, 20),
    support=2,
)

PRESETS: dict[str, Preset] = {
    preset.name: preset
    for preset in (
        Preset(
            "material",
            "Piece count only.",
            SearchConfig(capture_extension=CaptureExtension.NONE),
        ),
        Preset(
            "tent",
            "Tent-shaped advancement and centering, balanced thirds, support.",
            SearchConfig(),
            _TENT_WEIGHTS,
        ),
        Preset(
            "tables",
            "Forward-pressure table, squared domination and V formations.",
            SearchConfig(),
            EvaluationWeights(
                placement_table=FORWARD_PRESSURE,
                table_scale=10,
                balance=(500, 500, 500),
                domination=(100, 130, 100),
                domination_exponent=2,
                v_formation=20,
                v_exponent=2,
            ),
        ),
        Preset(
            "fortified",
            "Back-rank table with flat domination and linear V formations.",
            SearchConfig(),
            EvaluationWeights(
                placement_table=FORTIFIED_BASE,
                balance=(750, 750, 750),
                domination=(1000, 2000, 1000),
                v_formation=25,
            ),
        ),
        Preset(
            "quiescent",
            "Quiescence check, statically sorted and halved root move list.",
            SearchConfig(
                max_depth=20,
                quiescence_check=True,
                static_sort_plies=1,
                root_move_fraction=0.5,
            ),
            replace(_TENT_WEIGHTS, advancement=4),
        ),
        Preset(
            "randomized",
            "Random choice among moves within a few points of the best.",
            SearchConfig(tie_break_margin=5),
            _TENT_WEIGHTS,
        ),
        Preset(
            "rollout",
            "Horizon nodes scored by short random playouts.",
            SearchConfig(rollout_tries=10, rollout_depth=3),
            EvaluationWeights(),
        ),
        Preset(
            "hinted",
            "Piece count with best-move hints keyed by position fingerprint.",
            SearchConfig(use_hint_cache=True),
        ),
    )
}


def preset_names() -> list[str]:
    return sorted(PRESETS)


def load_preset(name: str, **overrides: object) -> Preset:
    """Return preset *name* with *overrides* applied to its search config.

    Raises:
        UnknownPresetError: *name* is not registered.
        TypeError: An override does not name a :class:`SearchConfig` field.
        ValueError: The overridden config is invalid.
    """
    try:
        preset = PRESETS[name]
    except KeyError:
        raise UnknownPresetError(name) from None
    if not overrides:
        return preset
    return replace(preset, config=replace(preset.config, **overrides))
