"""Concrete player implementations."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from draughtsai.engine.presets import DEFAULT_PRESET, load_preset
from draughtsai.engine.search import NoLegalMovesError
from draughtsai.game.interfaces import IPlayer

if TYPE_CHECKING:
    from draughtsai.core.state import DraughtsMove, DraughtsState
    from draughtsai.engine.driver import IterativeDeepeningDriver


class SearchPlayer(IPlayer):
    """A player backed by an :class:`IterativeDeepeningDriver`.

    Args:
        preset: Name of the engine preset to build the driver from.
        name: Display name; defaults to the preset name.
        driver: Ready-made driver to use instead of building one.
        **overrides: :class:`SearchConfig` fields replacing the preset's.
    """

    __slots__ = ("_driver", "_name")

    def __init__(
        self,
        preset: str = DEFAULT_PRESET,
        name: str = "",
        *,
        driver: IterativeDeepeningDriver | None = None,
        **overrides: object,
    ) -> None:
        if driver is None:
            driver = load_preset(preset, **overrides).build_driver()
        self._driver = driver
        self._name = name or preset.capitalize()

    @property
    def name(self) -> str:
        return self._name

    @property
    def driver(self) -> IterativeDeepeningDriver:
        return self._driver

    def choose_move(self, position: DraughtsState) -> DraughtsMove:
        return self._driver.choose_move(position)

    def request_stop(self) -> None:
        self._driver.request_stop()

    def last_evaluation_value(self) -> int:
        return self._driver.last_evaluation_value()


class RandomPlayer(IPlayer):
    """Plays a uniformly random legal move. Useful as a sparring partner."""

    __slots__ = ("_name", "_rng")

    def __init__(self, name: str = "Random", seed: int | None = None) -> None:
        self._name = name
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return self._name

    def choose_move(self, position: DraughtsState) -> DraughtsMove:
        moves = list(position.legal_moves())
        if not moves:
            raise NoLegalMovesError("Position has no legal moves")
        return self._rng.choice(moves)

    def request_stop(self) -> None:
        pass  # Nothing to interrupt

    def last_evaluation_value(self) -> int:
        return 0
