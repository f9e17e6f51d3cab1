"""Qt bridge to run the draughts search in a worker thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from draughtsai.core.state import DraughtsState
from draughtsai.engine.presets import DEFAULT_PRESET, UnknownPresetError, load_preset
from draughtsai.engine.search import IEngine, NoLegalMovesError

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    ``cancel`` stops the running search early; the best move of the last
    completed depth is still delivered through ``best_move_ready``.
    """

    best_move_ready = pyqtSignal(int, object, int, int, int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_driver", "_preset_name", "_max_depth")

    def __init__(
        self,
        *,
        preset: str = DEFAULT_PRESET,
        max_depth: int | None = None,
    ) -> None:
        super().__init__()
        self._max_depth = max_depth
        self._preset_name = preset
        self._driver: IEngine = self._build_driver(preset)

    @property
    def preset_name(self) -> str:
        return self._preset_name

    def _build_driver(self, name: str) -> IEngine:
        overrides = {} if self._max_depth is None else {"max_depth": self._max_depth}
        return load_preset(name, **overrides).build_driver()

    @pyqtSlot(object, int)
    def request_move(self, position_obj: object, request_id: int) -> None:
        """Search for the best move in *position_obj* and emit result."""
        if not isinstance(position_obj, DraughtsState):
            self.search_error.emit(request_id, "Engine received invalid position")
            return

        try:
            result = self._driver.search(position_obj)
        except NoLegalMovesError:
            self.search_no_move.emit(request_id)
            return
        except Exception as exc:
            _LOGGER.exception("Engine search failed")
            self.search_error.emit(request_id, str(exc))
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.value,
            result.depth,
            result.nodes,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Stop the current search. Safe to call from the GUI thread."""
        self._driver.request_stop()

    @pyqtSlot(str)
    def set_preset(self, name: str) -> None:
        """Switch engine preset (takes effect on the next search)."""
        try:
            self._driver = self._build_driver(name)
        except UnknownPresetError:
            _LOGGER.warning(
                "Unknown engine preset %r, keeping %r", name, self._preset_name
            )
            return
        self._preset_name = name
