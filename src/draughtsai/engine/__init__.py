"""Draughts search engine: alpha-beta, iterative deepening and presets."""

from draughtsai.engine.alphabeta import AlphaBetaEngine, SearchNode
from draughtsai.engine.cancellation import CancellationController, SearchAborted
from draughtsai.engine.driver import IterativeDeepeningDriver
from draughtsai.engine.extensions import SearchExtensionPolicy
from draughtsai.engine.hints import TranspositionHintCache
from draughtsai.engine.ordering import MoveOrderer
from draughtsai.engine.presets import (
    PRESETS,
    Preset,
    UnknownPresetError,
    load_preset,
    preset_names,
)
from draughtsai.engine.search import (
    CaptureExtension,
    IEngine,
    NoLegalMovesError,
    SearchConfig,
    SearchResult,
)

__all__ = [
    "PRESETS",
    "AlphaBetaEngine",
    "CancellationController",
    "CaptureExtension",
    "IEngine",
    "IterativeDeepeningDriver",
    "MoveOrderer",
    "NoLegalMovesError",
    "Preset",
    "SearchAborted",
    "SearchConfig",
    "SearchExtensionPolicy",
    "SearchNode",
    "SearchResult",
    "TranspositionHintCache",
    "UnknownPresetError",
    "load_preset",
    "preset_names",
]
