"""Shared engine search models, configuration and protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from draughtsai.core.state import DraughtsMove, DraughtsState

CancelCheck = Callable[[], bool]

DEFAULT_MAX_DEPTH = 200


class NoLegalMovesError(ValueError):
    """Raised when a move is requested in a position without legal moves."""


class CaptureExtension(IntEnum):
    """How a capture move changes the remaining depth of its child."""

    NONE = 0  # always decrement
    HOLD = 1  # captures do not consume depth
    EXTEND = 2  # captures add a ply


@dataclass(slots=True, frozen=True)
class SearchConfig:
    """Knobs of the single configurable search engine.

    Attributes:
        max_depth: Ceiling for iterative deepening.
        pruning: Alpha-beta cutoffs; disable only to measure plain minimax.
        capture_extension: Depth handling of capture moves.
        quiescence_check: Penalize horizon positions that are not quiet.
        quiet_margin: Largest static/one-ply gap still considered quiet.
        quiet_penalty: Applied against the side to move when not quiet.
        reuse_root_move: Try the previous iteration's best move first.
        static_sort_plies: Pre-sort moves by one-ply static value at nodes
            closer to the root than this many plies (0 disables).
        root_move_fraction: Once a first iteration completed, explore only
            this leading fraction of the sorted root moves.
        use_hint_cache: Seed ordering from the transposition hint cache.
        tie_break_margin: Pick randomly among moves within this margin of
            the best (0 disables).
        rollout_tries: Evaluate horizon nodes by this many random playouts
            (0 uses the static evaluation).
        rollout_depth: Maximum plies per random playout.
        seed: Seed for the engine's random choices.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    pruning: bool = True
    capture_extension: CaptureExtension = CaptureExtension.HOLD
    quiescence_check: bool = False
    quiet_margin: int = 150
    quiet_penalty: int = 500
    reuse_root_move: bool = True
    static_sort_plies: int = 0
    root_move_fraction: float | None = None
    use_hint_cache: bool = False
    tie_break_margin: int = 0
    rollout_tries: int = 0
    rollout_depth: int = 3
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")
        if self.quiet_margin < 0 or self.quiet_penalty < 0:
            raise ValueError("Quiescence margin and penalty must be >= 0")
        if self.static_sort_plies < 0:
            raise ValueError("static_sort_plies must be >= 0")
        if self.root_move_fraction is not None and not (
            0.0 < self.root_move_fraction <= 1.0
        ):
            raise ValueError("root_move_fraction must be in (0, 1]")
        if self.tie_break_margin < 0:
            raise ValueError("tie_break_margin must be >= 0")
        if self.rollout_tries < 0 or self.rollout_depth < 0:
            raise ValueError("Rollout settings must be >= 0")


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result of one completed iterative-deepening round."""

    best_move: DraughtsMove | None
    value: int
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for move searchers used by players and the Qt bridge."""

    def search(
        self,
        position: DraughtsState,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult: ...

    def request_stop(self) -> None: ...
