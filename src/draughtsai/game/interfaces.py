"""Abstract interface for the host-facing player layer.

Hosts talk to engine-backed and trivial players through the same ABC, so a
match runner never needs to know which search sits behind a seat.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from draughtsai.core.state import DraughtsMove, DraughtsState


class IPlayer(ABC):
    """Interface for a computer draughts player."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def choose_move(self, position: DraughtsState) -> DraughtsMove:
        """Return a legal move for *position*, leaving it unchanged.

        May block until the search is stopped or runs out of depth.
        """

    @abstractmethod
    def request_stop(self) -> None:
        """Ask a running ``choose_move`` to return as soon as possible."""

    @abstractmethod
    def last_evaluation_value(self) -> int:
        """Value behind the last chosen move, white-positive (0 if unknown)."""
