"""Cooperative stop signal shared between the host and the search thread."""

from __future__ import annotations

import threading

from draughtsai.engine.search import CancelCheck


class SearchAborted(Exception):
    """Unwinds every pending search frame after a stop was observed."""


def _never_cancelled() -> bool:
    return False


class CancellationController:
    """Stop flag set from any thread and polled by the search at node entry.

    An optional external ``is_cancelled`` callback (e.g. a host deadline) is
    polled alongside the flag.
    """

    __slots__ = ("_event", "_external")

    def __init__(self) -> None:
        self._event = threading.Event()
        self._external: CancelCheck = _never_cancelled

    def request_stop(self) -> None:
        """Ask the running search to stop. Idempotent, thread-safe."""
        self._event.set()

    @property
    def stop_requested(self) -> bool:
        return self._event.is_set() or self._external()

    def attach(self, is_cancelled: CancelCheck | None) -> None:
        self._external = is_cancelled or _never_cancelled

    def checkpoint(self) -> None:
        """Raise :class:`SearchAborted` if a stop is pending, clearing it."""
        if self._event.is_set():
            self._event.clear()
            raise SearchAborted
        if self._external():
            raise SearchAborted

    def reset(self) -> None:
        """Drop any unobserved stop request and detach the external check."""
        self._event.clear()
        self._external = _never_cancelled
