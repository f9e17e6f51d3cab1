"""Fingerprint to best-move memory used only to seed move ordering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from draughtsai.core.zobrist import fingerprint

if TYPE_CHECKING:
    from draughtsai.core.state import DraughtsMove, DraughtsState


class TranspositionHintCache:
    """Remembers the last best move seen per position fingerprint.

    No values or bounds are stored, so a collision can only cost ordering
    quality. Callers re-validate the hint against the legal moves.
    """

    __slots__ = ("_moves", "hits", "misses", "stores")

    def __init__(self) -> None:
        self._moves: dict[int, DraughtsMove] = {}
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def __len__(self) -> int:
        return len(self._moves)

    def lookup(self, position: DraughtsState) -> DraughtsMove | None:
        move = self._moves.get(fingerprint(position))
        if move is None:
            self.misses += 1
        else:
            self.hits += 1
        return move

    def store(self, position: DraughtsState, move: DraughtsMove) -> None:
        self._moves[fingerprint(position)] = move
        self.stores += 1

    def clear(self) -> None:
        self._moves.clear()
        self.hits = self.misses = self.stores = 0
