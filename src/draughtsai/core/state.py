"""Protocols for the external game-state collaborator.

The rules engine (move generation, capture chains, apply/undo) lives in the
host. The search only relies on the small surface declared here.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

from draughtsai.core.enums import Piece


@runtime_checkable
class DraughtsMove(Protocol):
    """Immutable, hashable move value produced by the host's move generator."""

    @property
    def is_capture(self) -> bool: ...


MoveT = TypeVar("MoveT", bound=DraughtsMove)


@runtime_checkable
class DraughtsState(Protocol[MoveT]):
    """Mutable position shared by reference down the search recursion.

    ``apply_move``/``undo_move`` follow a strict stack discipline: every move
    applied on a path is undone before control returns up that path.
    """

    def is_side_to_move_maximizing(self) -> bool:
        """True when white (the maximizing side) is to move."""
        ...

    def is_terminal(self) -> bool: ...

    def legal_moves(self) -> Sequence[MoveT]: ...

    def apply_move(self, move: MoveT) -> None: ...

    def undo_move(self, move: MoveT) -> None: ...

    def piece_at(self, row: int, col: int) -> Piece: ...

    def clone(self) -> DraughtsState[MoveT]:
        """Independent copy, used only by random rollouts."""
        ...
