"""
Synthetic positions for testing searches without a rules engine.

Hosts normally provide the real game state; these stand-ins implement the
same protocol so that search behaviour can be checked against hand-computed
or brute-force minimax values.

Positions:
    - GameTreePosition: explicit game tree, values at every node
    - EndlessPosition: never-ending uniform tree, for stop/timing tests
    - BoardPosition: static board snapshot, for evaluation tests

Tree notation (``GameTreePosition.from_nested``):
    - an ``int`` is a terminal leaf with that value
    - a ``list`` is an inner node with static value 0
    - a ``(value, [children])`` tuple is an inner node with a static value
    Moves are labelled by their path from the root, e.g. ``"0"``, ``"0.2"``.
"""

from __future__ import annotations

import random
from collections.abc import Collection, Sequence
from dataclasses import dataclass, field

from draughtsai.core.board import Board
from draughtsai.core.enums import Color, Piece
from draughtsai.evaluation.base import Evaluator

Nested = int | list | tuple


@dataclass(slots=True, frozen=True)
class TreeMove:
    label: str
    is_capture: bool = False

    def __str__(self) -> str:
        return self.label


@dataclass(slots=True)
class TreeNode:
    value: int
    children: list[tuple[TreeMove, TreeNode]] = field(default_factory=list)


class GameTreePosition:
    """Walks an explicit game tree with strict apply/undo bookkeeping.

    Raises ``AssertionError`` on an illegal move or an out-of-order undo, so
    tests notice any break of the stack discipline.
    """

    __slots__ = ("_root", "_stack", "_root_maximizing", "applied", "undone")

    def __init__(self, root: TreeNode, *, maximizing: bool = True) -> None:
        self._root = root
        self._stack: list[tuple[TreeMove, TreeNode]] = []
        self._root_maximizing = maximizing
        self.applied = 0
        self.undone = 0

    @classmethod
    def from_nested(
        cls,
        tree: Nested,
        *,
        captures: Collection[str] = (),
        maximizing: bool = True,
    ) -> GameTreePosition:
        return cls(_build(tree, "", frozenset(captures)), maximizing=maximizing)

    @property
    def node(self) -> TreeNode:
        return self._stack[-1][1] if self._stack else self._root

    @property
    def path(self) -> tuple[str, ...]:
        return tuple(move.label for move, _ in self._stack)

    def static_value(self) -> int:
        return self.node.value

    def is_side_to_move_maximizing(self) -> bool:
        return self._root_maximizing == (len(self._stack) % 2 == 0)

    def is_terminal(self) -> bool:
        return not self.node.children

    def legal_moves(self) -> Sequence[TreeMove]:
        return [move for move, _ in self.node.children]

    def apply_move(self, move: TreeMove) -> None:
        for candidate, child in self.node.children:
            if candidate == move:
                self._stack.append((move, child))
                self.applied += 1
                return
        raise AssertionError(f"Illegal move {move} at {self.path}")

    def undo_move(self, move: TreeMove) -> None:
        assert self._stack, "undo without apply"
        top, _ = self._stack[-1]
        assert top == move, f"undo {move} but last applied was {top}"
        self._stack.pop()
        self.undone += 1

    def piece_at(self, row: int, col: int) -> Piece:
        return Piece.EMPTY

    def clone(self) -> GameTreePosition:
        copy = GameTreePosition(self._root, maximizing=self._root_maximizing)
        copy._stack = list(self._stack)
        return copy


def _build(tree: Nested, prefix: str, captures: frozenset[str]) -> TreeNode:
    if isinstance(tree, int):
        return TreeNode(tree)
    if isinstance(tree, tuple):
        value, children = tree
    else:
        value, children = 0, tree
    node = TreeNode(value)
    for idx, sub in enumerate(children):
        label = f"{prefix}.{idx}" if prefix else str(idx)
        move = TreeMove(label, label in captures)
        node.children.append((move, _build(sub, label, captures)))
    return node


def random_tree(
    rng: random.Random,
    depth: int,
    branching: int = 4,
    *,
    low: int = -100,
    high: int = 100,
) -> Nested:
    """Random tree with static values at every node and 1..branching children."""
    if depth == 0:
        return rng.randint(low, high)
    width = rng.randint(1, branching)
    return (
        rng.randint(low, high),
        [
            random_tree(rng, depth - 1, branching, low=low, high=high)
            for _ in range(width)
        ],
    )


def minimax(position: GameTreePosition, depth: int) -> int:
    """Plain minimax with the engine's horizon rule (scores at ``depth < 0``).

    Capture moves are treated like any other move.
    """
    if position.is_terminal() or depth < 0:
        return position.static_value()
    values = []
    for move in position.legal_moves():
        position.apply_move(move)
        try:
            values.append(minimax(position, depth - 1))
        finally:
            position.undo_move(move)
    return max(values) if position.is_side_to_move_maximizing() else min(values)


class EndlessPosition:
    """Uniform tree of unbounded depth; every node has *branching* moves."""

    __slots__ = ("_branching", "_stack", "applied", "undone")

    def __init__(self, branching: int = 3) -> None:
        self._branching = branching
        self._stack: list[TreeMove] = []
        self.applied = 0
        self.undone = 0

    @property
    def path(self) -> tuple[str, ...]:
        return tuple(move.label for move in self._stack)

    def static_value(self) -> int:
        return len(self._stack) % 7 - 3

    def is_side_to_move_maximizing(self) -> bool:
        return len(self._stack) % 2 == 0

    def is_terminal(self) -> bool:
        return False

    def legal_moves(self) -> Sequence[TreeMove]:
        return [TreeMove(str(idx)) for idx in range(self._branching)]

    def apply_move(self, move: TreeMove) -> None:
        self._stack.append(move)
        self.applied += 1

    def undo_move(self, move: TreeMove) -> None:
        assert self._stack and self._stack[-1] == move
        self._stack.pop()
        self.undone += 1

    def piece_at(self, row: int, col: int) -> Piece:
        return Piece.EMPTY

    def clone(self) -> EndlessPosition:
        copy = EndlessPosition(self._branching)
        copy._stack = list(self._stack)
        return copy


class TreeEvaluator(Evaluator):
    """Reads the stored value of a synthetic position's current node."""

    def __init__(self) -> None:
        self.calls = 0

    def evaluate(self, position: GameTreePosition | EndlessPosition) -> int:
        self.calls += 1
        return position.static_value()


@dataclass(slots=True)
class BoardPosition:
    """Static board snapshot: evaluation input only, has no moves."""

    board: Board
    side_to_move: Color = Color.WHITE
    terminal: bool = False

    @classmethod
    def from_diagram(
        cls,
        diagram: str,
        side_to_move: Color = Color.WHITE,
        terminal: bool = False,
    ) -> BoardPosition:
        return cls(Board.from_diagram(diagram), side_to_move, terminal)

    def mirrored(self) -> BoardPosition:
        """Rotate 180 degrees and swap colours, including the side to move."""
        return BoardPosition(
            self.board.rotated().swapped_colors(),
            self.side_to_move.opposite,
            self.terminal,
        )

    def is_side_to_move_maximizing(self) -> bool:
        return self.side_to_move == Color.WHITE

    def is_terminal(self) -> bool:
        return self.terminal

    def legal_moves(self) -> Sequence[TreeMove]:
        return ()

    def apply_move(self, move: TreeMove) -> None:
        raise NotImplementedError("BoardPosition has no moves")

    def undo_move(self, move: TreeMove) -> None:
        raise NotImplementedError("BoardPosition has no moves")

    def piece_at(self, row: int, col: int) -> Piece:
        return self.board.piece_at(row, col)

    def clone(self) -> BoardPosition:
        return BoardPosition(self.board.copy(), self.side_to_move, self.terminal)
