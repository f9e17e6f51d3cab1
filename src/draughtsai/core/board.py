"""Board - piece placement on a 10x10 draughts board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from draughtsai.core.enums import Color, Piece
from draughtsai.core.types import (
    BOARD_SIZE,
    SQUARE_COUNT,
    Square,
    dark_squares,
    is_dark,
    is_on_board,
    make_square,
    rotate,
)

_INITIAL_ROWS = 4


class Board:
    """Mutable 50-square board addressed by square number or (row, col)."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        # Index 0 is unused so square numbers index directly.
        self._squares: list[Piece] = [Piece.EMPTY] * (SQUARE_COUNT + 1)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece) -> None:
        if not 1 <= sq <= SQUARE_COUNT:
            raise IndexError(f"Square out of range: {sq}")
        self._squares[sq] = piece

    def piece_at(self, row: int, col: int) -> Piece:
        """Contents of (*row*, *col*); light and off-board squares are empty."""
        if not is_on_board(row, col) or not is_dark(row, col):
            return Piece.EMPTY
        return self._squares[make_square(row, col)]

    def place(self, row: int, col: int, piece: Piece) -> None:
        self[make_square(row, col)] = piece

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[int, int, Piece]]:
        """Yield ``(row, col, piece)`` for every non-empty square."""
        for row, col in dark_squares():
            piece = self._squares[make_square(row, col)]
            if piece is not Piece.EMPTY:
                yield row, col, piece

    def count(self, color: Color) -> int:
        """Number of pieces (men and kings) owned by *color*."""
        return sum(1 for piece in self._squares if piece.color == color)

    # -- Transformations ----------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def rotated(self) -> Board:
        """The board turned 180 degrees (pieces keep their owner)."""
        b = Board()
        for row, col, piece in self.occupied():
            b.place(*rotate(row, col), piece)
        return b

    def swapped_colors(self) -> Board:
        """Same placement with every piece handed to the other side."""
        b = Board()
        b._squares = [piece.swapped for piece in self._squares]
        return b

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: 20 men each, black on top."""
        b = cls()
        for row, col in dark_squares():
            if row < _INITIAL_ROWS:
                b.place(row, col, Piece.BLACK_MAN)
            elif row >= BOARD_SIZE - _INITIAL_ROWS:
                b.place(row, col, Piece.WHITE_MAN)
        return b

    @classmethod
    def from_squares(cls, pieces: Mapping[Square, Piece]) -> Board:
        """Build a board from a ``{square number: piece}`` mapping."""
        b = cls()
        for sq, piece in pieces.items():
            b[sq] = piece
        return b

    @classmethod
    def from_diagram(cls, diagram: str) -> Board:
        """Parse a 10-line diagram of ``. w b W B`` characters.

        Whitespace inside a line is ignored, blank lines are skipped.
        """
        lines = ["".join(line.split()) for line in diagram.strip().splitlines()]
        lines = [line for line in lines if line]
        if len(lines) != BOARD_SIZE or any(len(line) != BOARD_SIZE for line in lines):
            raise ValueError("Diagram must have 10 rows of 10 squares")

        b = cls()
        for row, line in enumerate(lines):
            for col, char in enumerate(line):
                piece = Piece.from_symbol(char)
                if piece is Piece.EMPTY:
                    continue
                if not is_dark(row, col):
                    raise ValueError(f"Piece on light square ({row}, {col})")
                b.place(row, col, piece)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(tuple(self._squares))

    def __repr__(self) -> str:
        rows = [
            " ".join(self.piece_at(row, col).symbol for col in range(BOARD_SIZE))
            for row in range(BOARD_SIZE)
        ]
        return "\n".join(rows)
