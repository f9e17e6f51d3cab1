"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. White is the maximizing side."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def sign(self) -> int:
        """+1 for white, -1 for black."""
        return 1 if self is Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class Piece(IntEnum):
    """Square contents, using the host framework's integer encoding."""

    EMPTY = 0
    WHITE_MAN = 1
    BLACK_MAN = 2
    WHITE_KING = 3
    BLACK_KING = 4

    @property
    def color(self) -> Color | None:
        if self is Piece.EMPTY:
            return None
        if self in (Piece.WHITE_MAN, Piece.WHITE_KING):
            return Color.WHITE
        return Color.BLACK

    @property
    def is_king(self) -> bool:
        return self in (Piece.WHITE_KING, Piece.BLACK_KING)

    @property
    def is_man(self) -> bool:
        return self in (Piece.WHITE_MAN, Piece.BLACK_MAN)

    @property
    def swapped(self) -> Piece:
        """Same kind of piece owned by the other side."""
        return _SWAPPED[self]

    @property
    def symbol(self) -> str:
        """Diagram character: ``w``/``b`` for men, ``W``/``B`` for kings."""
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, char: str) -> Piece:
        try:
            return _FROM_SYMBOL[char]
        except KeyError:
            raise ValueError(f"Invalid piece symbol: {char!r}") from None

    @classmethod
    def man(cls, color: Color) -> Piece:
        return cls.WHITE_MAN if color == Color.WHITE else cls.BLACK_MAN

    @classmethod
    def king(cls, color: Color) -> Piece:
        return cls.WHITE_KING if color == Color.WHITE else cls.BLACK_KING


_SWAPPED: dict[Piece, Piece] = {
    Piece.EMPTY: Piece.EMPTY,
    Piece.WHITE_MAN: Piece.BLACK_MAN,
    Piece.BLACK_MAN: Piece.WHITE_MAN,
    Piece.WHITE_KING: Piece.BLACK_KING,
    Piece.BLACK_KING: Piece.WHITE_KING,
}

_SYMBOLS: dict[Piece, str] = {
    Piece.EMPTY: ".",
    Piece.WHITE_MAN: "w",
    Piece.BLACK_MAN: "b",
    Piece.WHITE_KING: "W",
    Piece.BLACK_KING: "B",
}

_FROM_SYMBOL: dict[str, Piece] = {symbol: piece for piece, symbol in _SYMBOLS.items()}
