"""Tests for position fingerprints."""

from draughtsai.core.board import Board
from draughtsai.core.enums import Color, Piece
from draughtsai.core.zobrist import fingerprint, piece_key, side_to_move_key
from draughtsai.testing import BoardPosition


class TestFingerprint:
    def test_is_deterministic(self) -> None:
        a = BoardPosition(Board.initial())
        b = BoardPosition(Board.initial())
        assert fingerprint(a) == fingerprint(b)

    def test_empty_white_to_move_is_zero(self) -> None:
        assert fingerprint(BoardPosition(Board())) == 0

    def test_side_to_move_toggles_key(self) -> None:
        white = BoardPosition(Board.initial(), Color.WHITE)
        black = BoardPosition(Board.initial(), Color.BLACK)
        assert fingerprint(white) ^ fingerprint(black) == side_to_move_key()

    def test_single_piece_matches_piece_key(self) -> None:
        position = BoardPosition(Board.from_squares({27: Piece.WHITE_MAN}))
        assert fingerprint(position) == piece_key(Piece.WHITE_MAN, 27)

    def test_piece_kind_and_square_matter(self) -> None:
        man = BoardPosition(Board.from_squares({27: Piece.WHITE_MAN}))
        king = BoardPosition(Board.from_squares({27: Piece.WHITE_KING}))
        moved = BoardPosition(Board.from_squares({28: Piece.WHITE_MAN}))
        keys = {fingerprint(man), fingerprint(king), fingerprint(moved)}
        assert len(keys) == 3

    def test_keys_are_64_bit(self) -> None:
        key = fingerprint(BoardPosition(Board.initial(), Color.BLACK))
        assert 0 <= key < 2**64
