"""Tests for squares, pieces, moves and enums."""

import pytest

import kingside.core
from kingside.core.enums import CastlingRights, Color, PieceType
from kingside.core.move import Move
from kingside.core.piece import Piece
from kingside.core.types import (
    A1, ALL_SQUARES, E2, E4, H8, Square, is_valid_square, parse_square, square_name,
)


class TestSquare:
    def test_names(self) -> None:
        assert square_name(A1) == "a1"
        assert square_name(H8) == "h8"
        assert str(E4) == "e4"

    def test_parse(self) -> None:
        assert parse_square("e4") == E4
        assert parse_square("h8") == H8

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "e44", "E4"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)

    def test_offset_and_validity(self) -> None:
        assert E2.offset(0, 2) == E4
        assert not is_valid_square(A1.offset(-1, 0))
        assert is_valid_square(H8)

    def test_all_squares_order(self) -> None:
        assert len(ALL_SQUARES) == 64
        assert ALL_SQUARES[0] == A1
        assert ALL_SQUARES[1] == Square(1, 0)
        assert ALL_SQUARES[-1] == H8


class TestPiece:
    def test_letters(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"

    def test_from_char(self) -> None:
        assert Piece.from_char("K") == Piece(Color.WHITE, PieceType.KING)
        assert Piece.from_char("p") == Piece(Color.BLACK, PieceType.PAWN)

    @pytest.mark.parametrize("char", ["x", "", "Kq", "1"])
    def test_from_char_invalid(self, char: str) -> None:
        with pytest.raises(ValueError):
            Piece.from_char(char)


class TestEnums:
    def test_color_helpers(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.forward == -1
        assert Color.BLACK.back_rank == 7
        assert str(Color.WHITE) == "white"

    def test_piece_type_str(self) -> None:
        assert str(PieceType.PAWN) == "Pawn"

    def test_castling_flags(self) -> None:
        assert CastlingRights.both(Color.WHITE) == (
            CastlingRights.kingside(Color.WHITE) | CastlingRights.queenside(Color.WHITE)
        )
        remaining = CastlingRights.ALL & ~CastlingRights.WHITE_BOTH
        assert remaining == CastlingRights.BLACK_BOTH


class TestMove:
    def test_str(self) -> None:
        assert str(Move(E2, E4)) == "e2e4"

    def test_equality(self) -> None:
        assert Move(E2, E4) == Move(E2, E4)
        assert len({Move(E2, E4), Move(E2, E4)}) == 1


class TestPackageExports:
    def test_every_export_resolves(self) -> None:
        for name in kingside.core.__all__:
            assert hasattr(kingside.core, name), name
