"""Board: piece placement plus en-passant and castling state.

The board is a value: exploring a hypothetical move means copying it and
applying the move to the copy.  :meth:`Board.move_piece` is the only
operation that changes a board after setup.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import NamedTuple

from kingside.core.enums import CastlingRights, Color, PieceType
from kingside.core.move_generator import (
    EN_PASSANT_RANKS,
    KING_HOME_FILE,
    KINGSIDE_KING_FILE,
    QUEENSIDE_KING_FILE,
    attacked_squares,
    generate_moves,
)
from kingside.core.piece import Piece
from kingside.core.types import ALL_SQUARES, Square

_LOGGER = logging.getLogger(__name__)

LegalMoves = dict[Square, set[Square]]
MovesObserver = Callable[[Color, int], None]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_ROOK_CORNERS: dict[Square, CastlingRights] = {
    Square(0, 0): CastlingRights.WHITE_QUEENSIDE,
    Square(7, 0): CastlingRights.WHITE_KINGSIDE,
    Square(0, 7): CastlingRights.BLACK_QUEENSIDE,
    Square(7, 7): CastlingRights.BLACK_KINGSIDE,
}


class Castle(NamedTuple):
    """Castling availability of one color."""

    short: bool
    long: bool


class Board:
    """8x8 grid of optional pieces with en-passant target and castling rights."""

    __slots__ = ("_rows", "en_passant_target", "castling")

    def __init__(
        self,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant_target: Square | None = None,
    ) -> None:
        # [rank][file]
        self._rows: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
        self.castling = castling
        self.en_passant_target = en_passant_target

    # -- Factories ----------------------------------------------------------

    @classmethod
    def starting_position(cls) -> Board:
        """Standard starting position with full castling rights."""
        b = cls(CastlingRights.ALL)
        for f, pt in enumerate(_BACK_RANK):
            b[Square(f, 0)] = Piece(Color.WHITE, pt)
            b[Square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    @classmethod
    def from_position_string(cls, text: str) -> tuple[Board, Color] | None:
        """Parse a position string; ``None`` if it is malformed."""
        from kingside.core.notation import parse_position

        try:
            return parse_position(text)
        except ValueError as exc:
            _LOGGER.debug("Rejected position string %r: %s", text, exc)
            return None

    def to_position_string(
        self, turn: Color, halfmove: int = 0, fullmove: int = 1
    ) -> str:
        from kingside.core.notation import format_position

        return format_position(self, turn, halfmove, fullmove)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._rows[sq.rank][sq.file]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._rows[sq.rank][sq.file] = piece

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares (of *color*, if given), a1 first, rank by rank."""
        for sq in ALL_SQUARES:
            piece = self._rows[sq.rank][sq.file]
            if piece is not None and (color is None or piece.color == color):
                yield sq, piece

    def can_castle(self, color: Color) -> Castle:
        return Castle(
            short=bool(self.castling & CastlingRights.kingside(color)),
            long=bool(self.castling & CastlingRights.queenside(color)),
        )

    def find_king(self, color: Color) -> Square | None:
        for sq, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Move application ---------------------------------------------------

    def move_piece(self, from_sq: Square, to_sq: Square) -> PieceType | None:
        """Apply a move and return the kind of the captured piece, if any.

        Callers must pass a move taken from :meth:`moves`; moving from an
        empty square or onto an own piece raises ``ValueError``.
        """
        piece = self[from_sq]
        if piece is None:
            raise ValueError(f"Tried to move nonexistent piece from {from_sq}")
        color = piece.color
        target = self[to_sq]
        if target is not None and target.color == color:
            raise ValueError(f"Tried to move {from_sq} into own piece on {to_sq}")

        capture_sq = to_sq
        placed = piece
        next_en_passant: Square | None = None

        if piece.piece_type == PieceType.KING:
            self._castle_rook(from_sq, to_sq, color)
            self.castling &= ~CastlingRights.both(color)
        elif piece.piece_type == PieceType.PAWN:
            if to_sq.rank == color.opposite.back_rank:
                placed = Piece(color, PieceType.QUEEN)
            elif (
                to_sq == self.en_passant_target
                and to_sq.file != from_sq.file
                and to_sq.rank == EN_PASSANT_RANKS[color]
            ):
                capture_sq = Square(to_sq.file, from_sq.rank)
                target = self[capture_sq]
                if target is None or target.piece_type != PieceType.PAWN:
                    raise ValueError(
                        f"En-passant target {to_sq} has no pawn on {capture_sq}"
                    )
            elif abs(to_sq.rank - from_sq.rank) == 2:
                skipped_rank = (from_sq.rank + to_sq.rank) // 2
                next_en_passant = Square(from_sq.file, skipped_rank)

        for sq in (from_sq, to_sq):
            right = _ROOK_CORNERS.get(sq)
            if right is not None:
                self.castling &= ~right

        self[capture_sq] = None
        self[from_sq] = None
        self[to_sq] = placed
        self.en_passant_target = next_en_passant
        return target.piece_type if target is not None else None

    def _castle_rook(self, from_sq: Square, to_sq: Square, color: Color) -> None:
        rank = color.back_rank
        if from_sq != Square(KING_HOME_FILE, rank) or to_sq.rank != rank:
            return
        rights = self.can_castle(color)
        if to_sq.file == KINGSIDE_KING_FILE and rights.short:
            rook_from, rook_to = Square(7, rank), Square(5, rank)
        elif to_sq.file == QUEENSIDE_KING_FILE and rights.long:
            rook_from, rook_to = Square(0, rank), Square(3, rank)
        else:
            return
        self[rook_to] = self[rook_from]
        self[rook_from] = None

    # -- Legal-move filter / threat oracle ----------------------------------

    def moves(
        self, color: Color, observer: MovesObserver | None = None
    ) -> tuple[LegalMoves, int]:
        """Legal destinations for every piece of *color*, plus their total."""
        all_moves: LegalMoves = {}
        total = 0
        for sq, piece in self.pieces(color):
            candidates = generate_moves(self, piece.piece_type, sq, color)
            legal = {to for to in candidates if not self.in_check_after(sq, to, color)}
            total += len(legal)
            all_moves[sq] = legal

        _LOGGER.debug("Found %d moves for %s", total, color)
        if observer is not None:
            observer(color, total)
        return all_moves, total

    def in_check_after(self, from_sq: Square, to_sq: Square, color: Color) -> bool:
        """Would *color*'s king be attacked after playing *from_sq* → *to_sq*?"""
        piece = self[from_sq]
        if piece is None or piece.color != color:
            raise ValueError(f"No {color} piece on {from_sq}")

        board_copy = self.copy()
        board_copy.move_piece(from_sq, to_sq)

        king_sq = board_copy.find_king(color)
        if king_sq is None:
            raise ValueError(f"No {color} king on board")
        return board_copy.threatens(king_sq, color.opposite)

    def threatens(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?

        Uses attack sets rather than moves: a pawn threatens both forward
        diagonals even when empty or held by its own side, never the square
        ahead of it, and a king never threatens its castling targets.
        """
        for other_sq, piece in self.pieces(by_color):
            if sq in attacked_squares(self, piece.piece_type, other_sq, by_color):
                return True
        return False

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self.find_king(color)
        if king_sq is None:
            raise ValueError(f"No {color} king on board")
        return self.threatens(king_sq, color.opposite)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board(self.castling, self.en_passant_target)
        b._rows = [row.copy() for row in self._rows]
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._rows == other._rows
            and self.castling == other.castling
            and self.en_passant_target == other.en_passant_target
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self._rows[rank][file]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
