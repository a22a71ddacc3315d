"""Static material/advancement evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.core.enums import Color, PieceType

if TYPE_CHECKING:
    from kingside.core.board import Board
    from kingside.core.types import Square

PAWN_ADVANCE_BONUS = 114

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.KING: 0,
    PieceType.QUEEN: 9000,
    PieceType.ROOK: 5000,
    PieceType.BISHOP: 3000,
    PieceType.KNIGHT: 3000,
    PieceType.PAWN: 1000,
}


def piece_score(piece_type: PieceType, sq: Square, color: Color) -> int:
    """Value of one piece; pawns gain a bonus per rank advanced."""
    score = PIECE_VALUES[piece_type]
    if piece_type == PieceType.PAWN:
        progress = sq.rank if color == Color.WHITE else 7 - sq.rank
        score += progress * PAWN_ADVANCE_BONUS
    return score


def evaluate(board: Board, turn: Color) -> int:
    """Material balance from *turn*'s point of view."""
    score = 0
    for sq, piece in board.pieces():
        value = piece_score(piece.piece_type, sq, piece.color)
        score += value if piece.color == turn else -value
    return score
