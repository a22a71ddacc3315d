"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from kingside.core import Board, Color

    board = Board.starting_position()
    legal, count = board.moves(Color.WHITE)
"""

from kingside.core.board import Board, Castle, LegalMoves
from kingside.core.enums import CastlingRights, Color, PieceType
from kingside.core.move import Move
from kingside.core.move_generator import attacked_squares, generate_moves
from kingside.core.notation import STARTING_FEN, format_position, parse_position
from kingside.core.piece import Piece
from kingside.core.rules import GameEnd, Rules
from kingside.core.types import (
    Square,
    make_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Castle",
    "GameEnd",
    "LegalMoves",
    "Move",
    "Piece",
    "Rules",
    "attacked_squares",
    "generate_moves",
    # Notation
    "STARTING_FEN",
    "format_position",
    "parse_position",
]
