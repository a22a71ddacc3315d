"""Notation package: position-string parsing and serialization."""

from kingside.core.notation.fen import STARTING_FEN, format_position, parse_position

__all__ = [
    "STARTING_FEN",
    "format_position",
    "parse_position",
]
