"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from kingside.core.enums import Color, PieceType

# Position-string letter ↔ PieceType (lowercase form)
_LETTERS: dict[str, PieceType] = {
    "k": PieceType.KING,
    "q": PieceType.QUEEN,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
    "r": PieceType.ROOK,
    "p": PieceType.PAWN,
}
_TYPE_LETTERS: dict[PieceType, str] = {v: k for k, v in _LETTERS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable (color, kind) occupant of a square."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Position-string letter (uppercase = white, lowercase = black)."""
        letter = _TYPE_LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight."""
        ptype = _LETTERS.get(char.lower()) if len(char) == 1 else None
        if ptype is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, ptype)
