"""High-level chess rules: check, checkmate, stalemate and game outcome."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from kingside.core.enums import Color

if TYPE_CHECKING:
    from kingside.core.board import Board


@dataclass(frozen=True, slots=True)
class GameEnd:
    """Terminal outcome: a draw (``winner is None``) or a win for one color."""

    winner: Color | None = None

    @classmethod
    def draw(cls) -> GameEnd:
        return cls(None)

    @classmethod
    def win(cls, color: Color) -> GameEnd:
        return cls(color)

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def __str__(self) -> str:
        if self.winner is None:
            return "Game ended in a draw!"
        return f"{self.winner.name.capitalize()} won the game!"


class Rules:
    """Static rule-checker that operates on a :class:`Board` and a side."""

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return board.is_in_check(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not board.is_in_check(color):
            return False
        _, count = board.moves(color)
        return count == 0

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if board.is_in_check(color):
            return False
        _, count = board.moves(color)
        return count == 0

    @staticmethod
    def outcome(
        board: Board, color: Color, legal_count: int | None = None
    ) -> GameEnd | None:
        """Outcome with *color* to move, or ``None`` while it has legal moves.

        *legal_count* may be passed when the caller already enumerated moves.
        """
        if legal_count is None:
            _, legal_count = board.moves(color)
        if legal_count:
            return None

        king_sq = board.find_king(color)
        if king_sq is None:
            raise ValueError(f"No {color} king on board")
        if board.threatens(king_sq, color.opposite):
            return GameEnd.win(color.opposite)
        return GameEnd.draw()
