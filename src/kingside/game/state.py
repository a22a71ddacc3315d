"""Game state machine: turn order, legal moves and terminal detection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from kingside.core.board import Board, LegalMoves
from kingside.core.enums import Color, PieceType
from kingside.core.rules import GameEnd, Rules
from kingside.core.types import Square, square_name
from kingside.game.player import Player

if TYPE_CHECKING:
    from kingside.game.protocol import GameInfo, MoveMessage

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    color: Color
    from_sq: Square
    to_sq: Square
    captured: PieceType | None = None

    def __str__(self) -> str:
        text = (
            f"{self.color.name.capitalize()} played "
            f"{square_name(self.from_sq)} -> {square_name(self.to_sq)}"
        )
        if self.captured is not None:
            text += f" and took {self.captured}"
        return text


class Game:
    """A match in progress: the board, whose turn it is and what they may play.

    The legal-move set is recomputed from scratch after every half-move.
    Once :attr:`outcome` is set the game is over and no further moves are
    accepted.
    """

    __slots__ = (
        "board",
        "turn",
        "moving",
        "legal_moves",
        "white",
        "black",
        "history",
        "outcome",
    )

    def __init__(
        self,
        board: Board | None = None,
        turn: Color = Color.WHITE,
        white_name: str = "White",
        black_name: str = "Black",
    ) -> None:
        self.board = board if board is not None else Board.starting_position()
        self.turn = turn
        self.moving: Square | None = None
        self.legal_moves: LegalMoves = {}
        self.white = Player(white_name)
        self.black = Player(black_name)
        self.history: list[MoveRecord] = []
        self.outcome: GameEnd | None = self.compute_moves()

    @classmethod
    def from_position_string(
        cls,
        text: str,
        white_name: str = "White",
        black_name: str = "Black",
    ) -> Game:
        """Start a game from a position string; raises ``ValueError`` if invalid."""
        parsed = Board.from_position_string(text)
        if parsed is None:
            raise ValueError(f"Invalid position: {text!r}")
        board, turn = parsed
        return cls(board, turn, white_name, black_name)

    @classmethod
    def from_game_info(
        cls,
        info: GameInfo,
        my_name: str,
        board: Board | None = None,
        turn: Color = Color.WHITE,
    ) -> Game:
        """Networked game: seat names follow the colors the server assigned."""
        if info.is_black:
            return cls(board, turn, info.other_player, my_name)
        return cls(board, turn, my_name, info.other_player)

    # ── Turn advance ─────────────────────────────────────────────────────

    def compute_moves(self) -> GameEnd | None:
        """Recompute the legal-move set; return the outcome if there is none."""
        legal, count = self.board.moves(self.turn)
        if count == 0:
            self.legal_moves = {}
            return Rules.outcome(self.board, self.turn, legal_count=0)
        self.legal_moves = legal
        return None

    def play_move(self, from_sq: Square, to_sq: Square) -> GameEnd | None:
        """Apply a move for the side to move and advance the turn.

        The move is not checked against :attr:`legal_moves`; local input
        should go through :meth:`submit_move`.
        """
        if self.outcome is not None:
            raise RuntimeError(f"Game is over: {self.outcome}")

        mover = self.turn
        captured = self.board.move_piece(from_sq, to_sq)
        if captured is not None:
            self.player(mover).captured.append(captured)

        record = MoveRecord(mover, from_sq, to_sq, captured)
        self.history.append(record)
        _LOGGER.info("%s", record)

        self.moving = None
        self.turn = mover.opposite
        self.outcome = self.compute_moves()
        if self.outcome is not None:
            _LOGGER.info("%s", self.outcome)
        return self.outcome

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Play a move from local input. Returns True if legal and applied."""
        if self.outcome is not None or not self.is_legal(from_sq, to_sq):
            _LOGGER.warning(
                "Rejected move %s -> %s for %s",
                square_name(from_sq),
                square_name(to_sq),
                self.turn,
            )
            return False
        self.play_move(from_sq, to_sq)
        return True

    def apply_message(self, message: MoveMessage) -> GameEnd | None:
        """Apply a move relayed by the transport (trusted, not re-validated)."""
        return self.play_move(message.source, message.destination)

    def select(self, sq: Square) -> GameEnd | None:
        """Selection protocol: pick a piece, then pick its destination.

        Picking a destination of the selected piece commits the move.
        Picking another movable piece switches the selection; anything else
        clears it.
        """
        if self.outcome is not None:
            return self.outcome

        if self.moving is not None:
            if sq in self.legal_moves.get(self.moving, ()):
                return self.play_move(self.moving, sq)
            if sq == self.moving:
                self.moving = None
                return None

        self.moving = sq if self.legal_moves.get(sq) else None
        return None

    # ── Query helpers ────────────────────────────────────────────────────

    def player(self, color: Color) -> Player:
        return self.white if color == Color.WHITE else self.black

    def is_legal(self, from_sq: Square, to_sq: Square) -> bool:
        return to_sq in self.legal_moves.get(from_sq, ())

    @property
    def is_over(self) -> bool:
        return self.outcome is not None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.history)

    def position_string(self) -> str:
        """Current position; the fullmove number is derived from the history."""
        return self.board.to_position_string(self.turn, 0, self.ply_count // 2 + 1)
