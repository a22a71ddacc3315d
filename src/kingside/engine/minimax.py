"""Pure-Python fixed-depth negamax search."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from kingside.core.board import Board, LegalMoves
from kingside.core.enums import Color
from kingside.core.move import Move
from kingside.engine.evaluation import evaluate
from kingside.engine.search import MATE_SCORE, IEngine, SearchResult

_LOGGER = logging.getLogger(__name__)


class MinimaxEngine(IEngine):
    """Full-width negamax over :meth:`Board.moves` with static evaluation.

    Every node copies the board before applying a move, so the board passed
    in is never modified.  Moves are visited in a fixed order (pieces from
    a1 rank by rank, destinations sorted) and the first of equally scored
    moves is kept, which makes the search deterministic.
    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes = 0

    def search(self, board: Board, turn: Color, depth: int) -> SearchResult:
        if depth < 0:
            raise ValueError("Search depth must be >= 0")

        self._nodes = 0
        best_move, score = self._negamax(board, turn, depth)
        _LOGGER.debug(
            "Searched %d nodes at depth %d for %s: %s (%d)",
            self._nodes,
            depth,
            turn,
            best_move,
            score,
        )
        return SearchResult(best_move, score, depth, self._nodes)

    def best_move(self, board: Board, turn: Color, depth: int) -> Move:
        """Best move for *turn*; the side to move must have a legal move."""
        result = self.search(board, turn, depth)
        if result.best_move is None:
            raise RuntimeError(f"No legal move for {turn} to search")
        return result.best_move

    def _negamax(
        self, board: Board, turn: Color, depth: int
    ) -> tuple[Move | None, int]:
        self._nodes += 1
        all_moves, count = board.moves(turn)

        if count == 0:
            if board.is_in_check(turn):
                return None, -MATE_SCORE
            return None, 0

        if depth == 0:
            # Every move shares the static score; the first one is kept.
            return next(self._ordered(all_moves)), evaluate(board, turn)

        best_move: Move | None = None
        best_score = 0
        opponent = turn.opposite
        for move in self._ordered(all_moves):
            new_board = board.copy()
            new_board.move_piece(move.from_sq, move.to_sq)
            _, enemy_score = self._negamax(new_board, opponent, depth - 1)
            score = -enemy_score
            if best_move is None or score > best_score:
                best_move = move
                best_score = score
        return best_move, best_score

    @staticmethod
    def _ordered(all_moves: LegalMoves) -> Iterator[Move]:
        for from_sq, destinations in all_moves.items():
            for to_sq in sorted(destinations):
                yield Move(from_sq, to_sq)
