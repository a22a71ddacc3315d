"""Tests for the negamax search."""

import pytest

from kingside.core.board import Board
from kingside.core.enums import Color
from kingside.core.move import Move
from kingside.core.notation import parse_position
from kingside.core.types import A1, A3, A8, B1, D2, D5, G2, H1
from kingside.engine.evaluation import evaluate
from kingside.engine.minimax import MinimaxEngine
from kingside.engine.search import MATE_SCORE


class TestMinimaxSearch:
    def test_depth_zero_returns_first_move_and_static_score(self) -> None:
        board = Board.starting_position()
        result = MinimaxEngine().search(board, Color.WHITE, 0)
        assert result.best_move == Move(B1, A3)
        assert result.score == 0
        assert result.depth == 0
        assert result.nodes == 1

    def test_takes_free_queen(self) -> None:
        board, turn = parse_position("4k3/8/8/3q4/8/8/3R4/4K3 w - - 0 1")
        result = MinimaxEngine().search(board, turn, 1)
        assert result.best_move == Move(D2, D5)
        assert result.score == 5000

    @pytest.mark.parametrize("depth", [1, 2])
    def test_finds_mate_in_one(self, depth: int) -> None:
        board, turn = parse_position("6k1/5ppp/8/8/8/8/8/R5K1 w - - 0 1")
        result = MinimaxEngine().search(board, turn, depth)
        assert result.best_move == Move(A1, A8)
        assert result.score == MATE_SCORE

    def test_search_leaves_board_untouched(self) -> None:
        board, turn = parse_position("4k3/8/8/3q4/8/8/3R4/4K3 w - - 0 1")
        before = board.copy()
        MinimaxEngine().search(board, turn, 2)
        assert board == before

    def test_checkmated_side_has_no_move(self) -> None:
        board, turn = parse_position("R5k1/5ppp/8/8/8/8/8/6K1 b - - 0 1")
        result = MinimaxEngine().search(board, turn, 2)
        assert result.best_move is None
        assert result.score == -MATE_SCORE

    def test_stalemated_side_scores_zero(self) -> None:
        board, turn = parse_position("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        result = MinimaxEngine().search(board, turn, 3)
        assert result.best_move is None
        assert result.score == 0

    def test_deterministic(self) -> None:
        board = Board.starting_position()
        first = MinimaxEngine().search(board, Color.WHITE, 2)
        second = MinimaxEngine().search(board, Color.WHITE, 2)
        assert first == second

    def test_result_move_is_legal(self) -> None:
        board = Board.starting_position()
        result = MinimaxEngine().search(board, Color.BLACK, 2)
        assert result.best_move is not None
        legal, _ = board.moves(Color.BLACK)
        assert result.best_move.to_sq in legal[result.best_move.from_sq]

    def test_node_count_grows_with_depth(self) -> None:
        board = Board.starting_position()
        engine = MinimaxEngine()
        shallow = engine.search(board, Color.WHITE, 1).nodes
        deep = engine.search(board, Color.WHITE, 2).nodes
        assert shallow == 21
        assert deep > shallow

    def test_depth_one_matches_best_static_reply(self) -> None:
        board, turn = parse_position("4k3/8/8/8/8/8/6q1/4K2R w K - 0 1")
        result = MinimaxEngine().search(board, turn, 1)
        assert result.best_move is not None
        child = board.copy()
        child.move_piece(result.best_move.from_sq, result.best_move.to_sq)
        assert result.score == -evaluate(child, turn.opposite)

    def test_negative_depth_rejected(self) -> None:
        with pytest.raises(ValueError):
            MinimaxEngine().search(Board.starting_position(), Color.WHITE, -1)


class TestBestMove:
    def test_returns_move(self) -> None:
        board, turn = parse_position("4k3/8/8/3q4/8/8/3R4/4K3 w - - 0 1")
        assert MinimaxEngine().best_move(board, turn, 1) == Move(D2, D5)

    def test_no_move_raises(self) -> None:
        board, turn = parse_position("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        with pytest.raises(RuntimeError):
            MinimaxEngine().best_move(board, turn, 1)

    def test_escapes_attack(self) -> None:
        board, turn = parse_position("k7/8/8/8/8/8/6q1/7K w - - 0 1")
        move = MinimaxEngine().best_move(board, turn, 1)
        assert move.from_sq == H1
        assert move.to_sq == G2
