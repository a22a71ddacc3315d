"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from kingside.core.board import Board
from kingside.core.enums import Color
from kingside.engine.minimax import MinimaxEngine
from kingside.engine.search import SearchLimits


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    Hosts move the worker to a ``QThread`` and connect a queued signal to
    :meth:`request_move`; results come back through the signals below.
    """

    best_move_ready = pyqtSignal(int, object, int, int)
    search_no_move = pyqtSignal(int, int, int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_engine", "_limits")

    def __init__(self, *, max_depth: int = 3) -> None:
        super().__init__()
        self._engine = MinimaxEngine()
        self._limits = SearchLimits(max_depth=max_depth)

    @pyqtSlot(object, int, int)
    def request_move(self, board_obj: object, turn: int, request_id: int) -> None:
        """Search for the best move of *turn* on *board_obj* and emit result."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return

        try:
            result = self._engine.search(
                board_obj.copy(), Color(turn), self._limits.max_depth
            )
        except Exception as exc:
            self.search_error.emit(request_id, str(exc))
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id, result.score, result.nodes)
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.nodes,
        )

    @pyqtSlot(int)
    def set_depth(self, max_depth: int) -> None:
        """Update search depth (takes effect on the next search)."""
        self._limits = SearchLimits(max_depth=max_depth)
