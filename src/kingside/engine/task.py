"""Background search task with a one-shot result handoff."""

from __future__ import annotations

import logging
import queue
import threading
from typing import TYPE_CHECKING

from kingside.engine.minimax import MinimaxEngine

if TYPE_CHECKING:
    from kingside.core.board import Board
    from kingside.core.enums import Color
    from kingside.engine.search import IEngine, SearchResult

_LOGGER = logging.getLogger(__name__)

_Outcome = tuple["SearchResult | None", "BaseException | None"]


class SearchTask:
    """Runs one search on a dedicated thread.

    The search works on a private copy of the board.  Poll :meth:`done` from
    the control loop and read :meth:`result` once it is finished; the result
    can be read exactly once.  A started search always runs to completion.
    """

    __slots__ = ("_thread", "_queue", "_finished", "_consumed", "turn", "depth")

    def __init__(
        self,
        board: Board,
        turn: Color,
        depth: int,
        engine: IEngine | None = None,
    ) -> None:
        self.turn = turn
        self.depth = depth
        self._queue: queue.Queue[_Outcome] = queue.Queue(maxsize=1)
        self._finished = threading.Event()
        self._consumed = False
        self._thread = threading.Thread(
            target=self._run,
            args=(engine or MinimaxEngine(), board.copy()),
            name=f"kingside-search-{turn}",
            daemon=True,
        )

    @classmethod
    def start(
        cls,
        board: Board,
        turn: Color,
        depth: int,
        engine: IEngine | None = None,
    ) -> SearchTask:
        """Create a task and start its thread immediately."""
        task = cls(board, turn, depth, engine)
        task._thread.start()
        return task

    def done(self) -> bool:
        """Whether the search finished (its result is ready to read)."""
        return self._finished.is_set()

    def result(self, timeout: float | None = None) -> SearchResult:
        """Block until the search finished and hand over its result.

        Re-raises any exception raised by the search.  Raises
        ``TimeoutError`` if *timeout* expires and ``RuntimeError`` when the
        result was already read.
        """
        if self._consumed:
            raise RuntimeError("Search result was already read")
        try:
            result, error = self._queue.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError(f"Search for {self.turn} still running") from None
        self._consumed = True
        if error is not None:
            raise error
        assert result is not None
        return result

    def _run(self, engine: IEngine, board: Board) -> None:
        try:
            outcome: _Outcome = (engine.search(board, self.turn, self.depth), None)
        except Exception as exc:
            _LOGGER.exception("Search for %s failed", self.turn)
            outcome = (None, exc)
        self._queue.put(outcome)
        self._finished.set()
