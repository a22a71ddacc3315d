"""Chess engine package: evaluation, negamax search and background runners."""

from kingside.engine.evaluation import PIECE_VALUES, evaluate
from kingside.engine.minimax import MinimaxEngine
from kingside.engine.search import MATE_SCORE, IEngine, SearchLimits, SearchResult
from kingside.engine.task import SearchTask

__all__ = [
    "IEngine",
    "MATE_SCORE",
    "MinimaxEngine",
    "PIECE_VALUES",
    "SearchLimits",
    "SearchResult",
    "SearchTask",
    "evaluate",
]
