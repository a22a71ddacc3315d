"""Player records and seat implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kingside.core.enums import Color, PieceType
from kingside.engine.task import SearchTask

if TYPE_CHECKING:
    from kingside.core.board import Board
    from kingside.engine.search import IEngine


@dataclass
class Player:
    """Display name plus the piece kinds this player captured, in order."""

    name: str
    captured: list[PieceType] = field(default_factory=list)


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...


class HumanPlayer(IPlayer):
    """A human participant; moves arrive via ``controller.submit_move()``."""

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True


class AIPlayer(IPlayer):
    """An AI participant that searches in the background when asked to move.

    Args:
        color: Side the AI plays.
        name: Display name.
        depth: Search depth in plies.
        engine: Engine used by the search task (defaults to negamax).
    """

    __slots__ = ("_color", "_name", "depth", "_engine")

    def __init__(
        self,
        color: Color,
        name: str = "Engine",
        depth: int = 3,
        engine: IEngine | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self.depth = depth
        self._engine = engine

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def start_search(self, board: Board) -> SearchTask:
        """Begin searching *board* on a background thread."""
        return SearchTask.start(board, self._color, self.depth, self._engine)
