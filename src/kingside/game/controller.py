"""GameController: the central orchestrator of a chess game.

Coordinates: Players, Game, background search.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from kingside.core.enums import Color
from kingside.core.rules import GameEnd
from kingside.core.types import Square
from kingside.engine.task import SearchTask
from kingside.game.interfaces import GamePhase
from kingside.game.player import AIPlayer, HumanPlayer, IPlayer
from kingside.game.protocol import MoveMessage
from kingside.game.state import Game, MoveRecord
from kingside.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, Game], None]
GameOverCallback = Callable[[GameEnd], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a full chess game: validates local moves, runs the AI,
    applies relayed moves, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the control loop).  AI searches run on their own thread; the control
    loop picks up their result through :meth:`poll`.
    """

    __slots__ = ("_game", "_players", "_phase", "_task", "events")

    def __init__(self) -> None:
        self._game: Game | None = None
        self._players: dict[Color, IPlayer] = {}
        self._phase = GamePhase.NOT_STARTED
        self._task: SearchTask | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def game(self) -> Game:
        if self._game is None:
            raise RuntimeError("No game in progress; call new_game() first")
        return self._game

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def current_player(self) -> IPlayer | None:
        if self._game is None:
            return None
        return self._players.get(self._game.turn)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── Game setup ───────────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        position: str | None = None,
    ) -> None:
        """Seat the players and start from *position* (standard if None).

        Raises ``ValueError`` for an invalid position string.
        """
        if self._task is not None:
            # A started search cannot be stopped; its result is dropped.
            _LOGGER.info("Discarding search for %s", self._task.turn)
            self._task = None

        self._players = {Color.WHITE: white, Color.BLACK: black}
        if position is not None:
            self._game = Game.from_position_string(position, white.name, black.name)
        else:
            self._game = Game(white_name=white.name, black_name=black.name)

        if self._game.outcome is not None:
            self._emit_game_over(self._game.outcome)
            return
        self._prompt_current_player()

    def new_game_from_settings(
        self,
        settings: GameSettings,
        ai_color: Color | None = None,
    ) -> None:
        """Start a game from *settings*; *ai_color* seats the engine."""
        seats: dict[Color, IPlayer] = {}
        names = {Color.WHITE: settings.white_name, Color.BLACK: settings.black_name}
        for color, name in names.items():
            if color == ai_color:
                seats[color] = AIPlayer(color, name, depth=settings.ai_depth)
            else:
                seats[color] = HumanPlayer(color, name)
        self.new_game(seats[Color.WHITE], seats[Color.BLACK], settings.start_position)

    # ── Move input ───────────────────────────────────────────────────────

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Local human move. Returns True if legal and applied."""
        if self._phase != GamePhase.AWAITING_MOVE:
            return False
        cp = self.current_player
        if cp is not None and not cp.is_human:
            return False

        game = self.game
        if not game.submit_move(from_sq, to_sq):
            return False
        self._after_move(game.history[-1])
        return True

    def receive(self, message: MoveMessage) -> GameEnd | None:
        """Apply a move relayed by the transport; the sender is trusted."""
        game = self.game
        outcome = game.apply_message(message)
        self._after_move(game.history[-1])
        return outcome

    def poll(self, wait: bool = False) -> bool:
        """Apply the AI's move if its search finished.

        With *wait* the call blocks until the running search completes.
        Returns True when a move was applied.  A failed search moves the
        controller to ``GAME_OVER`` and re-raises its error.
        """
        task = self._task
        if task is None:
            return False
        if not wait and not task.done():
            return False

        self._task = None
        try:
            result = task.result()
            if result.best_move is None:
                raise RuntimeError(f"Engine found no move for {task.turn}")
        except Exception:
            self._set_phase(GamePhase.GAME_OVER)
            raise

        game = self.game
        game.play_move(result.best_move.from_sq, result.best_move.to_sq)
        self._after_move(game.history[-1])
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _after_move(self, record: MoveRecord) -> None:
        self._emit_move(record)
        outcome = self.game.outcome
        if outcome is not None:
            self._emit_game_over(outcome)
            return
        self._prompt_current_player()

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if isinstance(cp, AIPlayer):
            self._set_phase(GamePhase.THINKING)
            self._task = cp.start_search(self.game.board)
        else:
            self._set_phase(GamePhase.AWAITING_MOVE)

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self.game)

    def _emit_game_over(self, outcome: GameEnd) -> None:
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(outcome)
