"""Game management layer: state machine, players, controller.

Quick start::

    from kingside.core import Color
    from kingside.game import AIPlayer, GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=AIPlayer(Color.BLACK, depth=2),
    )
"""

from kingside.game.controller import GameController, GameEvents
from kingside.game.interfaces import GamePhase
from kingside.game.player import AIPlayer, HumanPlayer, IPlayer, Player
from kingside.game.protocol import GameInfo, MoveMessage, PlayerInfo
from kingside.game.state import Game, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "Game",
    "GameController",
    "GameEvents",
    "GameInfo",
    "HumanPlayer",
    "MoveMessage",
    "MoveRecord",
    "PlayerInfo",
    "Player",
]
