"""Game management layer — controller, players, settings, state machine.

Quick start::

    from glinski.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=HumanPlayer(Color.BLACK, "Bob"),
    )
    ctrl.handle_cell_click(Cell(-4, 5, -1))
"""

from glinski.game.autoplay import AutoPlaySession
from glinski.game.controller import GameController, GameEvents, Highlight
from glinski.game.interfaces import (
    GameEndReason,
    GameMode,
    GamePhase,
    HumanSide,
    IPlayer,
)
from glinski.game.player import AIPlayer, HumanPlayer
from glinski.game.settings import GameSettings
from glinski.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GameEndReason",
    "GameMode",
    "GamePhase",
    "HumanSide",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "AutoPlaySession",
    "GameController",
    "GameEvents",
    "GameSettings",
    "GameState",
    "Highlight",
    "HumanPlayer",
    "MoveRecord",
]
