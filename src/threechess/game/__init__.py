"""Game management layer — controller, state machine, events.

Quick start::

    from threechess.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.select_or_move("e2")
    ctrl.select_or_move("e4")
"""

from threechess.game.controller import GameController, GameEvents
from threechess.game.interfaces import GamePhase, IGameController
from threechess.game.state import GameState, MoveRecord, SelectionResult

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    "SelectionResult",
]
