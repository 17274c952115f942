"""Game management layer — state machine, embedding interface, controller.

Quick start::

    from gambit.core import parse_square
    from gambit.game import get_legal_destinations, new_game, select

    state = new_game()
    select(state, parse_square("e2"))
    print(sorted(get_legal_destinations(state)))
"""

from gambit.game.controller import GameController, GameEvents
from gambit.game.session import (
    apply_move,
    get_legal_destinations,
    new_game,
    reset,
    select,
)
from gambit.game.state import GameState, MoveRecord

__all__ = [
    # Embedding interface
    "apply_move",
    "get_legal_destinations",
    "new_game",
    "reset",
    "select",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
