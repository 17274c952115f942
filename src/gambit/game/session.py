"""Embedding interface: the four operations a UI layer calls.

Every function takes the caller-owned :class:`GameState`, mutates it in
place and hands it back, so calls can be chained or used functionally.
"""

from __future__ import annotations

from gambit.core.types import Square
from gambit.game.state import GameState


def new_game() -> GameState:
    """Fresh game: starting position, White to move, nothing selected."""
    return GameState()


def select(state: GameState, square: Square) -> GameState:
    """Route a square click through the selection state machine."""
    state.select(square)
    return state


def apply_move(state: GameState, from_sq: Square, to_sq: Square) -> GameState:
    """Play *from_sq* → *to_sq* if legal; otherwise leave *state* unchanged."""
    state.apply_move(from_sq, to_sq)
    return state


def get_legal_destinations(state: GameState) -> set[Square]:
    """Legal destinations of the selected piece, empty when none is selected."""
    return state.legal_destinations()


def reset(state: GameState) -> GameState:
    state.reset()
    return state
