"""GameController — owns a GameState and notifies listeners of changes.

Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from gambit.core.outcome import Outcome
from gambit.core.types import Square
from gambit.game.state import GameState, MoveRecord

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
SelectionCallback = Callable[[Square | None], None]
GameOverCallback = Callable[[Outcome], None]
ResetCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Routes user input into a :class:`GameState` and reports what changed.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "events")

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    # ── Operations ───────────────────────────────────────────────────────

    def new_game(self) -> None:
        """Reset the owned state to the starting position."""
        self._state.reset()
        for cb in self.events.on_reset:
            cb()

    def click(self, square: Square) -> bool:
        """Handle a click on *square*. Returns True if a move was played."""
        selected_before = self._state.selected_square
        plies_before = self._state.ply_count

        self._state.select(square)

        if self._state.ply_count != plies_before:
            if selected_before is not None:
                self._emit_selection(None)
            self._after_move()
            return True
        if self._state.selected_square != selected_before:
            self._emit_selection(self._state.selected_square)
        return False

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Play a move directly. Returns True if legal and applied."""
        selected_before = self._state.selected_square
        if self._state.apply_move(from_sq, to_sq) is None:
            return False
        if selected_before is not None:
            self._emit_selection(None)
        self._after_move()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _after_move(self) -> None:
        record = self._state.move_history[-1]
        for cb in self.events.on_move:
            cb(record, self._state)
        if self._state.is_game_over:
            for game_over_cb in self.events.on_game_over:
                game_over_cb(self._state.outcome)

    def _emit_selection(self, square: Square | None) -> None:
        for cb in self.events.on_selection_changed:
            cb(square)
