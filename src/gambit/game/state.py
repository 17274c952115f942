"""Game state machine — turn order, selection, move application, outcome."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.move import Move
from gambit.core.move_generator import legal_moves, placed_piece
from gambit.core.outcome import Outcome
from gambit.core.piece import Piece
from gambit.core.rules import Rules
from gambit.core.types import Square

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    captured: Piece | None = None
    was_check: bool = False

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Board, side to move, current selection and outcome.

    A plain data and logic class with no threading or UI. It is changed
    only through :meth:`select`, :meth:`apply_move` and :meth:`reset`.
    """

    board: Board = field(default_factory=Board.initial)
    turn: Color = Color.WHITE
    selected_square: Square | None = None
    outcome: Outcome = field(default_factory=Outcome.ongoing)
    move_history: list[MoveRecord] = field(default_factory=list)

    # ── Initialisation ───────────────────────────────────────────────────

    @classmethod
    def from_placement(cls, placement: str, turn: Color = Color.WHITE) -> GameState:
        """Start from an arbitrary piece placement with *turn* to move."""
        board = Board.from_placement(placement)
        return cls(board=board, turn=turn, outcome=Rules.evaluate(turn, board))

    def reset(self) -> None:
        """Reinitialise to the starting position, whatever the current state."""
        self.board = Board.initial()
        self.turn = Color.WHITE
        self.selected_square = None
        self.outcome = Outcome.ongoing()
        self.move_history.clear()
        _LOGGER.info("Game reset to the starting position")

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, square: Square) -> bool:
        """Handle a click on *square*. Returns True if it completed a move."""
        if self.is_game_over:
            return False

        sq = Square(*square)
        piece = self.board[sq]

        if self.selected_square is None:
            if piece is not None and piece.color == self.turn:
                self._set_selection(sq)
            return False

        if sq in self.legal_destinations():
            return self.apply_move(self.selected_square, sq) is not None

        switch = piece is not None and piece.color == self.turn
        if switch and sq != self.selected_square:
            self._set_selection(sq)
        else:
            self._set_selection(None)
        return False

    def legal_destinations(self) -> set[Square]:
        """Legal destinations of the selected piece (empty without selection)."""
        if self.selected_square is None:
            return set()
        piece = self.board[self.selected_square]
        if piece is None:
            return set()
        return legal_moves(piece, self.selected_square, self.board)

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_sq: Square, to_sq: Square) -> MoveRecord | None:
        """Apply a move if it is legal for the side to move.

        Returns the history record, or None when the move is rejected; a
        rejected move leaves the state untouched.
        """
        if self.is_game_over:
            _LOGGER.debug("Move %s-%s ignored: game is over", from_sq, to_sq)
            return None

        from_sq, to_sq = Square(*from_sq), Square(*to_sq)
        piece = self.board[from_sq]
        if piece is None or piece.color != self.turn:
            _LOGGER.debug(
                "Move %s-%s rejected: no %s piece there", from_sq, to_sq, self.turn
            )
            return None
        if to_sq not in legal_moves(piece, from_sq, self.board):
            _LOGGER.debug("Move %s-%s rejected: illegal destination", from_sq, to_sq)
            return None

        placed = placed_piece(piece, to_sq)
        captured = self.board.move_piece(from_sq, to_sq, placed)
        self.selected_square = None
        self.turn = self.turn.opposite
        self.outcome = Rules.evaluate(self.turn, self.board)

        record = MoveRecord(
            move=Move(from_sq, to_sq, placed.kind if placed != piece else None),
            piece=piece,
            captured=captured,
            was_check=Rules.is_in_check(self.turn, self.board),
        )
        self.move_history.append(record)

        if self.outcome.is_terminal:
            _LOGGER.info("Game over after %s: %s", record.move, self.outcome)
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return (self.ply_count // 2) + 1

    @property
    def is_in_check(self) -> bool:
        """Whether the side to move is in check."""
        return Rules.is_in_check(self.turn, self.board)

    @property
    def checked_king_square(self) -> Square | None:
        """King square of the side to move when it is in check."""
        return Rules.checked_king_square(self.turn, self.board)

    @property
    def last_move(self) -> Move | None:
        if not self.move_history:
            return None
        return self.move_history[-1].move

    def legal_moves(self) -> list[Move]:
        """Legal moves of the side to move."""
        return Rules.all_legal_moves(self.turn, self.board)

    # ── Internal ─────────────────────────────────────────────────────────

    def _set_selection(self, sq: Square | None) -> None:
        if sq != self.selected_square:
            _LOGGER.debug("Selection %s -> %s", self.selected_square, sq)
        self.selected_square = sq
