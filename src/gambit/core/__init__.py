"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from gambit.core import Board, legal_moves, parse_square

    board = Board.initial()
    e2 = parse_square("e2")
    print(sorted(legal_moves(board[e2], e2, board)))
"""

from gambit.core.attacks import is_attacked, king_in_check
from gambit.core.board import STARTING_PLACEMENT, Board
from gambit.core.enums import Color, OutcomeKind, PieceType
from gambit.core.move import Move
from gambit.core.move_generator import candidate_moves, legal_moves, placed_piece
from gambit.core.outcome import Outcome
from gambit.core.piece import Piece
from gambit.core.reach import movement, raw_reach
from gambit.core.rules import Rules
from gambit.core.types import (
    ALL_SQUARES,
    BOARD_SIZE,
    Square,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "OutcomeKind",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "BOARD_SIZE",
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "Outcome",
    "Piece",
    "Rules",
    "STARTING_PLACEMENT",
    # Move generation / attacks
    "candidate_moves",
    "is_attacked",
    "king_in_check",
    "legal_moves",
    "movement",
    "placed_piece",
    "raw_reach",
]
