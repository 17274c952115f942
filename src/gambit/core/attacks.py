"""Attack detection: is a square attacked, is a king in check."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.reach import raw_reach
from gambit.core.types import Square


def is_attacked(square: Square, by_color: Color, board: Board) -> bool:
    """Is *square* attacked by any piece of *by_color*?"""
    target = Square(*square)
    for sq, piece in board.pieces(by_color):
        if target in raw_reach(piece, sq, board):
            return True
    return False


def king_in_check(color: Color, board: Board) -> bool:
    """Is *color*'s king attacked by the opponent?

    A side without a king is never in check.
    """
    king_sq = board.king_square(color)
    if king_sq is None:
        return False
    return is_attacked(king_sq, color.opposite, board)
