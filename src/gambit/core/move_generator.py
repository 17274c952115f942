"""Legal move generation: piece reach filtered for king safety."""

from __future__ import annotations

from gambit.core.attacks import king_in_check
from gambit.core.board import Board
from gambit.core.enums import PieceType
from gambit.core.piece import Piece
from gambit.core.reach import movement, raw_reach
from gambit.core.types import Square


def placed_piece(piece: Piece, to_sq: Square) -> Piece:
    """The piece that lands on *to_sq*: pawns on their far row become queens."""
    if piece.kind == PieceType.PAWN and to_sq[0] == piece.color.promotion_row:
        return piece.promoted(PieceType.QUEEN)
    return piece


def legal_moves(piece: Piece, from_sq: Square, board: Board) -> set[Square]:
    """Destinations of *piece* that do not leave its own king attacked.

    Each candidate is tried on its own scratch copy of *board*; the caller's
    board is never touched.
    """
    legal: set[Square] = set()
    for to_sq in movement(piece, from_sq, board):
        scratch = board.copy()
        scratch.move_piece(from_sq, to_sq, placed_piece(piece, to_sq))
        if not king_in_check(piece.color, scratch):
            legal.add(to_sq)
    return legal


def candidate_moves(
    piece: Piece, from_sq: Square, board: Board, raw: bool = False
) -> set[Square]:
    """Destination squares for *piece* standing on *from_sq*.

    With *raw* the attacking reach is returned without any king-safety
    filtering; otherwise only strictly legal destinations.
    """
    if raw:
        return raw_reach(piece, from_sq, board)
    return legal_moves(piece, from_sq, board)
