"""High-level chess rules: check, checkmate, stalemate detection."""

from __future__ import annotations

from gambit.core.attacks import king_in_check
from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.move import Move
from gambit.core.move_generator import legal_moves, placed_piece
from gambit.core.outcome import Outcome
from gambit.core.types import Square


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy: no castling, no en passant, no rule-based draws.
    # Pawns always promote to a queen.

    @staticmethod
    def is_in_check(color: Color, board: Board) -> bool:
        return king_in_check(color, board)

    @staticmethod
    def has_legal_move(color: Color, board: Board) -> bool:
        """Whether *color* has at least one legal move (stops at the first)."""
        for sq, piece in board.pieces(color):
            if legal_moves(piece, sq, board):
                return True
        return False

    @staticmethod
    def all_legal_moves(color: Color, board: Board) -> list[Move]:
        """Every legal move of *color*, ordered by origin then destination."""
        moves: list[Move] = []
        for sq, piece in board.pieces(color):
            for to_sq in sorted(legal_moves(piece, sq, board)):
                promotion = None
                if placed_piece(piece, to_sq) != piece:
                    promotion = PieceType.QUEEN
                moves.append(Move(sq, to_sq, promotion))
        return moves

    @staticmethod
    def is_checkmate(color: Color, board: Board) -> bool:
        if not Rules.is_in_check(color, board):
            return False
        return not Rules.has_legal_move(color, board)

    @staticmethod
    def is_stalemate(color: Color, board: Board) -> bool:
        if Rules.is_in_check(color, board):
            return False
        return not Rules.has_legal_move(color, board)

    @staticmethod
    def checked_king_square(color: Color, board: Board) -> Square | None:
        """Square of *color*'s king when it stands in check, else ``None``."""
        if not Rules.is_in_check(color, board):
            return None
        return board.king_square(color)

    @staticmethod
    def evaluate(color: Color, board: Board) -> Outcome:
        """Outcome of the position for *color*, the side about to move."""
        in_check = Rules.is_in_check(color, board)
        if Rules.has_legal_move(color, board):
            return Outcome.ongoing()
        if in_check:
            return Outcome.checkmate(color.opposite)
        return Outcome.stalemate()
