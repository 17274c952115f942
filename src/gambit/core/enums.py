"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row step of a pawn advance: White moves toward row 0."""
        return -1 if self == Color.WHITE else 1

    @property
    def pawn_row(self) -> int:
        """Row the pawns of this color start on."""
        return 6 if self == Color.WHITE else 1

    @property
    def promotion_row(self) -> int:
        """Far row on which a pawn of this color promotes."""
        return 0 if self == Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class OutcomeKind(IntEnum):
    """How a game stands after the last ply."""

    ONGOING = 0
    CHECKMATE = 1
    STALEMATE = 2
    DRAW = 3
