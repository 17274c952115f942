"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import Color, PieceType

# Diagram character ↔ (PieceType, Color)
_CHAR_MAP: dict[str, tuple[PieceType, Color]] = {
    "P": (PieceType.PAWN, Color.WHITE),
    "N": (PieceType.KNIGHT, Color.WHITE),
    "B": (PieceType.BISHOP, Color.WHITE),
    "R": (PieceType.ROOK, Color.WHITE),
    "Q": (PieceType.QUEEN, Color.WHITE),
    "K": (PieceType.KING, Color.WHITE),
    "p": (PieceType.PAWN, Color.BLACK),
    "n": (PieceType.KNIGHT, Color.BLACK),
    "b": (PieceType.BISHOP, Color.BLACK),
    "r": (PieceType.ROOK, Color.BLACK),
    "q": (PieceType.QUEEN, Color.BLACK),
    "k": (PieceType.KING, Color.BLACK),
}

_UNICODE: dict[tuple[PieceType, Color], str] = {
    (PieceType.PAWN, Color.WHITE): "♙",
    (PieceType.KNIGHT, Color.WHITE): "♘",
    (PieceType.BISHOP, Color.WHITE): "♗",
    (PieceType.ROOK, Color.WHITE): "♖",
    (PieceType.QUEEN, Color.WHITE): "♕",
    (PieceType.KING, Color.WHITE): "♔",
    (PieceType.PAWN, Color.BLACK): "♟",
    (PieceType.KNIGHT, Color.BLACK): "♞",
    (PieceType.BISHOP, Color.BLACK): "♝",
    (PieceType.ROOK, Color.BLACK): "♜",
    (PieceType.QUEEN, Color.BLACK): "♛",
    (PieceType.KING, Color.BLACK): "♚",
}

_DIAGRAM_CHARS: dict[tuple[PieceType, Color], str] = {
    v: k for k, v in _CHAR_MAP.items()
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    kind: PieceType
    color: Color

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Diagram character (uppercase = white, lowercase = black)."""
        return _DIAGRAM_CHARS[(self.kind, self.color)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from diagram character, e.g. 'N' → white knight."""
        try:
            kind, color = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, color)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.kind, self.color)]

    def promoted(self, kind: PieceType = PieceType.QUEEN) -> Piece:
        """Copy of this piece with a new kind."""
        return Piece(kind, self.color)
