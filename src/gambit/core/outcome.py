"""Outcome value object."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import Color, OutcomeKind


@dataclass(frozen=True, slots=True)
class Outcome:
    """Immutable game outcome; ``winner`` is set only for checkmate."""

    kind: OutcomeKind
    winner: Color | None = None

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def ongoing(cls) -> Outcome:
        return cls(OutcomeKind.ONGOING)

    @classmethod
    def checkmate(cls, winner: Color) -> Outcome:
        return cls(OutcomeKind.CHECKMATE, winner)

    @classmethod
    def stalemate(cls) -> Outcome:
        return cls(OutcomeKind.STALEMATE)

    @classmethod
    def draw(cls) -> Outcome:
        return cls(OutcomeKind.DRAW)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_terminal(self) -> bool:
        """Checkmate, stalemate and draw all end the game."""
        return self.kind != OutcomeKind.ONGOING

    def __str__(self) -> str:
        if self.kind == OutcomeKind.CHECKMATE:
            return f"checkmate ({self.winner!s} wins)"
        return self.kind.name.lower()
