"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import BOARD_SIZE, Square, is_on_board

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


class Board:
    """Mutable 64-square board with a cached king square per color."""

    __slots__ = ("_squares", "_king_squares")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None, None]

    @staticmethod
    def _index(sq: Square) -> int:
        row, col = sq
        if not is_on_board(row, col):
            raise ValueError(f"Square off the board: {tuple(sq)!r}")
        return row * BOARD_SIZE + col

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[self._index(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        idx = self._index(sq)
        old_piece = self._squares[idx]
        if old_piece is not None and old_piece.kind == PieceType.KING:
            if self._king_squares[int(old_piece.color)] == sq:
                self._king_squares[int(old_piece.color)] = None

        self._squares[idx] = piece

        if piece is not None and piece.kind == PieceType.KING:
            self._king_squares[int(piece.color)] = Square(*sq)

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Every occupied square with its piece, row by row."""
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield Square(*divmod(idx, BOARD_SIZE)), piece

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """All ``(square, piece)`` pairs belonging to *color*."""
        return [(sq, p) for sq, p in self.occupied() if p.color == color]

    def king_square(self, color: Color) -> Square | None:
        """Return *color*'s king square, or ``None`` if it has no king."""
        return self._king_squares[int(color)]

    def rows(self) -> list[list[Piece | None]]:
        """Row-major 8×8 snapshot, row 0 first."""
        return [
            self._squares[r * BOARD_SIZE : (r + 1) * BOARD_SIZE]
            for r in range(BOARD_SIZE)
        ]

    # -- Mutation / copying -------------------------------------------------

    def move_piece(
        self, from_sq: Square, to_sq: Square, placed: Piece | None = None
    ) -> Piece | None:
        """Lift the piece on *from_sq* onto *to_sq* and return the captured piece.

        *placed* replaces the moving piece on arrival (promotion).
        """
        piece = self[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {Square(*from_sq)}")
        captured = self[to_sq]
        self[from_sq] = None
        self[to_sq] = placed if placed is not None else piece
        return captured

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * (BOARD_SIZE * BOARD_SIZE)
        self._king_squares = [None, None]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for c, kind in enumerate(_BACK_RANK):
            b[Square(0, c)] = Piece(kind, Color.BLACK)
            b[Square(1, c)] = Piece(PieceType.PAWN, Color.BLACK)
            b[Square(6, c)] = Piece(PieceType.PAWN, Color.WHITE)
            b[Square(7, c)] = Piece(kind, Color.WHITE)
        return b

    @classmethod
    def from_placement(cls, placement: str) -> Board:
        """Parse a piece-placement diagram, e.g. ``"4k3/8/8/8/8/8/8/4K3"``.

        Rows are separated by ``/`` starting from row 0 (Black's back rank);
        digits stand for runs of empty squares.
        """
        rows = placement.split("/")
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Invalid placement (must contain 8 rows): {placement!r}")
        b = cls()
        for row, row_text in enumerate(rows):
            col = 0
            for ch in row_text:
                if ch.isdigit():
                    step = int(ch)
                    if not (1 <= step <= BOARD_SIZE):
                        raise ValueError(
                            f"Invalid placement digit {ch!r}: {placement!r}"
                        )
                    col += step
                else:
                    if col >= BOARD_SIZE:
                        raise ValueError(f"Invalid placement row width: {placement!r}")
                    b[Square(row, col)] = Piece.from_char(ch)
                    col += 1
                if col > BOARD_SIZE:
                    raise ValueError(f"Invalid placement row width: {placement!r}")
            if col != BOARD_SIZE:
                raise ValueError(f"Invalid placement row width: {placement!r}")
        return b

    def placement(self) -> str:
        """Serialise the board to a piece-placement diagram."""
        rows: list[str] = []
        for row_pieces in self.rows():
            empty = 0
            text = ""
            for piece in row_pieces:
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
            if empty:
                text += str(empty)
            rows.append(text)
        return "/".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        lines: list[str] = []
        for row, row_pieces in enumerate(self.rows()):
            cells = [str(p) if p else "." for p in row_pieces]
            lines.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
