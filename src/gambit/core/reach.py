"""Per-piece reach: movement rules and raw attacking reach.

Nothing here consults king safety, so the attack oracle can build on these
functions without recursing back into legal-move filtering.
"""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import ALL_SQUARES, Square, is_on_board

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        targets[sq] = tuple(
            sq.offset(dr, dc)
            for dr, dc in offsets
            if is_on_board(sq.row + dr, sq.col + dc)
        )
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            r, c = sq.row + dr, sq.col + dc
            ray: list[Square] = []
            while is_on_board(r, c):
                ray.append(Square(r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


def _build_pawn_attacks(color: Color) -> dict[Square, tuple[Square, ...]]:
    step = color.forward
    return _build_targets(((step, -1), (step, 1)))


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
_PAWN_ATTACKS: tuple[dict[Square, tuple[Square, ...]], ...] = (
    _build_pawn_attacks(Color.WHITE),
    _build_pawn_attacks(Color.BLACK),
)

_SLIDER_RAYS: dict[PieceType, dict[Square, tuple[tuple[Square, ...], ...]]] = {
    PieceType.BISHOP: _build_rays(BISHOP_DIRS),
    PieceType.ROOK: _build_rays(ROOK_DIRS),
    PieceType.QUEEN: _build_rays(QUEEN_DIRS),
}


# -- Public API -------------------------------------------------------------


def movement(piece: Piece, from_sq: Square, board: Board) -> set[Square]:
    """Destinations allowed by *piece*'s movement rules, ignoring king safety."""
    return _reach(piece, Square(*from_sq), board, attacks_only=False)


def raw_reach(piece: Piece, from_sq: Square, board: Board) -> set[Square]:
    """Squares *piece* attacks from *from_sq*.

    Pawns attack both forward diagonals whether or not they are occupied,
    and never attack the squares they push to.
    """
    return _reach(piece, Square(*from_sq), board, attacks_only=True)


# -- Piece dispatch (private) -----------------------------------------------


def _reach(
    piece: Piece, sq: Square, board: Board, *, attacks_only: bool
) -> set[Square]:
    kind = piece.kind
    color = piece.color
    if kind == PieceType.PAWN:
        if attacks_only:
            return _pawn_attacks(sq, color, board)
        return _pawn_moves(sq, color, board)
    if kind == PieceType.KNIGHT:
        return _leaper(_KNIGHT_TARGETS[sq], color, board)
    if kind == PieceType.KING:
        return _leaper(_KING_TARGETS[sq], color, board)
    return _sliding(_SLIDER_RAYS[kind][sq], color, board)


def _pawn_moves(sq: Square, color: Color, board: Board) -> set[Square]:
    moves: set[Square] = set()
    step = color.forward

    if is_on_board(sq.row + step, sq.col):
        one_step = sq.offset(step, 0)
        if board.is_empty(one_step):
            moves.add(one_step)
            if sq.row == color.pawn_row:
                two_step = sq.offset(2 * step, 0)
                if board.is_empty(two_step):
                    moves.add(two_step)

    for cap_sq in _PAWN_ATTACKS[int(color)][sq]:
        target = board[cap_sq]
        if target is not None and target.color != color:
            moves.add(cap_sq)
    return moves


def _pawn_attacks(sq: Square, color: Color, board: Board) -> set[Square]:
    return _leaper(_PAWN_ATTACKS[int(color)][sq], color, board)


def _leaper(targets: tuple[Square, ...], color: Color, board: Board) -> set[Square]:
    moves: set[Square] = set()
    for to_sq in targets:
        target = board[to_sq]
        if target is None or target.color != color:
            moves.add(to_sq)
    return moves


def _sliding(
    rays: tuple[tuple[Square, ...], ...],
    color: Color,
    board: Board,
) -> set[Square]:
    moves: set[Square] = set()
    for ray in rays:
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                moves.add(to_sq)
                continue
            if target.color != color:
                moves.add(to_sq)
            break
    return moves
