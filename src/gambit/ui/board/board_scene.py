"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from gambit.core.enums import Color
from gambit.core.types import ALL_SQUARES, BOARD_SIZE, Square
from gambit.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from gambit.game.state import GameState


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece glyphs.

    The scene only draws a :class:`GameState`; clicks are reported through
    a signal and the owner decides what they mean.

    Signals:
        square_clicked(Square): Emitted when the user clicks a board square.
    """

    square_clicked = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._state: GameState | None = None
        self._flipped = False
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._highlight_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsEllipseItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_state(self, state: GameState) -> None:
        """Display *state* (full redraw of pieces and highlights)."""
        self._state = state
        self.refresh()

    def refresh(self) -> None:
        """Redraw pieces and highlights from the current state."""
        self._sync_pieces()
        self._sync_highlights()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable click handling."""
        self._interactive = interactive

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()
        self.refresh()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move dot highlights."""
        self._show_legal_moves = visible
        self._sync_highlights()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))

        for sq in ALL_SQUARES:
            vx, vy = self._visual_coords(sq)
            is_light = (sq.row + sq.col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vx * t, vy * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            theme = self._theme
            coord_color = theme.coord_dark if is_light else theme.coord_light

            # Rank numbers (left edge)
            if vx == 0:
                txt = QGraphicsSimpleTextItem(str(BOARD_SIZE - sq.row))
                txt.setFont(font)
                txt.setBrush(QBrush(coord_color))
                txt.setPos(vx * t + 2, vy * t + 1)
                self._add_coord(txt)

            # File letters (bottom edge)
            if vy == BOARD_SIZE - 1:
                txt = QGraphicsSimpleTextItem(chr(ord("a") + sq.col))
                txt.setFont(font)
                txt.setBrush(QBrush(coord_color))
                txt.setPos(vx * t + t - 12, vy * t + t - 16)
                self._add_coord(txt)

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(self, item: QGraphicsSimpleTextItem) -> None:
        item.setZValue(0.3)
        item.setVisible(self._show_coordinates)
        self.addItem(item)
        self._coord_items.append(item)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece glyphs from the current board."""
        self._clear_items(list(self._piece_items.values()))
        self._piece_items.clear()

        if self._state is None:
            return

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for sq, piece in self._state.board.occupied():
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            fill = (
                self._theme.white_piece
                if piece.color == Color.WHITE
                else self._theme.black_piece
            )
            item.setBrush(QBrush(fill))
            item.setPen(QPen(QColor(0, 0, 0, 160)))
            vx, vy = self._visual_coords(sq)
            bounds = item.boundingRect()
            item.setPos(
                vx * t + (t - bounds.width()) / 2,
                vy * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Selection / highlights ───────────────────────────────────────────

    def _sync_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)
        self._clear_items(self._last_move_highlights)
        self._clear_items(self._check_items)

        state = self._state
        if state is None:
            return

        last = state.last_move
        if last is not None:
            for sq in (last.from_sq, last.to_sq):
                rect = self._make_highlight(sq, self._theme.last_move)
                rect.setZValue(0.5)
                self._last_move_highlights.append(rect)

        king_sq = state.checked_king_square
        if king_sq is not None:
            rect = self._make_highlight(king_sq, self._theme.highlight_check)
            rect.setZValue(0.6)
            self._check_items.append(rect)

        if state.selected_square is None:
            return
        self._highlight_items.append(
            self._make_highlight(state.selected_square, self._theme.highlight_from)
        )
        if self._show_legal_moves:
            for sq in sorted(state.legal_destinations()):
                self._legal_dot_items.append(self._make_dot(sq))

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None:
            self.click_at(event.scenePos())
        super().mousePressEvent(event)

    def click_at(self, pos: QPointF) -> Square | None:
        """Report a click at scene *pos*; returns the square emitted, if any."""
        if not self._interactive or self._state is None:
            return None
        sq = self._pos_to_square(pos)
        if sq is not None:
            self.square_clicked.emit(sq)
        return sq

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Convert a board square to visual column/row."""
        if self._flipped:
            return BOARD_SIZE - 1 - sq.col, BOARD_SIZE - 1 - sq.row
        return sq.col, sq.row

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        vx = int(pos.x() // t)
        vy = int(pos.y() // t)
        if not (0 <= vx < BOARD_SIZE and 0 <= vy < BOARD_SIZE):
            return None
        if self._flipped:
            return Square(BOARD_SIZE - 1 - vy, BOARD_SIZE - 1 - vx)
        return Square(vy, vx)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vx, vy = self._visual_coords(sq)
        rect = QGraphicsRectItem(vx * t, vy * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    def _make_dot(self, sq: Square) -> QGraphicsEllipseItem:
        """Create a legal-destination marker centred on a square."""
        t = self.TILE
        d = t * 0.3
        vx, vy = self._visual_coords(sq)
        dot = QGraphicsEllipseItem(vx * t + (t - d) / 2, vy * t + (t - d) / 2, d, d)
        dot.setBrush(QBrush(self._theme.highlight_to))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(1.5)
        self.addItem(dot)
        return dot
