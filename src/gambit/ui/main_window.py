"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from gambit.core.enums import Color, OutcomeKind
from gambit.core.outcome import Outcome
from gambit.core.types import Square
from gambit.game.controller import GameController
from gambit.game.state import GameState, MoveRecord
from gambit.ui.board.board_view import BoardView
from gambit.ui.i18n import t
from gambit.ui.panels.control_panel import ControlPanel
from gambit.ui.settings import AppSettings, apply_settings

_LOGGER = logging.getLogger(__name__)


def color_name(color: Color) -> str:
    s = t()
    return s.color_white if color == Color.WHITE else s.color_black


def status_text(state: GameState) -> str:
    """One-line description of the game for the status label."""
    s = t()
    outcome = state.outcome
    if outcome.kind == OutcomeKind.CHECKMATE and outcome.winner is not None:
        return s.status_checkmate.format(color=color_name(outcome.winner))
    if outcome.kind == OutcomeKind.STALEMATE:
        return s.status_stalemate
    if outcome.kind == OutcomeKind.DRAW:
        return s.status_draw
    if state.is_in_check:
        return s.status_check.format(color=color_name(state.turn))
    return s.status_turn.format(color=color_name(state.turn))


class MainWindow(QMainWindow):
    """Main application window for Gambit."""

    def __init__(
        self,
        controller: GameController | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setMinimumSize(520, 640)
        self.resize(640, 760)

        self._controller = controller if controller is not None else GameController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()

        apply_settings(self, self._settings)
        self.board_view.board_scene.set_state(self._controller.state)
        self._refresh_status()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._control_panel = ControlPanel()
        root.addWidget(self._control_panel)

        self._status_label = QLabel()
        self._status_label.setObjectName("statusLine")
        root.addWidget(self._status_label)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("")
        assert self._menu_game is not None

        self._act_new_game = QAction(self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._act_flip = QAction(self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_game.addAction(self._act_flip)

        self._menu_game.addSeparator()

        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._menu_game.setTitle(s.menu_game)
        self._act_new_game.setText(s.menu_new_game)
        self._act_flip.setText(s.menu_flip_board)
        self._act_quit.setText(s.menu_quit)
        self._control_panel.retranslate_ui()
        self._refresh_status()

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._control_panel.new_game_clicked.connect(self._on_new_game)
        self._control_panel.flip_clicked.connect(self._on_flip)

    def _connect_game_events(self) -> None:
        events = self._controller.events
        events.on_move.append(self._on_game_move)
        events.on_selection_changed.append(self._on_selection_changed)
        events.on_game_over.append(self._on_game_over)
        events.on_reset.append(self._on_game_reset)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def status_label_text(self) -> str:
        return self._status_label.text()

    # ── UI slots ─────────────────────────────────────────────────────────

    def _on_square_clicked(self, square: Square) -> None:
        self._controller.click(square)

    def _on_new_game(self) -> None:
        self._controller.new_game()

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        self._settings.flipped = not scene.is_flipped()
        scene.set_flipped(self._settings.flipped)

    # ── Game event handlers ──────────────────────────────────────────────

    def _on_game_move(self, record: MoveRecord, state: GameState) -> None:
        _LOGGER.debug("Move played: %s", record.move)
        self._board_view.board_scene.refresh()
        self._refresh_status()

    def _on_selection_changed(self, _square: Square | None) -> None:
        self._board_view.board_scene.refresh()

    def _on_game_over(self, outcome: Outcome) -> None:
        self._board_view.board_scene.set_interactive(False)
        self._refresh_status()

    def _on_game_reset(self) -> None:
        scene = self._board_view.board_scene
        scene.set_interactive(True)
        scene.set_state(self._controller.state)
        self._refresh_status()

    def _refresh_status(self) -> None:
        state = self._controller.state
        self._status_label.setText(status_text(state))
        self._control_panel.set_game_active(
            state.ply_count > 0 and not state.is_game_over
        )
