"""ControlPanel — game action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from gambit.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons for game actions: new game / reset and flip."""

    new_game_clicked = pyqtSignal()
    flip_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._game_active = False
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Adwaita Sans", 10)

        self._btn_new = QPushButton()
        self._btn_new.setFont(btn_font)
        self._btn_new.setMinimumHeight(36)
        self._btn_new.clicked.connect(self.new_game_clicked)
        layout.addWidget(self._btn_new)

        self._btn_flip = QPushButton()
        self._btn_flip.setFont(btn_font)
        self._btn_flip.setMinimumHeight(36)
        self._btn_flip.clicked.connect(self.flip_clicked)
        layout.addWidget(self._btn_flip)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_new.setText(s.btn_reset_game if self._game_active else s.btn_new_game)
        self._btn_flip.setText(s.btn_flip)

    def set_game_active(self, active: bool) -> None:
        """A running game offers "Reset Game", a finished one "New Game"."""
        self._game_active = active
        self.retranslate_ui()

    @property
    def new_game_text(self) -> str:
        return self._btn_new.text()
