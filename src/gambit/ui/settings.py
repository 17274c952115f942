"""User-configurable UI settings and how they are applied."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gambit.ui.i18n import set_language
from gambit.ui.styles.theme import THEMES, BoardTheme

if TYPE_CHECKING:
    from gambit.ui.main_window import MainWindow


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    flipped: bool = False


def apply_settings(window: MainWindow, settings: AppSettings) -> None:
    """Push *settings* into a live window."""
    # Locale first: retranslate_ui reads it.
    set_language(settings.language)
    window.retranslate_ui()

    scene = window.board_view.board_scene
    scene.set_theme(THEMES.get(settings.board_theme, BoardTheme.default()))
    scene.set_show_coordinates(settings.show_coordinates)
    scene.set_show_legal_moves(settings.show_legal_moves)
    if scene.is_flipped() != settings.flipped:
        scene.set_flipped(settings.flipped)
