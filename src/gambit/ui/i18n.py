"""Internationalisation strings for the Gambit UI.

Usage::

    from gambit.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_new_game)    # "Новая игра"
    print(t().status_turn.format(color=t().color_white))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_new_game: str
    menu_flip_board: str
    menu_quit: str

    # Status line
    status_turn: str  # "Turn: {color}"
    status_check: str  # "{color} is in check!"
    status_checkmate: str  # "Checkmate! {color} wins!"
    status_stalemate: str
    status_draw: str
    color_white: str
    color_black: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    btn_new_game: str
    btn_reset_game: str
    btn_flip: str


_EN = Strings(
    window_title="Gambit",
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_flip_board="&Flip Board",
    menu_quit="&Quit",
    status_turn="Turn: {color}",
    status_check="{color} is in check!",
    status_checkmate="Checkmate! {color} wins!",
    status_stalemate="Stalemate! The game is drawn.",
    status_draw="Draw.",
    color_white="White",
    color_black="Black",
    btn_new_game="New Game",
    btn_reset_game="Reset Game",
    btn_flip="⟲ Flip",
)

_RU = Strings(
    window_title="Gambit",
    menu_game="&Игра",
    menu_new_game="&Новая игра",
    menu_flip_board="&Перевернуть доску",
    menu_quit="&Выход",
    status_turn="Ход: {color}",
    status_check="{color}: шах!",
    status_checkmate="Мат! {color} побеждают!",
    status_stalemate="Пат! Ничья.",
    status_draw="Ничья.",
    color_white="Белые",
    color_black="Чёрные",
    btn_new_game="Новая игра",
    btn_reset_game="Сбросить игру",
    btn_flip="⟲ Перевернуть",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
