"""Tests for MainWindow wiring: status line, buttons and game flow."""

from __future__ import annotations

from gambit.core.enums import Color
from gambit.core.types import parse_square
from gambit.game.controller import GameController
from gambit.game.state import GameState
from gambit.ui.main_window import MainWindow, status_text
from gambit.ui.settings import AppSettings


def _click(window: MainWindow, *names: str) -> None:
    for name in names:
        window._on_square_clicked(parse_square(name))


def test_initial_status_and_button() -> None:
    window = MainWindow()
    assert window.windowTitle() == "Gambit"
    assert window.status_label_text == "Turn: White"
    assert window._control_panel.new_game_text == "New Game"


def test_click_flow_updates_status() -> None:
    window = MainWindow()
    _click(window, "e2", "e4")
    assert window.controller.state.turn == Color.BLACK
    assert window.status_label_text == "Turn: Black"
    assert window._control_panel.new_game_text == "Reset Game"


def test_selection_shows_legal_dots() -> None:
    window = MainWindow()
    _click(window, "b1")
    assert len(window.board_view.board_scene._legal_dot_items) == 2
    _click(window, "b1")
    assert window.board_view.board_scene._legal_dot_items == []


def test_check_status() -> None:
    window = MainWindow()
    _click(window, "e2", "e4", "f7", "f6", "d1", "h5")
    assert window.status_label_text == "Black is in check!"


def test_checkmate_locks_board_until_new_game() -> None:
    window = MainWindow()
    _click(window, "f2", "f3", "e7", "e5", "g2", "g4", "d8", "h4")
    scene = window.board_view.board_scene
    assert window.status_label_text == "Checkmate! Black wins!"
    assert not scene._interactive
    assert window._control_panel.new_game_text == "New Game"

    window._on_new_game()
    assert scene._interactive
    assert window.status_label_text == "Turn: White"
    assert window.controller.state == GameState()
    assert len(scene._piece_items) == 32


def test_stalemate_status() -> None:
    state = GameState.from_placement("8/8/8/8/1q6/8/2k5/K7", Color.BLACK)
    window = MainWindow(controller=GameController(state))
    assert window.status_label_text == "Turn: Black"
    window.controller.submit_move(parse_square("b4"), parse_square("b3"))
    assert window.status_label_text == "Stalemate! The game is drawn."


def test_flip_action_toggles_orientation() -> None:
    window = MainWindow()
    scene = window.board_view.board_scene
    window._act_flip.trigger()
    assert scene.is_flipped()
    window._act_flip.trigger()
    assert not scene.is_flipped()


def test_settings_applied_on_construction() -> None:
    settings = AppSettings(
        language="Russian",
        board_theme="Green",
        show_coordinates=False,
        flipped=True,
    )
    window = MainWindow(settings=settings)
    scene = window.board_view.board_scene
    assert window.status_label_text == "Ход: Белые"
    assert window._control_panel.new_game_text == "Новая игра"
    assert scene.is_flipped()
    assert all(not item.isVisible() for item in scene._coord_items)


def test_status_text_without_window() -> None:
    assert status_text(GameState()) == "Turn: White"
