"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from gambit.core.types import parse_square
from gambit.game.state import GameState

# Headless Linux runners have no display server.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

FOOLS_MATE = ("f2f3", "e7e5", "g2g4", "d8h4")


def play(state: GameState, *moves: str) -> GameState:
    """Apply coordinate moves such as ``"e2e4"``; every one must be legal."""
    for text in moves:
        record = state.apply_move(parse_square(text[:2]), parse_square(text[2:4]))
        assert record is not None, f"illegal move in test line: {text}"
    return state


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture
def play_moves() -> Callable[..., GameState]:
    return play


@pytest.fixture
def state() -> GameState:
    return GameState()


@pytest.fixture
def fools_mate() -> GameState:
    """Black has just delivered mate with Qh4."""
    return play(GameState(), *FOOLS_MATE)


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Reset shared i18n state between tests."""
    from gambit.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Close top-level widgets a UI test leaves behind."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
