"""Tests for GameController event dispatch."""

from __future__ import annotations

from gambit.core.enums import Color
from gambit.core.outcome import Outcome
from gambit.core.types import Square, parse_square
from gambit.game.controller import GameController
from gambit.game.state import GameState, MoveRecord


class _Recorder:
    def __init__(self, controller: GameController) -> None:
        self.moves: list[str] = []
        self.selections: list[Square | None] = []
        self.outcomes: list[Outcome] = []
        self.resets = 0
        events = controller.events
        events.on_move.append(self._on_move)
        events.on_selection_changed.append(self.selections.append)
        events.on_game_over.append(self.outcomes.append)
        events.on_reset.append(self._on_reset)

    def _on_move(self, record: MoveRecord, state: GameState) -> None:
        self.moves.append(str(record.move))

    def _on_reset(self) -> None:
        self.resets += 1


def click(controller: GameController, *names: str) -> list[bool]:
    return [controller.click(parse_square(n)) for n in names]


class TestClick:
    def test_selection_events(self) -> None:
        ctrl = GameController()
        rec = _Recorder(ctrl)
        assert click(ctrl, "e2", "d2", "d2") == [False, False, False]
        assert rec.selections == [parse_square("e2"), parse_square("d2"), None]
        assert rec.moves == []

    def test_click_on_empty_square_emits_nothing(self) -> None:
        ctrl = GameController()
        rec = _Recorder(ctrl)
        click(ctrl, "e4")
        assert rec.selections == []

    def test_move_event(self) -> None:
        ctrl = GameController()
        rec = _Recorder(ctrl)
        assert click(ctrl, "e2", "e4") == [False, True]
        assert rec.moves == ["e2e4"]
        assert rec.selections == [parse_square("e2"), None]
        assert ctrl.state.turn == Color.BLACK
        assert rec.outcomes == []

    def test_game_over_event(self) -> None:
        ctrl = GameController()
        rec = _Recorder(ctrl)
        click(ctrl, "f2", "f3", "e7", "e5", "g2", "g4", "d8", "h4")
        assert rec.moves == ["f2f3", "e7e5", "g2g4", "d8h4"]
        assert rec.outcomes == [Outcome.checkmate(Color.BLACK)]

        # The finished game no longer reacts to clicks.
        assert click(ctrl, "e1") == [False]
        assert rec.selections == [
            parse_square("f2"),
            None,
            parse_square("e7"),
            None,
            parse_square("g2"),
            None,
            parse_square("d8"),
            None,
        ]

    def test_matches_submit_move_selection_events(self) -> None:
        by_click = GameController()
        clicked = _Recorder(by_click)
        click(by_click, "g1", "f3")

        by_submit = GameController()
        submitted = _Recorder(by_submit)
        click(by_submit, "g1")
        by_submit.submit_move(parse_square("g1"), parse_square("f3"))

        assert clicked.selections == submitted.selections
        assert clicked.moves == submitted.moves == ["g1f3"]


class TestSubmitMove:
    def test_legal(self) -> None:
        ctrl = GameController()
        rec = _Recorder(ctrl)
        assert ctrl.submit_move(parse_square("g1"), parse_square("f3"))
        assert rec.moves == ["g1f3"]
        assert rec.selections == []

    def test_clears_pending_selection(self) -> None:
        ctrl = GameController()
        rec = _Recorder(ctrl)
        click(ctrl, "b1")
        assert ctrl.submit_move(parse_square("g1"), parse_square("f3"))
        assert rec.selections == [parse_square("b1"), None]

    def test_illegal(self) -> None:
        ctrl = GameController()
        rec = _Recorder(ctrl)
        assert not ctrl.submit_move(parse_square("e2"), parse_square("e5"))
        assert rec.moves == []
        assert ctrl.state == GameState()


class TestNewGame:
    def test_reset_event(self) -> None:
        ctrl = GameController()
        rec = _Recorder(ctrl)
        ctrl.submit_move(parse_square("e2"), parse_square("e4"))
        ctrl.new_game()
        assert rec.resets == 1
        assert ctrl.state == GameState()

    def test_uses_supplied_state(self) -> None:
        state = GameState.from_placement("7k/P7/8/8/8/8/8/K7")
        ctrl = GameController(state)
        assert ctrl.state is state
        assert ctrl.submit_move(parse_square("a7"), parse_square("a8"))
        ctrl.new_game()
        assert ctrl.state is state
        assert state == GameState()
