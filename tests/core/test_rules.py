"""Tests for Rules: check, checkmate, stalemate and outcome evaluation."""

from gambit.core.board import Board
from gambit.core.enums import Color, OutcomeKind, PieceType
from gambit.core.move import Move
from gambit.core.outcome import Outcome
from gambit.core.rules import Rules
from gambit.core.types import parse_square

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR"
STALEMATE = "8/8/8/8/8/1q6/2k5/K7"


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        board = Board.initial()
        assert not Rules.is_in_check(Color.WHITE, board)
        assert not Rules.is_in_check(Color.BLACK, board)
        assert Rules.checked_king_square(Color.WHITE, board) is None

    def test_fools_mate_in_check(self) -> None:
        board = Board.from_placement(FOOLS_MATE)
        assert Rules.is_in_check(Color.WHITE, board)
        assert Rules.checked_king_square(Color.WHITE, board) == parse_square("e1")

    def test_knight_check(self) -> None:
        board = Board.from_placement("4k3/8/3N4/8/8/8/8/4K3")
        assert Rules.is_in_check(Color.BLACK, board)


class TestCheckmate:
    def test_fools_mate(self) -> None:
        board = Board.from_placement(FOOLS_MATE)
        assert Rules.is_checkmate(Color.WHITE, board)
        assert not Rules.is_stalemate(Color.WHITE, board)
        assert Rules.evaluate(Color.WHITE, board) == Outcome.checkmate(Color.BLACK)

    def test_back_rank_mate(self) -> None:
        # Ra8 checks the king on d8; Kd6 covers every escape.
        board = Board.from_placement("R2k4/8/3K4/8/8/8/8/8")
        assert Rules.is_checkmate(Color.BLACK, board)
        assert Rules.evaluate(Color.BLACK, board).winner == Color.WHITE

    def test_not_checkmate_when_king_can_escape(self) -> None:
        board = Board.from_placement("4k3/8/8/8/8/8/8/r3K3")
        assert Rules.is_in_check(Color.WHITE, board)
        assert not Rules.is_checkmate(Color.WHITE, board)
        assert Rules.evaluate(Color.WHITE, board) == Outcome.ongoing()

    def test_not_checkmate_when_checker_can_be_captured(self) -> None:
        board = Board.from_placement("4k3/8/8/8/8/R7/5PPP/r5K1")
        assert Rules.is_in_check(Color.WHITE, board)
        assert Rules.has_legal_move(Color.WHITE, board)
        assert Rules.all_legal_moves(Color.WHITE, board) == [
            Move(parse_square("a3"), parse_square("a1"))
        ]


class TestStalemate:
    def test_king_boxed_in_by_queen(self) -> None:
        board = Board.from_placement(STALEMATE)
        assert not Rules.is_in_check(Color.WHITE, board)
        assert Rules.is_stalemate(Color.WHITE, board)
        assert Rules.evaluate(Color.WHITE, board) == Outcome.stalemate()

    def test_same_position_is_live_for_the_other_side(self) -> None:
        board = Board.from_placement(STALEMATE)
        assert not Rules.is_stalemate(Color.BLACK, board)
        assert Rules.evaluate(Color.BLACK, board) == Outcome.ongoing()

    def test_corner_king_against_queen(self) -> None:
        board = Board.from_placement("7k/8/5KQ1/8/8/8/8/8")
        assert Rules.is_stalemate(Color.BLACK, board)

    def test_not_stalemate_when_has_moves(self) -> None:
        board = Board.from_placement("7k/8/5K2/8/8/8/8/8")
        assert not Rules.is_stalemate(Color.BLACK, board)


class TestLegalMoveList:
    def test_promotion_is_flagged(self) -> None:
        board = Board.from_placement("7k/P7/8/8/8/8/8/K7")
        moves = Rules.all_legal_moves(Color.WHITE, board)
        pawn_moves = [m for m in moves if m.from_sq == parse_square("a7")]
        assert pawn_moves == [
            Move(parse_square("a7"), parse_square("a8"), PieceType.QUEEN)
        ]
        assert str(pawn_moves[0]) == "a7a8q"

    def test_moves_are_ordered(self) -> None:
        moves = Rules.all_legal_moves(Color.WHITE, Board.initial())
        keys = [(m.from_sq, m.to_sq) for m in moves]
        assert keys == sorted(keys)

    def test_side_without_pieces_has_no_moves(self) -> None:
        board = Board.from_placement("4k3/8/8/8/8/8/8/8")
        assert not Rules.has_legal_move(Color.WHITE, board)
        assert Rules.all_legal_moves(Color.WHITE, board) == []


class TestOutcome:
    def test_kinds(self) -> None:
        assert Outcome.ongoing().kind == OutcomeKind.ONGOING
        assert not Outcome.ongoing().is_terminal
        assert Outcome.checkmate(Color.WHITE).is_terminal
        assert Outcome.stalemate().winner is None
        assert Outcome.draw().is_terminal

    def test_str(self) -> None:
        assert str(Outcome.checkmate(Color.BLACK)) == "checkmate (black wins)"
        assert str(Outcome.stalemate()) == "stalemate"
        assert str(Outcome.ongoing()) == "ongoing"
