"""Tests for Rules — check, forced king capture, doomed rule, mate, promotion."""

from threechess.core.board import Board
from threechess.core.enums import PieceType, Player
from threechess.core.move_generator import MoveGenerator
from threechess.core.notation import board_from_placement
from threechess.core.piece import Piece
from threechess.core.rules import Rules
from threechess.core.types import Coord, parse_coord


def c(name: str) -> Coord:
    return parse_coord(name)


class TestCheck:
    def test_is_check(self) -> None:
        board = board_from_placement("rKe1 yRe12 gKl8")
        assert Rules.is_check(board, Player.RED)
        assert not Rules.is_check(board, Player.GREEN)

    def test_missing_king_is_not_check(self) -> None:
        board = board_from_placement("yRe12")
        assert not Rules.is_check(board, Player.RED)


class TestForcedKingCapture:
    def test_only_king_captures_returned(self) -> None:
        board = board_from_placement("rKa1 rRe4 gKe9 yKl12")
        pseudo = MoveGenerator(board).generate_pseudo_legal_destinations(c("e4"))
        assert len(pseudo) > 1
        assert Rules.legal_moves(board, c("e4")) == [c("e9")]

    def test_other_pieces_unaffected(self) -> None:
        board = board_from_placement("rKa1 rRe4 gKe9 yKl12")
        assert len(Rules.legal_moves(board, c("a1"))) > 1


class TestDoomed:
    # House rule: a player in check may only capture a king.

    def test_checked_player_has_no_moves(self) -> None:
        board = board_from_placement("rKe1 rRa3 yRe12")
        assert Rules.is_doomed(board, Player.RED)
        # Blocking on e3 would resolve the check, yet it is not offered.
        pseudo = MoveGenerator(board).generate_pseudo_legal_destinations(c("a3"))
        assert c("e3") in pseudo
        assert Rules.legal_moves(board, c("a3")) == []
        assert Rules.legal_moves(board, c("e1")) == []
        assert Rules.is_mate(board, Player.RED)

    def test_king_capture_survives_doom(self) -> None:
        board = board_from_placement("rKe1 gKe2 rRa3 yKl12")
        assert Rules.is_check(board, Player.RED)
        assert Rules.legal_moves(board, c("e1")) == [c("e2")]
        assert Rules.legal_moves(board, c("a3")) == []
        assert not Rules.is_mate(board, Player.RED)


class TestMate:
    def test_initial_position(self) -> None:
        board = Board.initial()
        for player in Player:
            assert not Rules.is_mate(board, player)

    def test_player_without_pieces_is_mated(self) -> None:
        board = board_from_placement("rKe1 gKd8")
        assert Rules.is_mate(board, Player.YELLOW)


class TestPromotion:
    def test_foreign_back_ranks(self) -> None:
        pawn = Piece(Player.RED, PieceType.PAWN)
        assert Rules.promotes(pawn, c("c8"))
        assert Rules.promotes(pawn, c("f12"))
        assert not Rules.promotes(pawn, c("c1"))
        assert not Rules.promotes(pawn, c("c7"))

    def test_only_pawns_promote(self) -> None:
        rook = Piece(Player.GREEN, PieceType.ROOK)
        assert not Rules.promotes(rook, c("a1"))

    def test_green_and_yellow(self) -> None:
        assert Rules.promotes(Piece(Player.GREEN, PieceType.PAWN), c("b1"))
        assert Rules.promotes(Piece(Player.GREEN, PieceType.PAWN), c("k12"))
        assert Rules.promotes(Piece(Player.YELLOW, PieceType.PAWN), c("j8"))
        assert not Rules.promotes(Piece(Player.YELLOW, PieceType.PAWN), c("j12"))


class TestWinner:
    def test_no_winner_with_two_alive(self) -> None:
        flags = {Player.RED: True, Player.GREEN: False, Player.YELLOW: False}
        assert Rules.winner(flags) is None

    def test_last_player_standing(self) -> None:
        flags = {Player.RED: True, Player.GREEN: False, Player.YELLOW: True}
        assert Rules.winner(flags) == Player.GREEN
