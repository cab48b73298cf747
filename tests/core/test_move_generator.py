"""Tests for MoveGenerator — destinations per piece type and check detection."""

from threechess.core.board import Board
from threechess.core.enums import Player
from threechess.core.move_generator import MoveGenerator, pawn_push_direction
from threechess.core.directions import ALL_DIRECTIONS, Direction
from threechess.core.notation import board_from_placement
from threechess.core.types import Coord, parse_coord


def c(name: str) -> Coord:
    return parse_coord(name)


def names(coords: list[Coord]) -> set[str]:
    return {str(coord) for coord in coords}


def pseudo(placement: str, square: str) -> set[str]:
    board = board_from_placement(placement)
    return names(MoveGenerator(board).generate_pseudo_legal_destinations(c(square)))


def legal(board: Board, square: str) -> set[str]:
    return names(MoveGenerator(board).generate_legal_destinations(c(square)))


class TestRook:
    def test_corner_rays_on_empty_board(self) -> None:
        got = pseudo("rRa1", "a1")
        expected = {f"a{r}" for r in range(2, 9)} | {f"{f}1" for f in "bcdefgh"}
        assert got == expected

    def test_rays_cross_the_centre(self) -> None:
        got = pseudo("rRe4", "e4")
        assert got == {
            "e9", "e10", "e11", "e12",
            "e3", "e2", "e1",
            "d4", "c4", "b4", "a4",
            "f4", "g4", "h4",
        }

    def test_ray_truncated_at_enemy(self) -> None:
        got = pseudo("rRa1 gPa5", "a1")
        assert {"a2", "a3", "a4", "a5"} <= got
        assert "a6" not in got

    def test_ray_truncated_before_own_piece(self) -> None:
        got = pseudo("rRa1 rKd1", "a1")
        assert {"b1", "c1"} <= got
        assert "d1" not in got
        assert "e1" not in got


class TestQueen:
    def test_queen_is_rook_plus_bishop(self) -> None:
        rest = "gPi6 yPf10 rPc3 gKl8"
        for square in ("e4", "d5", "j10", "b2"):
            queen = pseudo(f"rQ{square} {rest}", square)
            rook = pseudo(f"rR{square} {rest}", square)
            bishop = pseudo(f"rB{square} {rest}", square)
            assert queen == rook | bishop, square

    def test_bishop_crosses_the_centre(self) -> None:
        got = pseudo("rBd4", "d4")
        assert {"i5", "e9"} <= got
        assert "i9" not in got


class TestKnight:
    def test_initial_knight(self) -> None:
        board = Board.initial()
        assert legal(board, "b1") == {"a3", "c3"}
        assert legal(board, "g1") == {"f3", "h3"}

    def test_knight_never_lands_adjacent(self) -> None:
        got = pseudo("gNj6", "j6")
        assert got
        assert not got & {"j5", "j7", "i6", "k6"}

    def test_knight_on_centre_field(self) -> None:
        assert pseudo("rNd4", "d4") == {
            "b3", "b5", "c2", "c6", "e2", "e10", "f3", "f9", "i6", "j5",
        }

    def test_no_landing_next_to_the_source(self) -> None:
        for fld in Board().fields():
            square = str(fld.coord)
            steps = (d.step(fld.coord) for d in ALL_DIRECTIONS)
            neighbours = {str(step) for step in steps if step is not None}
            got = pseudo(f"rN{square}", square)
            assert not got & neighbours, square

    def test_no_there_and_back_along_a_file(self) -> None:
        assert "a1" not in pseudo("rNa2", "a2")


class TestKing:
    def test_king_in_band_interior(self) -> None:
        got = pseudo("rKc2", "c2")
        assert got == {"b1", "c1", "d1", "b2", "d2", "b3", "c3", "d3"}

    def test_king_on_centre_field(self) -> None:
        got = pseudo("rKd4", "d4")
        assert {"d5", "e4", "i5", "e9", "c3", "c4", "c5", "d3", "e3"} <= got


class TestPawn:
    def test_double_step_from_home(self) -> None:
        board = Board.initial()
        assert legal(board, "e2") == {"e3", "e4"}
        assert legal(board, "d7") == {"d6", "d5"}
        assert legal(board, "h11") == {"h10", "h9"}

    def test_no_double_step_away_from_home(self) -> None:
        assert pseudo("rPe3", "e3") == {"e4"}

    def test_blocked_push(self) -> None:
        assert pseudo("rPe2 gNe3", "e2") == set()
        assert pseudo("rPe2 gNe4", "e2") == {"e3"}

    def test_push_through_the_centre(self) -> None:
        assert pseudo("rPe4", "e4") == {"e9"}
        assert pseudo("gPi5", "i5") == {"i9"}

    def test_foreign_band_walks_to_that_back_rank(self) -> None:
        assert pawn_push_direction(Player.RED, c("c6")) == Direction.FORWARD_RED
        assert pawn_push_direction(Player.GREEN, c("b3")) == Direction.FORWARD_GREEN
        assert pawn_push_direction(Player.YELLOW, c("k6")) == Direction.FORWARD_YELLOW
        assert pseudo("rPc7", "c7") == {"c8"}
        assert pseudo("yPk7", "k7") == {"k8"}
        assert pseudo("gPb2", "b2") == {"b1"}

    def test_file_line_not_shared_with_owner(self) -> None:
        assert pawn_push_direction(Player.RED, c("j7")) == Direction.FORWARD_YELLOW
        assert pawn_push_direction(Player.RED, c("j10")) == Direction.FORWARD_GREEN
        assert pawn_push_direction(Player.GREEN, c("f10")) == Direction.FORWARD_RED
        assert pawn_push_direction(Player.YELLOW, c("b6")) == Direction.FORWARD_RED
        assert pseudo("rPj7", "j7") == {"j8"}
        assert pseudo("rPj10", "j10") == {"j11"}
        assert pseudo("gPf10", "f10") == {"f11"}
        assert pseudo("gPf3", "f3") == {"f2"}
        assert pseudo("yPb6", "b6") == {"b7"}
        assert pseudo("yPb3", "b3") == {"b2"}

    def test_captures(self) -> None:
        got = pseudo("rPc3 gNb4 yBd4 rNc4", "c3")
        assert got == {"b4", "d4"}

    def test_does_not_capture_straight_ahead(self) -> None:
        assert pseudo("rPc3 gNc4", "c3") == set()

    def test_capture_across_the_centre(self) -> None:
        got = pseudo("rPd4 yNe9 gNi5", "d4")
        assert {"e9", "i5"} <= got


class TestCheck:
    def test_lone_rook_on_open_file(self) -> None:
        board = board_from_placement("rKe1 yRe12")
        gen = MoveGenerator(board)
        assert gen.is_in_check(Player.RED)
        assert not gen.is_in_check(Player.YELLOW)

    def test_blocked_file(self) -> None:
        board = board_from_placement("rKe1 rPe2 yRe12")
        assert not MoveGenerator(board).is_in_check(Player.RED)

    def test_no_king_no_check(self) -> None:
        board = board_from_placement("yRe12 rRe1")
        assert not MoveGenerator(board).is_in_check(Player.RED)

    def test_initial_position_has_no_checks(self) -> None:
        gen = MoveGenerator(Board.initial())
        for player in Player:
            assert not gen.is_in_check(player)

    def test_is_attacked(self) -> None:
        board = board_from_placement("gRa8")
        gen = MoveGenerator(board)
        assert gen.is_attacked(c("l8"), Player.YELLOW)
        assert not gen.is_attacked(c("l8"), Player.GREEN)


class TestLegalFilter:
    def test_pinned_piece_cannot_leave_the_file(self) -> None:
        board = board_from_placement("rKe1 rRe3 yRe12")
        # Stepping off the e-file would expose the king.
        got = legal(board, "e3")
        assert got == {"e2", "e4", "e9", "e10", "e11", "e12"}

    def test_empty_field_has_no_moves(self) -> None:
        assert legal(Board.initial(), "e4") == set()

    def test_end_to_end_king_avoids_guarded_field(self) -> None:
        board = Board.initial()
        for name in ("c2", "c7", "c1", "a1"):
            board[c(name)] = None
        rook = Board.initial()[c("a1")]
        board[c("c1")] = rook

        gen = MoveGenerator(board)
        assert "e4" in names(gen.generate_legal_destinations(c("e2")))
        board[c("e4")] = board[c("e2")]
        board[c("e2")] = None

        assert "c7" not in legal(board, "d8")

    def test_end_to_end_field_free_without_rook(self) -> None:
        board = Board.initial()
        for name in ("c2", "c7", "c1"):
            board[c(name)] = None
        assert "c7" in legal(board, "d8")
