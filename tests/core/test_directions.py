"""Tests for the direction catalog (board adjacency)."""

import pytest

from threechess.core.board import Board
from threechess.core.directions import (
    ALL_DIRECTIONS,
    DIAGONAL_DIRECTIONS,
    FORWARD_DIRECTIONS,
    LATERAL_DIRECTIONS,
    STRAIGHT_DIRECTIONS,
    Direction,
)
from threechess.core.types import Coord, parse_coord

D = Direction

DIAGONAL_INVERSES = (
    (D.RG_FORWARD_LEFT, D.RG_BACK_RIGHT),
    (D.RG_FORWARD_RIGHT, D.RG_BACK_LEFT),
    (D.RY_FORWARD_LEFT, D.RY_BACK_RIGHT),
    (D.RY_FORWARD_RIGHT, D.RY_BACK_LEFT),
    (D.GY_FORWARD_LEFT, D.GY_BACK_RIGHT),
    (D.GY_FORWARD_RIGHT, D.GY_BACK_LEFT),
)

# Forward pairs that walk the same file line in opposite senses.
COLLINEAR_FORWARDS = (
    ("abcd", D.FORWARD_RED, D.FORWARD_GREEN),
    ("efgh", D.FORWARD_RED, D.FORWARD_YELLOW),
    ("ijkl", D.FORWARD_GREEN, D.FORWARD_YELLOW),
)


def c(name: str) -> Coord:
    return parse_coord(name)


def all_coords() -> list[Coord]:
    return [f.coord for f in Board().fields()]


class TestCatalog:
    def test_counts(self) -> None:
        assert len(ALL_DIRECTIONS) == 21
        assert len(STRAIGHT_DIRECTIONS) == 9
        assert len(DIAGONAL_DIRECTIONS) == 12
        assert set(ALL_DIRECTIONS) == set(Direction)

    def test_only_laterals_declare_opposites(self) -> None:
        for d in LATERAL_DIRECTIONS:
            assert d.opposite is not None
            assert d.opposite.opposite is d
        for d in FORWARD_DIRECTIONS + DIAGONAL_DIRECTIONS:
            assert d.opposite is None

    def test_orthogonal_sets(self) -> None:
        assert D.FORWARD_GREEN.orthogonal == LATERAL_DIRECTIONS
        assert D.LEFT_YELLOW.orthogonal == FORWARD_DIRECTIONS
        assert D.RG_BACK_LEFT.orthogonal == ()

    def test_steps_stay_on_board(self) -> None:
        board = Board()
        for coord in all_coords():
            for d in ALL_DIRECTIONS:
                target = d.step(coord)
                assert target is None or target in board, f"{d.name} from {coord}"


class TestStraightSteps:
    @pytest.mark.parametrize(
        ("direction", "start", "expected"),
        [
            (D.FORWARD_RED, "e2", "e3"),
            (D.FORWARD_RED, "e4", "e9"),
            (D.FORWARD_RED, "d4", "d5"),
            (D.FORWARD_RED, "a8", None),
            (D.FORWARD_RED, "h12", None),
            (D.FORWARD_RED, "i5", None),
            (D.FORWARD_GREEN, "d7", "d6"),
            (D.FORWARD_GREEN, "d5", "d4"),
            (D.FORWARD_GREEN, "i5", "i9"),
            (D.FORWARD_GREEN, "k11", "k12"),
            (D.FORWARD_GREEN, "e7", None),
            (D.FORWARD_YELLOW, "e11", "e10"),
            (D.FORWARD_YELLOW, "e9", "e4"),
            (D.FORWARD_YELLOW, "i9", "i5"),
            (D.FORWARD_YELLOW, "j7", "j8"),
            (D.FORWARD_YELLOW, "j8", None),
            (D.FORWARD_YELLOW, "f2", "f1"),
            (D.LEFT_RED, "a3", None),
            (D.RIGHT_RED, "d3", "e3"),
            (D.LEFT_GREEN, "d6", "i6"),
            (D.RIGHT_GREEN, "i6", "d6"),
            (D.LEFT_YELLOW, "i10", "e10"),
            (D.RIGHT_YELLOW, "e10", "i10"),
            (D.LEFT_YELLOW, "g10", "h10"),
            (D.LEFT_RED, "b6", None),
        ],
    )
    def test_step(self, direction: Direction, start: str, expected: str | None) -> None:
        target = direction.step(c(start))
        assert target == (None if expected is None else c(expected))

    def test_lateral_opposites_invert(self) -> None:
        for coord in all_coords():
            for d in LATERAL_DIRECTIONS:
                target = d.step(coord)
                if target is None:
                    continue
                assert d.opposite is not None
                assert d.opposite.step(target) == coord, f"{d.name} from {coord}"

    def test_collinear_forwards_invert(self) -> None:
        for files, a, b in COLLINEAR_FORWARDS:
            for coord in all_coords():
                if coord.file not in files:
                    continue
                target = a.step(coord)
                if target is not None:
                    assert b.step(target) == coord, f"{a.name} from {coord}"
                target = b.step(coord)
                if target is not None:
                    assert a.step(target) == coord, f"{b.name} from {coord}"


class TestDiagonalSteps:
    @pytest.mark.parametrize(
        ("direction", "start", "expected"),
        [
            (D.RG_FORWARD_RIGHT, "d4", "i5"),
            (D.RG_FORWARD_LEFT, "e4", "d5"),
            (D.RY_FORWARD_RIGHT, "d4", "e9"),
            (D.RY_FORWARD_LEFT, "e4", "i9"),
            (D.GY_FORWARD_LEFT, "d5", "i9"),
            (D.GY_FORWARD_RIGHT, "i5", "e9"),
            (D.RG_FORWARD_LEFT, "c2", "b3"),
            (D.RG_FORWARD_LEFT, "a4", None),
            (D.RY_BACK_LEFT, "f9", "e4"),
            (D.GY_BACK_RIGHT, "i9", "d5"),
            (D.RG_BACK_LEFT, "i5", "d4"),
            (D.RG_FORWARD_LEFT, "j10", None),
        ],
    )
    def test_step(self, direction: Direction, start: str, expected: str | None) -> None:
        target = direction.step(c(start))
        assert target == (None if expected is None else c(expected))

    def test_pairs_invert_everywhere(self) -> None:
        for coord in all_coords():
            for forward, back in DIAGONAL_INVERSES:
                target = forward.step(coord)
                if target is not None:
                    assert back.step(target) == coord, f"{forward.name} from {coord}"
                target = back.step(coord)
                if target is not None:
                    assert forward.step(target) == coord, f"{back.name} from {coord}"

    def test_centre_vertex_neighbours(self) -> None:
        # Each centre field touches four of the other five; the field straight
        # across the vertex is not adjacent.
        across = {"d4": "i9", "e4": "i5", "d5": "e9", "i9": "d4", "i5": "e4", "e9": "d5"}
        centre = {c(n) for n in across}
        for name, opposite in across.items():
            reached = {d.step(c(name)) for d in ALL_DIRECTIONS}
            assert centre - {c(name), c(opposite)} <= reached, name
            assert c(opposite) not in reached, name


class TestNext:
    def test_next_returns_board_field(self) -> None:
        board = Board.initial()
        target = D.FORWARD_RED.next(c("e2"), board)
        assert target is board.field(c("e3"))

    def test_next_none_at_edge(self) -> None:
        board = Board()
        assert D.FORWARD_RED.next(board.field(c("a8")), board) is None
