"""Direction catalog — the adjacency model of the three-player board.

Every direction is a partial function from a field to its neighbour. The
board is three bands (see :mod:`threechess.core.types`) that meet along
seams and at a single central vertex shared by d4, e4, e9, i9, i5 and d5,
so neighbours are not a uniform (file, rank) offset. Each variant spells out
its own boundary ranges.

Straight directions (9):
    FORWARD_<P>       along a file line, away from P's back rank.
    LEFT_<P>/RIGHT_<P> along a rank, inside P's band only, from P's seat.

Diagonal directions (12), four per pair of bands.  A pair's two bands glued
along their shared half-files form a plane; the pair's diagonals live in
that plane and are None elsewhere.  Names use the first player's seat:

    RG_*  frame RED,   forward = toward GREEN
    RY_*  frame RED,   forward = toward YELLOW
    GY_*  frame GREEN, forward = toward YELLOW

Lateral orders, left to right from the owner's seat:
    RED    a b c d e f g h
    GREEN  l k j i d c b a
    YELLOW h g f e i j k l
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

from threechess.core.types import Coord, shift_file

if TYPE_CHECKING:
    from threechess.core.board import Board, Field


class Direction(Enum):
    """Named movement rule; see :data:`ALL_DIRECTIONS` for iteration order."""

    FORWARD_RED = auto()
    FORWARD_GREEN = auto()
    FORWARD_YELLOW = auto()
    LEFT_RED = auto()
    RIGHT_RED = auto()
    LEFT_GREEN = auto()
    RIGHT_GREEN = auto()
    LEFT_YELLOW = auto()
    RIGHT_YELLOW = auto()

    RG_FORWARD_LEFT = auto()
    RG_FORWARD_RIGHT = auto()
    RG_BACK_LEFT = auto()
    RG_BACK_RIGHT = auto()
    RY_FORWARD_LEFT = auto()
    RY_FORWARD_RIGHT = auto()
    RY_BACK_LEFT = auto()
    RY_BACK_RIGHT = auto()
    GY_FORWARD_LEFT = auto()
    GY_FORWARD_RIGHT = auto()
    GY_BACK_LEFT = auto()
    GY_BACK_RIGHT = auto()

    # ── Classification ───────────────────────────────────────────────────

    @property
    def is_straight(self) -> bool:
        return self in _STRAIGHT_SET

    @property
    def opposite(self) -> Direction | None:
        """Direction that retraces one step of this one.

        Only lateral directions declare one: the three forward directions
        share file lines, and which of them walks back depends on the file.
        """
        return _OPPOSITES.get(self)

    @property
    def orthogonal(self) -> tuple[Direction, ...]:
        """Straight directions that are neither this one nor collinear with it."""
        if not self.is_straight:
            return ()
        if self in FORWARD_DIRECTIONS:
            return LATERAL_DIRECTIONS
        return FORWARD_DIRECTIONS

    # ── Resolution ───────────────────────────────────────────────────────

    def step(self, coord: Coord) -> Coord | None:
        """Neighbouring coordinate, or None where this direction does not apply."""
        return _step(self, coord.file, coord.rank)

    def next(self, start: Field | Coord, board: Board) -> Field | None:
        """Neighbouring field of *start* on *board* (read-only lookup)."""
        coord = start if isinstance(start, Coord) else start.coord
        target = self.step(coord)
        if target is None:
            return None
        return board.lookup(target.file, target.rank)


FORWARD_DIRECTIONS: tuple[Direction, ...] = (
    Direction.FORWARD_RED,
    Direction.FORWARD_GREEN,
    Direction.FORWARD_YELLOW,
)

LATERAL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.LEFT_RED,
    Direction.RIGHT_RED,
    Direction.LEFT_GREEN,
    Direction.RIGHT_GREEN,
    Direction.LEFT_YELLOW,
    Direction.RIGHT_YELLOW,
)

STRAIGHT_DIRECTIONS: tuple[Direction, ...] = FORWARD_DIRECTIONS + LATERAL_DIRECTIONS

DIAGONAL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.RG_FORWARD_LEFT,
    Direction.RG_FORWARD_RIGHT,
    Direction.RG_BACK_LEFT,
    Direction.RG_BACK_RIGHT,
    Direction.RY_FORWARD_LEFT,
    Direction.RY_FORWARD_RIGHT,
    Direction.RY_BACK_LEFT,
    Direction.RY_BACK_RIGHT,
    Direction.GY_FORWARD_LEFT,
    Direction.GY_FORWARD_RIGHT,
    Direction.GY_BACK_LEFT,
    Direction.GY_BACK_RIGHT,
)

ALL_DIRECTIONS: tuple[Direction, ...] = STRAIGHT_DIRECTIONS + DIAGONAL_DIRECTIONS

_STRAIGHT_SET = frozenset(STRAIGHT_DIRECTIONS)

_OPPOSITES: dict[Direction, Direction] = {
    Direction.LEFT_RED: Direction.RIGHT_RED,
    Direction.RIGHT_RED: Direction.LEFT_RED,
    Direction.LEFT_GREEN: Direction.RIGHT_GREEN,
    Direction.RIGHT_GREEN: Direction.LEFT_GREEN,
    Direction.LEFT_YELLOW: Direction.RIGHT_YELLOW,
    Direction.RIGHT_YELLOW: Direction.LEFT_YELLOW,
}


# -- Lateral steps inside one band ------------------------------------------


def _red_toward_a(f: str) -> str | None:
    return None if f == "a" else shift_file(f, -1)


def _red_toward_h(f: str) -> str | None:
    return None if f == "h" else shift_file(f, 1)


def _green_toward_l(f: str) -> str | None:
    if f == "l":
        return None
    if f == "d":
        return "i"
    return shift_file(f, 1)


def _green_toward_a(f: str) -> str | None:
    if f == "a":
        return None
    if f == "i":
        return "d"
    return shift_file(f, -1)


def _yellow_toward_h(f: str) -> str | None:
    if f == "h":
        return None
    if f == "i":
        return "e"
    return shift_file(f, 1 if f <= "g" else -1)


def _yellow_toward_l(f: str) -> str | None:
    if f == "l":
        return None
    if f == "e":
        return "i"
    return shift_file(f, -1 if f <= "h" else 1)


def _diag(lateral: str | None, rank: int) -> Coord | None:
    return None if lateral is None else Coord(lateral, rank)


# -- The catalog ------------------------------------------------------------


def _step(d: Direction, f: str, r: int) -> Coord | None:
    red = 1 <= r <= 4
    green = 5 <= r <= 8
    yellow = 9 <= r <= 12

    match d:
        # ── Straight ─────────────────────────────────────────────────────
        case Direction.FORWARD_RED:
            if f >= "i":
                return None
            if r == 8 or r == 12:
                return None
            if r == 4 and f >= "e":
                return Coord(f, 9)
            return Coord(f, r + 1)

        case Direction.FORWARD_GREEN:
            if "e" <= f <= "h":
                return None
            if r == 1 or r == 12:
                return None
            if r == 5:
                return Coord(f, 9 if f >= "i" else 4)
            if r >= 9:
                return Coord(f, r + 1)
            return Coord(f, r - 1)

        case Direction.FORWARD_YELLOW:
            if f <= "d":
                return None
            if r == 8 or r == 1:
                return None
            if r == 9:
                return Coord(f, 5 if f >= "i" else 4)
            if r >= 9:
                return Coord(f, r - 1)
            if r >= 5:
                return Coord(f, r + 1)
            return Coord(f, r - 1)

        case Direction.LEFT_RED:
            return _diag(_red_toward_a(f), r) if red else None

        case Direction.RIGHT_RED:
            return _diag(_red_toward_h(f), r) if red else None

        case Direction.LEFT_GREEN:
            return _diag(_green_toward_l(f), r) if green else None

        case Direction.RIGHT_GREEN:
            return _diag(_green_toward_a(f), r) if green else None

        case Direction.LEFT_YELLOW:
            return _diag(_yellow_toward_h(f), r) if yellow else None

        case Direction.RIGHT_YELLOW:
            return _diag(_yellow_toward_l(f), r) if yellow else None

        # ── RED / GREEN plane ────────────────────────────────────────────
        case Direction.RG_FORWARD_LEFT:
            if red:
                if r < 4:
                    return _diag(_red_toward_a(f), r + 1)
                # e4 crosses the centre to d5
                if "b" <= f <= "e":
                    return Coord(shift_file(f, -1), 5)
                return None
            if green and r < 8:
                return _diag(_green_toward_a(f), r + 1)
            return None

        case Direction.RG_FORWARD_RIGHT:
            if red:
                if r < 4:
                    return _diag(_red_toward_h(f), r + 1)
                if "a" <= f <= "c":
                    return Coord(shift_file(f, 1), 5)
                if f == "d":
                    return Coord("i", 5)
                return None
            if green and r < 8:
                return _diag(_green_toward_l(f), r + 1)
            return None

        case Direction.RG_BACK_LEFT:
            if green:
                if r > 5:
                    return _diag(_green_toward_a(f), r - 1)
                if "b" <= f <= "d":
                    return Coord(shift_file(f, -1), 4)
                if f == "i":
                    return Coord("d", 4)
                return None
            if red and r > 1:
                return _diag(_red_toward_a(f), r - 1)
            return None

        case Direction.RG_BACK_RIGHT:
            if green:
                if r > 5:
                    return _diag(_green_toward_l(f), r - 1)
                # d5 crosses the centre to e4
                if "a" <= f <= "d":
                    return Coord(shift_file(f, 1), 4)
                return None
            if red and r > 1:
                return _diag(_red_toward_h(f), r - 1)
            return None

        # ── RED / YELLOW plane ───────────────────────────────────────────
        case Direction.RY_FORWARD_LEFT:
            if red:
                if r < 4:
                    return _diag(_red_toward_a(f), r + 1)
                if "f" <= f <= "h":
                    return Coord(shift_file(f, -1), 9)
                if f == "e":
                    return Coord("i", 9)
                return None
            if yellow and r < 12:
                return _diag(_yellow_toward_l(f), r + 1)
            return None

        case Direction.RY_FORWARD_RIGHT:
            if red:
                if r < 4:
                    return _diag(_red_toward_h(f), r + 1)
                # d4 crosses the centre to e9
                if "d" <= f <= "g":
                    return Coord(shift_file(f, 1), 9)
                return None
            if yellow and r < 12:
                return _diag(_yellow_toward_h(f), r + 1)
            return None

        case Direction.RY_BACK_LEFT:
            if yellow:
                if r > 9:
                    return _diag(_yellow_toward_l(f), r - 1)
                # e9 crosses the centre to d4
                if "e" <= f <= "h":
                    return Coord(shift_file(f, -1), 4)
                return None
            if red and r > 1:
                return _diag(_red_toward_a(f), r - 1)
            return None

        case Direction.RY_BACK_RIGHT:
            if yellow:
                if r > 9:
                    return _diag(_yellow_toward_h(f), r - 1)
                if "e" <= f <= "g":
                    return Coord(shift_file(f, 1), 4)
                if f == "i":
                    return Coord("e", 4)
                return None
            if red and r > 1:
                return _diag(_red_toward_h(f), r - 1)
            return None

        # ── GREEN / YELLOW plane ─────────────────────────────────────────
        case Direction.GY_FORWARD_LEFT:
            if green:
                if r > 5:
                    return _diag(_green_toward_l(f), r - 1)
                if "i" <= f <= "k":
                    return Coord(shift_file(f, 1), 9)
                if f == "d":
                    return Coord("i", 9)
                return None
            if yellow and r < 12:
                return _diag(_yellow_toward_l(f), r + 1)
            return None

        case Direction.GY_FORWARD_RIGHT:
            if green:
                if r > 5:
                    return _diag(_green_toward_a(f), r - 1)
                if "j" <= f <= "l":
                    return Coord(shift_file(f, -1), 9)
                if f == "i":
                    return Coord("e", 9)
                return None
            if yellow and r < 12:
                return _diag(_yellow_toward_h(f), r + 1)
            return None

        case Direction.GY_BACK_LEFT:
            if yellow:
                if r > 9:
                    return _diag(_yellow_toward_l(f), r - 1)
                if "i" <= f <= "k":
                    return Coord(shift_file(f, 1), 5)
                if f == "e":
                    return Coord("i", 5)
                return None
            if green and r < 8:
                return _diag(_green_toward_l(f), r + 1)
            return None

        case Direction.GY_BACK_RIGHT:
            if yellow:
                if r > 9:
                    return _diag(_yellow_toward_h(f), r - 1)
                if "j" <= f <= "l":
                    return Coord(shift_file(f, -1), 5)
                if f == "i":
                    return Coord("d", 5)
                return None
            if green and r < 8:
                return _diag(_green_toward_a(f), r + 1)
            return None

    raise ValueError(f"Unhandled direction: {d!r}")
