"""Coordinate type and band/file-line helpers.

Board layout (three bands of 8 files × 4 ranks):

    RED     ranks 1–4,  files a–h
    GREEN   ranks 5–8,  files a–d and i–l
    YELLOW  ranks 9–12, files e–l

Each file line runs through two bands: a–d is shared by RED/GREEN,
e–h by RED/YELLOW and i–l by GREEN/YELLOW.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from threechess.core.enums import Player

FILES = "abcdefghijkl"

_COORD_RE = re.compile(r"^([a-l])(1[0-2]|[1-9])$")

BACK_RANKS: dict[Player, int] = {
    Player.RED: 1,
    Player.GREEN: 8,
    Player.YELLOW: 12,
}

PAWN_RANKS: dict[Player, int] = {
    Player.RED: 2,
    Player.GREEN: 7,
    Player.YELLOW: 11,
}


@dataclass(frozen=True, slots=True)
class Coord:
    """Immutable (file, rank) pair, e.g. ``Coord("e", 4)``."""

    file: str
    rank: int

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"

    def __repr__(self) -> str:
        return f"Coord({str(self)!r})"


def parse_coord(name: str) -> Coord:
    """Parse a coordinate name, e.g. 'e4' → Coord('e', 4).

    Only the syntax is checked; whether the field exists is a question for
    the board topology.
    """
    m = _COORD_RE.match(name)
    if m is None:
        raise ValueError(f"Invalid coordinate name: {name!r}")
    return Coord(m.group(1), int(m.group(2)))


def shift_file(file: str, step: int) -> str:
    """File *step* letters away from *file* (no bounds check)."""
    return FILES[FILES.index(file) + step]


def band_of(coord: Coord) -> Player | None:
    """Owner of the band containing *coord*, or None if it is off-board."""
    f, r = coord.file, coord.rank
    if 1 <= r <= 4 and "a" <= f <= "h":
        return Player.RED
    if 5 <= r <= 8 and ("a" <= f <= "d" or "i" <= f <= "l"):
        return Player.GREEN
    if 9 <= r <= 12 and "e" <= f <= "l":
        return Player.YELLOW
    return None


def file_owners(file: str) -> tuple[Player, Player]:
    """The two players whose bands the file line of *file* runs through."""
    if "a" <= file <= "d":
        return (Player.RED, Player.GREEN)
    if "e" <= file <= "h":
        return (Player.RED, Player.YELLOW)
    if "i" <= file <= "l":
        return (Player.GREEN, Player.YELLOW)
    raise ValueError(f"Invalid file: {file!r}")
