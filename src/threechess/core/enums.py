"""Core enumerations for the three-player chess domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """Seat at the board, in turn order."""

    RED = 0
    GREEN = 1
    YELLOW = 2

    @property
    def next(self) -> Player:
        """Cyclic successor: RED → GREEN → YELLOW → RED."""
        return Player((self.value + 1) % 3)

    @property
    def letter(self) -> str:
        return _PLAYER_LETTERS[self.value]

    @classmethod
    def from_letter(cls, letter: str) -> Player:
        try:
            return cls(_PLAYER_LETTERS.index(letter))
        except ValueError:
            raise ValueError(f"Invalid player letter: {letter!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


_PLAYER_LETTERS = ("r", "g", "y")


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class FieldColor(IntEnum):
    """Light/dark tag of a board field."""

    LIGHT = 0
    DARK = 1
