"""Abstract interfaces for the game layer.

Follows Dependency Inversion: front ends depend on :class:`IGameController`,
not on the concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from threechess.core.enums import Player

if TYPE_CHECKING:
    from threechess.core.types import Coord
    from threechess.game.state import SelectionResult


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a three-player game."""

    NOT_STARTED = auto()
    AWAITING_SELECTION = auto()
    PIECE_SELECTED = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Inbound surface a presentation layer drives the engine through."""

    @abstractmethod
    def new_game(
        self,
        placement: str | None = None,
        to_move: Player = Player.RED,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def select_or_move(self, coord: Coord | str) -> SelectionResult:
        """Pick a field: select a piece, commit a move or cancel."""

    @abstractmethod
    def legal_destinations(self, coord: Coord | str) -> list[Coord]:
        """Legal destinations of the piece on *coord* (for highlighting)."""

    @abstractmethod
    def is_check(self, player: Player) -> bool:
        """Is *player*'s king attacked?"""

    @abstractmethod
    def mate_flag(self, player: Player) -> bool:
        """Has *player* been mated?"""

    @property
    @abstractmethod
    def current_player(self) -> Player:
        """Player whose turn it is."""
