"""GameController — the central orchestrator of a three-player game.

Coordinates: GameState, Rules.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from threechess.core.enums import Player
from threechess.core.types import Coord, parse_coord
from threechess.game.interfaces import GamePhase, IGameController
from threechess.game.state import GameState, MoveRecord, SelectionResult

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameState"], None]  # record, state
PlayerMatedCallback = Callable[[Player], None]
GameOverCallback = Callable[[Player], None]  # winner
PhaseCallback = Callable[[GamePhase], None]
SelectionCallback = Callable[[Coord | None], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_player_mated: list[PlayerMatedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Drives one game from field picks: selects, validates and commits
    moves, passes the turn and notifies listeners.

    Methods are designed to be called from a single thread (the main/UI
    thread).
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def winner(self) -> Player | None:
        return self._state.winner

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def selected(self) -> Coord | None:
        return self._state.selected

    @property
    def move_history(self) -> list[MoveRecord]:
        return self._state.move_history

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        placement: str | None = None,
        to_move: Player = Player.RED,
    ) -> None:
        self._state = GameState()
        self._state.setup(placement, to_move)
        _LOGGER.debug("New game, %s to move", to_move)
        self._emit_selection(None)
        self._emit_phase(GamePhase.AWAITING_SELECTION)

    def select_or_move(self, coord: Coord | str) -> SelectionResult:
        coord = self._resolve(coord)
        state = self._state

        if state.phase == GamePhase.AWAITING_SELECTION:
            if state.select(coord):
                _LOGGER.debug("%s selects %s", state.current_player, coord)
                self._emit_selection(coord)
                self._emit_phase(GamePhase.PIECE_SELECTED)
            return self._result()

        if state.phase != GamePhase.PIECE_SELECTED:
            return self._result()

        assert state.selected is not None
        if coord not in state.legal_destinations(state.selected):
            _LOGGER.debug("Selection on %s cancelled by %s", state.selected, coord)
            state.clear_selection()
            self._emit_selection(None)
            self._emit_phase(GamePhase.AWAITING_SELECTION)
            return self._result()

        record = state.apply_move(state.selected, coord)
        _LOGGER.debug("%s plays %s", record.player, record.move)

        self._emit_selection(None)
        self._emit_move(record)
        for player in record.newly_mated:
            self._emit_player_mated(player)

        if state.is_game_over:
            assert state.winner is not None
            self._emit_game_over(state.winner)
        else:
            self._emit_phase(GamePhase.AWAITING_SELECTION)
        return self._result(record)

    def legal_destinations(self, coord: Coord | str) -> list[Coord]:
        return self._state.legal_destinations(self._resolve(coord))

    def is_check(self, player: Player) -> bool:
        return self._state.is_check(player)

    def mate_flag(self, player: Player) -> bool:
        return self._state.mate_flags[player]

    # ── Internal helpers ─────────────────────────────────────────────────

    def _resolve(self, coord: Coord | str) -> Coord:
        """Parse names and reject coordinates that are not on the board."""
        if isinstance(coord, str):
            coord = parse_coord(coord)
        self._state.board.field(coord)
        return coord

    def _result(self, record: MoveRecord | None = None) -> SelectionResult:
        return SelectionResult(self._state.phase, self._state.selected, record)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_player_mated(self, player: Player) -> None:
        for cb in self.events.on_player_mated:
            cb(player)

    def _emit_game_over(self, winner: Player) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(winner)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_selection(self, coord: Coord | None) -> None:
        for cb in self.events.on_selection_changed:
            cb(coord)
