"""Game state machine — selection, move commit, turn order and mate flags."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from threechess.core.board import Board
from threechess.core.enums import PieceType, Player
from threechess.core.move import Move
from threechess.core.notation import board_from_placement
from threechess.core.piece import Piece
from threechess.core.rules import Rules
from threechess.core.types import Coord
from threechess.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    player: Player
    piece: Piece
    move: Move
    captured: Piece | None = None
    newly_mated: tuple[Player, ...] = ()

    @property
    def promoted(self) -> bool:
        return self.move.promotion is not None


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of one field pick."""

    phase: GamePhase
    selected: Coord | None
    record: MoveRecord | None = None


@dataclass
class GameState:
    """Session for one game: the authoritative board plus turn bookkeeping.

    This is a pure data/logic class — no threading, no UI.  The board is
    mutated only by :meth:`apply_move`.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    current_player: Player = field(default=Player.RED, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    selected: Coord | None = field(default=None, init=False)
    mate_flags: dict[Player, bool] = field(
        default_factory=lambda: dict.fromkeys(Player, False), init=False
    )
    winner: Player | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        placement: str | None = None,
        to_move: Player = Player.RED,
    ) -> None:
        """Initialise (or reset) the game."""
        self.board = (
            Board.initial() if placement is None else board_from_placement(placement)
        )
        self.current_player = to_move
        self.phase = GamePhase.AWAITING_SELECTION
        self.selected = None
        self.mate_flags = dict.fromkeys(Player, False)
        self.winner = None
        self.move_history.clear()

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, coord: Coord) -> bool:
        """Select the current player's piece on *coord*.  False if none."""
        piece = self.board[coord]
        if piece is None or piece.player != self.current_player:
            return False
        self.selected = coord
        self.phase = GamePhase.PIECE_SELECTED
        return True

    def clear_selection(self) -> None:
        self.selected = None
        if self.phase == GamePhase.PIECE_SELECTED:
            self.phase = GamePhase.AWAITING_SELECTION

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_coord: Coord, to_coord: Coord) -> MoveRecord:
        """Commit a validated move and advance the turn.

        Caller is responsible for the legality check.
        """
        board = self.board
        piece = board[from_coord]
        if piece is None:
            raise ValueError(f"No piece on {from_coord}")
        captured = board[to_coord]

        promotion: PieceType | None = None
        placed = piece
        if Rules.promotes(piece, to_coord):
            promotion = PieceType.QUEEN
            placed = Piece(piece.player, PieceType.QUEEN)
            _LOGGER.info("%s pawn promotes on %s", piece.player, to_coord)

        board[to_coord] = placed
        board[from_coord] = None
        self.clear_selection()

        newly_mated: list[Player] = []
        if captured is not None and captured.piece_type == PieceType.KING:
            _LOGGER.info("%s captured the %s king", piece.player, captured.player)
            if not self.mate_flags[captured.player]:
                newly_mated.append(captured.player)
            self._set_mated(captured.player)

        record = MoveRecord(
            player=piece.player,
            piece=piece,
            move=Move(from_coord, to_coord, promotion),
            captured=captured,
        )
        self.move_history.append(record)

        newly_mated.extend(self.advance_turn())
        record.newly_mated = tuple(newly_mated)
        return record

    # ── Turn order ───────────────────────────────────────────────────────

    def advance_turn(self) -> list[Player]:
        """Pass the turn on, skipping and flagging mated players.

        Returns the players newly flagged as mated.
        """
        newly_mated: list[Player] = []
        player = self.current_player
        while not self._check_game_over():
            player = player.next
            if self.mate_flags[player]:
                continue
            if Rules.is_mate(self.board, player):
                self._set_mated(player)
                newly_mated.append(player)
                continue
            self.current_player = player
            break
        return newly_mated

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        return len(self.move_history)

    def is_check(self, player: Player) -> bool:
        return Rules.is_check(self.board, player)

    def legal_destinations(self, coord: Coord) -> list[Coord]:
        return Rules.legal_moves(self.board, coord)

    # ── Internal ─────────────────────────────────────────────────────────

    def _set_mated(self, player: Player) -> None:
        if not self.mate_flags[player]:
            _LOGGER.info("%s is mated", player)
        self.mate_flags[player] = True

    def _check_game_over(self) -> bool:
        winner = Rules.winner(self.mate_flags)
        if winner is None:
            return False
        self.winner = winner
        self.current_player = winner
        self.selected = None
        self.phase = GamePhase.GAME_OVER
        _LOGGER.info("Game over, %s wins", winner)
        return True
