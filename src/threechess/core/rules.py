"""High-level rules: check, legal moves, mate, promotion, game end."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from threechess.core.enums import PieceType, Player
from threechess.core.move_generator import MoveGenerator
from threechess.core.types import BACK_RANKS, Coord

if TYPE_CHECKING:
    from threechess.core.board import Board
    from threechess.core.piece import Piece


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # House rules of this variant, kept on purpose:
    # - a player whose king is attacked has no legal move unless a piece can
    #   capture an opposing king ("doomed");
    # - mate flags are permanent; mated players keep their pieces.

    @staticmethod
    def is_check(board: Board, player: Player) -> bool:
        return MoveGenerator(board).is_in_check(player)

    @staticmethod
    def is_doomed(board: Board, player: Player) -> bool:
        """Whether *player*'s king can be captured on the next ply."""
        return Rules.is_check(board, player)

    @staticmethod
    def legal_moves(board: Board, coord: Coord) -> list[Coord]:
        return MoveGenerator(board).generate_legal_destinations(coord)

    @staticmethod
    def is_mate(board: Board, player: Player) -> bool:
        """*player* has no legal move with any piece."""
        gen = MoveGenerator(board)
        for coord, _piece in board.pieces(player):
            if gen.generate_legal_destinations(coord):
                return False
        return True

    @staticmethod
    def promotes(piece: Piece, to: Coord) -> bool:
        """A pawn promotes on reaching any back rank but its own."""
        if piece.piece_type != PieceType.PAWN:
            return False
        return any(
            to.rank == rank
            for player, rank in BACK_RANKS.items()
            if player != piece.player
        )

    @staticmethod
    def winner(mate_flags: Mapping[Player, bool]) -> Player | None:
        """The only unmated player once two of three are mated."""
        alive = [p for p in Player if not mate_flags.get(p, False)]
        if len(alive) == 1:
            return alive[0]
        return None
