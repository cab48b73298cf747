"""Pseudo-legal and legal destination generation + check detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from threechess.core.directions import (
    ALL_DIRECTIONS,
    DIAGONAL_DIRECTIONS,
    STRAIGHT_DIRECTIONS,
    Direction,
)
from threechess.core.enums import PieceType, Player
from threechess.core.types import PAWN_RANKS, Coord, band_of, file_owners

if TYPE_CHECKING:
    from threechess.core.board import Board, Field
    from threechess.core.piece import Piece


FORWARD: dict[Player, Direction] = {
    Player.RED: Direction.FORWARD_RED,
    Player.GREEN: Direction.FORWARD_GREEN,
    Player.YELLOW: Direction.FORWARD_YELLOW,
}

PAWN_CAPTURE_DIRS: dict[Player, tuple[Direction, ...]] = {
    Player.RED: (
        Direction.RG_FORWARD_LEFT,
        Direction.RG_FORWARD_RIGHT,
        Direction.RY_FORWARD_LEFT,
        Direction.RY_FORWARD_RIGHT,
    ),
    Player.GREEN: (
        Direction.RG_BACK_LEFT,
        Direction.RG_BACK_RIGHT,
        Direction.GY_FORWARD_LEFT,
        Direction.GY_FORWARD_RIGHT,
    ),
    Player.YELLOW: (
        Direction.RY_BACK_LEFT,
        Direction.RY_BACK_RIGHT,
        Direction.GY_BACK_LEFT,
        Direction.GY_BACK_RIGHT,
    ),
}

ROOK_DIRS = STRAIGHT_DIRECTIONS
BISHOP_DIRS = DIAGONAL_DIRECTIONS
QUEEN_DIRS = ALL_DIRECTIONS
KING_DIRS = ALL_DIRECTIONS


def pawn_push_direction(player: Player, coord: Coord) -> Direction:
    """Forward direction for *player*'s pawn standing on *coord*.

    At home this is the player's own forward.  In another band it is the
    forward of the other player sharing the pawn's file line, which walks
    toward that band's back rank.
    """
    band = band_of(coord)
    if band is None or band == player:
        return FORWARD[player]
    first, second = file_owners(coord.file)
    return FORWARD[second if first == band else first]


class MoveGenerator:
    """Generates destinations for pieces on a :class:`Board`.

    The board is only read; legality checks run on copies.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_legal_destinations(self, coord: Coord) -> list[Coord]:
        """Destinations the piece on *coord* may legally move to.

        Moves that leave the mover's own king attacked are dropped.  If any
        remaining move captures an opposing king, only those captures are
        returned.  Otherwise a mover whose king is already attacked gets no
        moves at all.
        """
        board = self._board
        piece = board[coord]
        if piece is None:
            return []
        mover = piece.player

        legal: list[Coord] = []
        for to in self.generate_pseudo_legal_destinations(coord):
            trial = board.copy()
            trial[to] = piece
            trial[coord] = None
            if not MoveGenerator(trial).is_in_check(mover):
                legal.append(to)

        king_captures = [to for to in legal if self._holds_enemy_king(to, mover)]
        if king_captures:
            return king_captures
        if self.is_in_check(mover):
            return []
        return legal

    def generate_pseudo_legal_destinations(self, coord: Coord) -> list[Coord]:
        """Destinations allowed by piece movement alone (may leave king in check)."""
        field = self._board.field(coord)
        piece = field.piece
        if piece is None:
            return []

        moves: list[Coord] = []
        pt = piece.piece_type
        if pt == PieceType.PAWN:
            self._gen_pawn(field, piece, moves)
        elif pt == PieceType.KNIGHT:
            self._gen_knight(field, piece, moves)
        elif pt == PieceType.BISHOP:
            self._gen_sliding(field, piece, BISHOP_DIRS, moves)
        elif pt == PieceType.ROOK:
            self._gen_sliding(field, piece, ROOK_DIRS, moves)
        elif pt == PieceType.QUEEN:
            self._gen_sliding(field, piece, QUEEN_DIRS, moves)
        else:
            self._gen_king(field, piece, moves)
        return list(dict.fromkeys(moves))

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, player: Player) -> bool:
        """Is *player*'s king attacked by any opponent?  No king, no check."""
        king = self._board.king_coord(player)
        if king is None:
            return False
        return self.is_attacked(king, player)

    def is_attacked(self, coord: Coord, player: Player) -> bool:
        """Can any piece not owned by *player* move to *coord*?"""
        for from_coord, piece in self._board.occupied():
            if piece.player == player:
                continue
            if coord in self.generate_pseudo_legal_destinations(from_coord):
                return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _holds_enemy_king(self, coord: Coord, player: Player) -> bool:
        target = self._board[coord]
        return (
            target is not None
            and target.piece_type == PieceType.KING
            and target.player != player
        )

    def _gen_pawn(self, field: Field, piece: Piece, moves: list[Coord]) -> None:
        board = self._board
        player = piece.player

        one_step = pawn_push_direction(player, field.coord).next(field, board)
        if one_step is not None and one_step.piece is None:
            moves.append(one_step.coord)
            if field.coord.rank == PAWN_RANKS[player]:
                push = pawn_push_direction(player, one_step.coord)
                two_step = push.next(one_step, board)
                if two_step is not None and two_step.piece is None:
                    moves.append(two_step.coord)

        for direction in PAWN_CAPTURE_DIRS[player]:
            target = direction.next(field, board)
            if (
                target is not None
                and target.piece is not None
                and target.piece.player != player
            ):
                moves.append(target.coord)

    def _gen_knight(self, field: Field, piece: Piece, moves: list[Coord]) -> None:
        for d in STRAIGHT_DIRECTIONS:
            for o in d.orthogonal:
                for path in ((d, o, o), (d, d, o)):
                    target = self._walk(field, path)
                    if target is None:
                        continue
                    if target.piece is None or target.piece.player != piece.player:
                        moves.append(target.coord)

    def _gen_sliding(
        self,
        field: Field,
        piece: Piece,
        directions: tuple[Direction, ...],
        moves: list[Coord],
    ) -> None:
        board = self._board
        for direction in directions:
            current = direction.next(field, board)
            while current is not None:
                if current.piece is None:
                    moves.append(current.coord)
                    current = direction.next(current, board)
                    continue
                if current.piece.player != piece.player:
                    moves.append(current.coord)
                break

    def _gen_king(self, field: Field, piece: Piece, moves: list[Coord]) -> None:
        board = self._board
        for direction in KING_DIRS:
            target = direction.next(field, board)
            if target is None:
                continue
            if target.piece is None or target.piece.player != piece.player:
                moves.append(target.coord)

    def _walk(self, field: Field, path: tuple[Direction, ...]) -> Field | None:
        current: Field | None = field
        for direction in path:
            if current is None:
                return None
            current = direction.next(current, self._board)
        return current
