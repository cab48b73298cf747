"""Placement notation: parsing and serialization of piece positions.

A placement is a whitespace-separated list of ``<player><PIECE><coord>``
tokens, e.g. ``"rKe1 gKd8 yKi12 rRa1"``.  Player letters are ``r g y``;
piece letters ``P N B R Q K``.
"""

from __future__ import annotations

import re

from threechess.core.board import Board
from threechess.core.enums import Player
from threechess.core.piece import Piece
from threechess.core.types import parse_coord

_TOKEN_RE = re.compile(r"^([rgy])([PNBRQK])([a-l]\d{1,2})$")


def board_from_placement(text: str) -> Board:
    """Parse a placement string into a :class:`Board`."""
    board = Board()
    for token in text.split():
        m = _TOKEN_RE.match(token)
        if m is None:
            raise ValueError(f"Invalid placement token: {token!r}")
        piece = Piece.from_chars(m.group(1), m.group(2))
        coord = parse_coord(m.group(3))
        if not board.has_field(coord):
            raise ValueError(f"Placement token off the board: {token!r}")
        if board[coord] is not None:
            raise ValueError(f"Field {coord} occupied twice in placement")
        board[coord] = piece
    return board


def placement_from_board(board: Board) -> str:
    """Serialize *board* to a placement string (field order)."""
    return " ".join(f"{piece}{coord}" for coord, piece in board.occupied())


def parse_player(text: str) -> Player:
    """Accept ``'r'``/``'red'`` style names (case-insensitive)."""
    key = text.strip().lower()
    for player in Player:
        if key in (player.letter, player.name.lower()):
            return player
    raise ValueError(f"Invalid player: {text!r}")


STARTING_PLACEMENT = placement_from_board(Board.initial())
