"""Core domain layer — pure three-player chess logic with zero external dependencies.

Quick start::

    from threechess.core import Board, Rules, parse_coord

    board = Board.initial()
    for to in Rules.legal_moves(board, parse_coord("b1")):
        print(to)
"""

from threechess.core.board import Board, Field, Section, TopologyError
from threechess.core.directions import (
    ALL_DIRECTIONS,
    DIAGONAL_DIRECTIONS,
    STRAIGHT_DIRECTIONS,
    Direction,
)
from threechess.core.enums import FieldColor, PieceType, Player
from threechess.core.move import Move
from threechess.core.move_generator import MoveGenerator
from threechess.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    parse_player,
    placement_from_board,
)
from threechess.core.piece import Piece
from threechess.core.rules import Rules
from threechess.core.types import Coord, band_of, parse_coord

__all__ = [
    # Enums
    "FieldColor",
    "PieceType",
    "Player",
    # Types / helpers
    "Coord",
    "band_of",
    "parse_coord",
    # Topology
    "ALL_DIRECTIONS",
    "DIAGONAL_DIRECTIONS",
    "STRAIGHT_DIRECTIONS",
    "Board",
    "Direction",
    "Field",
    "Section",
    "TopologyError",
    # Domain objects
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "parse_player",
    "placement_from_board",
]
