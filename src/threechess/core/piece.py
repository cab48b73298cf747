"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from threechess.core.enums import PieceType, Player

# Notation letter ↔ PieceType
_CHAR_MAP: dict[str, PieceType] = {
    "P": PieceType.PAWN,
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "R": PieceType.ROOK,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
}

_CHARS: dict[PieceType, str] = {v: k for k, v in _CHAR_MAP.items()}

_UNICODE: dict[PieceType, str] = {
    PieceType.PAWN: "♟",
    PieceType.KNIGHT: "♞",
    PieceType.BISHOP: "♝",
    PieceType.ROOK: "♜",
    PieceType.QUEEN: "♛",
    PieceType.KING: "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a piece and its owner."""

    player: Player
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Notation token prefix, e.g. 'rK' for the red king."""
        return f"{self.player.letter}{_CHARS[self.piece_type]}"

    @classmethod
    def from_chars(cls, player_char: str, piece_char: str) -> Piece:
        """Create piece from notation letters, e.g. ('g', 'N') → green knight."""
        player = Player.from_letter(player_char)
        try:
            ptype = _CHAR_MAP[piece_char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {piece_char!r}") from None
        return cls(player, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol; colour comes from the player."""
        return _UNICODE[self.piece_type]
