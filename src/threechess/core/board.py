"""Board - six 4x4 sections forming the three-player topology."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from threechess.core.enums import FieldColor, PieceType, Player
from threechess.core.piece import Piece
from threechess.core.types import BACK_RANKS, PAWN_RANKS, Coord, shift_file

# (start_file, start_rank, inverse_colors), in drawing order.
SECTION_ANCHORS: tuple[tuple[str, int, bool], ...] = (
    ("a", 1, False),
    ("e", 1, False),
    ("e", 9, False),
    ("i", 9, True),
    ("i", 5, False),
    ("a", 5, False),
)

_BACK_RANK_ORDER: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
)


class TopologyError(LookupError):
    """A coordinate that is not part of the board was looked up."""


@dataclass(slots=True)
class Field:
    """A single board field: coordinate, colour tag, optional occupant."""

    coord: Coord
    color: FieldColor
    piece: Piece | None = None

    def copy(self) -> Field:
        return Field(self.coord, self.color, self.piece)


@dataclass(slots=True)
class Section:
    """A 4x4 block anchored at ``(start_file, start_rank)``.

    ``fields[x][y]`` is the field ``start_file + x``, ``start_rank + y``.
    """

    start_file: str
    start_rank: int
    inverse_colors: bool = False
    fields: list[list[Field]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.fields:
            return
        for x in range(4):
            column: list[Field] = []
            for y in range(4):
                dark = ((x + y) % 2 == 0) != self.inverse_colors
                column.append(
                    Field(
                        Coord(shift_file(self.start_file, x), self.start_rank + y),
                        FieldColor.DARK if dark else FieldColor.LIGHT,
                    )
                )
            self.fields.append(column)

    def __iter__(self) -> Iterator[Field]:
        for column in self.fields:
            yield from column

    def copy(self) -> Section:
        return Section(
            self.start_file,
            self.start_rank,
            self.inverse_colors,
            [[f.copy() for f in column] for column in self.fields],
        )


class Board:
    """Mutable 96-field board.

    Fields are fixed at construction; only their occupancy changes.
    Lookups go through a (file, rank) index built once per board.
    """

    __slots__ = ("_sections", "_index")

    def __init__(self, sections: tuple[Section, ...] | None = None) -> None:
        if sections is None:
            sections = tuple(Section(f, r, inv) for f, r, inv in SECTION_ANCHORS)
        self._sections = sections
        self._index: dict[tuple[str, int], Field] = {
            (f.coord.file, f.coord.rank): f for s in sections for f in s
        }

    # -- Topology -----------------------------------------------------------

    @property
    def sections(self) -> tuple[Section, ...]:
        return self._sections

    def fields(self) -> Iterator[Field]:
        """All 96 fields, section by section."""
        for section in self._sections:
            yield from section

    def lookup(self, file: str, rank: int) -> Field | None:
        """Read-only lookup; None when (file, rank) is not on the board."""
        return self._index.get((file, rank))

    def has_field(self, coord: Coord) -> bool:
        return self.lookup(coord.file, coord.rank) is not None

    def __contains__(self, coord: object) -> bool:
        return isinstance(coord, Coord) and self.has_field(coord)

    def field(self, coord: Coord) -> Field:
        """The field at *coord*; a missing field is an invariant violation."""
        f = self.lookup(coord.file, coord.rank)
        if f is None:
            raise TopologyError(f"No field {coord} on the board")
        return f

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coord) -> Piece | None:
        return self.field(coord).piece

    def __setitem__(self, coord: Coord, piece: Piece | None) -> None:
        self.field(coord).piece = piece

    def is_empty(self, coord: Coord) -> bool:
        return self.field(coord).piece is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, player: Player) -> list[tuple[Coord, Piece]]:
        """(coord, piece) for every piece *player* has on the board."""
        return [
            (f.coord, f.piece)
            for f in self.fields()
            if f.piece is not None and f.piece.player == player
        ]

    def occupied(self) -> list[tuple[Coord, Piece]]:
        return [(f.coord, f.piece) for f in self.fields() if f.piece is not None]

    def king_coord(self, player: Player) -> Coord | None:
        """Coordinate of *player*'s king, or None if it is not on the board."""
        king = Piece(player, PieceType.KING)
        for f in self.fields():
            if f.piece == king:
                return f.coord
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        return Board(tuple(s.copy() for s in self._sections))

    def clear(self) -> None:
        for f in self.fields():
            f.piece = None

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard three-player starting position."""
        b = cls()
        b._place_half(Player.RED, "a", queen_side=True, toward_center=True)
        b._place_half(Player.RED, "e", queen_side=False, toward_center=False)
        b._place_half(Player.GREEN, "i", queen_side=True, toward_center=False)
        b._place_half(Player.GREEN, "a", queen_side=False, toward_center=True)
        b._place_half(Player.YELLOW, "e", queen_side=True, toward_center=False)
        b._place_half(Player.YELLOW, "i", queen_side=False, toward_center=False)
        return b

    def _place_half(
        self,
        player: Player,
        start_file: str,
        *,
        queen_side: bool,
        toward_center: bool,
    ) -> None:
        """Fill one 4-file half of a player's back rank and pawn rank.

        *toward_center* means the half's highest file lies next to the
        central vertex, so the rook starts on its lowest file.
        """
        back_rank = BACK_RANKS[player]
        pawn_rank = PAWN_RANKS[player]
        order = list(_BACK_RANK_ORDER)
        order.append(PieceType.QUEEN if queen_side else PieceType.KING)
        if not toward_center:
            order.reverse()
        for x, pt in enumerate(order):
            file = shift_file(start_file, x)
            self[Coord(file, back_rank)] = Piece(player, pt)
            self[Coord(file, pawn_rank)] = Piece(player, PieceType.PAWN)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return [f.piece for f in self.fields()] == [f.piece for f in other.fields()]

    def __repr__(self) -> str:
        rows: list[str] = []
        for f in self.fields():
            if f.piece is not None:
                rows.append(f"{f.piece}{f.coord}")
        return f"Board({' '.join(rows)})"
