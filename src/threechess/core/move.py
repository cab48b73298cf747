"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from threechess.core.enums import PieceType
from threechess.core.types import Coord

_PROMO_CHARS: dict[PieceType, str] = {PieceType.QUEEN: "Q"}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move."""

    from_coord: Coord
    to_coord: Coord
    promotion: PieceType | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.from_coord}-{self.to_coord}"
        if self.promotion is not None:
            base += "=" + _PROMO_CHARS.get(self.promotion, "")
        return base
