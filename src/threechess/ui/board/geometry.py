"""Screen geometry of the hexagonal board.

The board is drawn as a hexagon of radius ``r`` and half-height
``h = √3·r/2``.  Each of the six sections is a quadrilateral given by its
four outer corners; a field is the bilinear image of its 1/4 × 1/4 cell
inside that quadrilateral.  Corner order per section is

    p0 = (file 0, rank 0)   p1 = (file 4, rank 0)
    p2 = (file 4, rank 4)   p3 = (file 0, rank 4)

in hexagon coordinates with y pointing up; :class:`BoardGeometry` flips y
for the screen.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from threechess.core.types import Coord, shift_file

Point = tuple[float, float]
Quad = tuple[Point, Point, Point, Point]

RADIUS_FACTOR = 0.45

# Keyed by section anchor (start_file, start_rank).
_OUTLINES: dict[tuple[str, int], Callable[[float, float], Quad]] = {
    ("a", 1): lambda r, h: ((r / 2, 0), (r, 0), (r, h), (r / 4, h / 2)),
    ("e", 1): lambda r, h: ((r, 0), (r + r / 2, 0), (r + 3 * r / 4, h / 2), (r, h)),
    ("e", 9): lambda r, h: (
        (r, h),
        (r + 3 * r / 4, h / 2),
        (2 * r, h),
        (r + 3 * r / 4, h + h / 2),
    ),
    ("i", 9): lambda r, h: (
        (r, h),
        (r, 2 * h),
        (r + r / 2, 2 * h),
        (r + 3 * r / 4, h + h / 2),
    ),
    ("i", 5): lambda r, h: ((r, h), (r, 2 * h), (r / 2, 2 * h), (r / 4, h + h / 2)),
    ("a", 5): lambda r, h: ((r / 4, h / 2), (r, h), (r / 4, h + h / 2), (0, h)),
}


def section_anchor(coord: Coord) -> tuple[str, int] | None:
    """Anchor of the section holding *coord*, or None if it is off-board."""
    for start_file, start_rank in _OUTLINES:
        last_file = shift_file(start_file, 3)
        if (
            start_file <= coord.file <= last_file
            and start_rank <= coord.rank < start_rank + 4
        ):
            return start_file, start_rank
    return None


def _lerp(a: Point, b: Point, t: float) -> Point:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def bilinear(quad: Quad, u: float, v: float) -> Point:
    """Point at (*u*, *v*) ∈ [0, 1]² inside *quad*."""
    p0, p1, p2, p3 = quad
    return _lerp(_lerp(p0, p1, u), _lerp(p3, p2, u), v)


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    """Field polygons for a drawing area of ``width`` × ``height`` pixels."""

    width: float
    height: float

    @property
    def radius(self) -> float:
        return RADIUS_FACTOR * min(self.width, self.height)

    @property
    def half_height(self) -> float:
        return math.sqrt(3) * self.radius / 2

    @property
    def centre(self) -> Point:
        """Screen position of the central vertex."""
        return self._to_screen((self.radius, self.half_height))

    def section_outline(self, anchor: tuple[str, int]) -> Quad:
        """Outer corners of a section, in screen coordinates."""
        outline = _OUTLINES[anchor](self.radius, self.half_height)
        p0, p1, p2, p3 = (self._to_screen(p) for p in outline)
        return (p0, p1, p2, p3)

    def field_polygon(self, coord: Coord) -> Quad:
        """Screen quadrilateral of the field *coord*."""
        anchor = section_anchor(coord)
        if anchor is None:
            raise ValueError(f"{coord} is not a field of the board")
        quad = self.section_outline(anchor)
        x = ord(coord.file) - ord(anchor[0])
        y = coord.rank - anchor[1]
        return (
            bilinear(quad, x / 4, y / 4),
            bilinear(quad, (x + 1) / 4, y / 4),
            bilinear(quad, (x + 1) / 4, (y + 1) / 4),
            bilinear(quad, x / 4, (y + 1) / 4),
        )

    def field_centre(self, coord: Coord) -> Point:
        points = self.field_polygon(coord)
        return (
            sum(p[0] for p in points) / 4,
            sum(p[1] for p in points) / 4,
        )

    def _to_screen(self, point: Point) -> Point:
        r, h = self.radius, self.half_height
        off_x = (self.width - 2 * r) / 2
        off_y = (self.height - 2 * h) / 2
        return (off_x + point[0], self.height - off_y - point[1])
