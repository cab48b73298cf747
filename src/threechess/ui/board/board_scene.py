"""BoardScene — QGraphicsScene that draws the hexagonal board and pieces."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen, QPolygonF
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsPolygonItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from threechess.core.board import Board
from threechess.core.enums import FieldColor
from threechess.core.types import Coord
from threechess.ui.board.geometry import BoardGeometry, Quad
from threechess.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


def _polygon(quad: Quad) -> QPolygonF:
    return QPolygonF([QPointF(x, y) for x, y in quad])


class BoardScene(QGraphicsScene):
    """Renders fields, coordinates, highlights and piece glyphs.

    The scene never changes game state; it reports clicks and is told what
    to show.

    Signals:
        field_clicked(str): Name of the field under a mouse press, e.g. "e4".
    """

    field_clicked = pyqtSignal(str)

    SIZE = 800  # px, square drawing area

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._geometry = BoardGeometry(self.SIZE, self.SIZE)
        self._board = Board()
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        self._selected: Coord | None = None
        self._destinations: list[Coord] = []
        self._checked: list[Coord] = []

        # Visual layers
        self._field_items: dict[Coord, QGraphicsPolygonItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Coord, QGraphicsSimpleTextItem] = {}
        self._highlight_items: list[QGraphicsItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def geometry(self) -> BoardGeometry:
        return self._geometry

    @property
    def theme(self) -> BoardTheme:
        return self._theme

    def set_board(self, board: Board) -> None:
        """Show *board* (full redraw of pieces)."""
        self._board = board
        self._sync_pieces()

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()
        self._sync_highlights()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide field name labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-destination dots."""
        self._show_legal_moves = visible
        self._sync_highlights()

    def set_selection(self, coord: Coord | None, destinations: list[Coord]) -> None:
        """Highlight the selected field and its legal destinations."""
        self._selected = coord
        self._destinations = list(destinations) if coord is not None else []
        self._sync_highlights()

    def set_check(self, coords: list[Coord]) -> None:
        """Highlight kings in check."""
        self._checked = list(coords)
        self._sync_highlights()

    def piece_text(self, coord: Coord) -> str | None:
        """Glyph shown on *coord*, or None for an empty field."""
        item = self._piece_items.get(coord)
        return None if item is None else item.text()

    def highlighted_destinations(self) -> list[Coord]:
        return list(self._destinations) if self._show_legal_moves else []

    def coord_at(self, pos: QPointF) -> Coord | None:
        """Scene position → field coordinate."""
        for coord, item in self._field_items.items():
            if item.polygon().containsPoint(pos, Qt.FillRule.OddEvenFill):
                return coord
        return None

    def field_polygon(self, coord: Coord) -> QPolygonF:
        return _polygon(self._geometry.field_polygon(coord))

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 96 fields and their labels."""
        for field_item in self._field_items.values():
            self.removeItem(field_item)
        self._field_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        font = QFont("Helvetica Neue", max(7, self.SIZE // 80))
        border = QPen(self._theme.field_border)
        border.setWidthF(1.0)

        for fld in self._board.fields():
            dark = fld.color == FieldColor.DARK
            item = QGraphicsPolygonItem(self.field_polygon(fld.coord))
            item.setBrush(
                QBrush(self._theme.dark_field if dark else self._theme.light_field)
            )
            item.setPen(border)
            item.setZValue(0)
            self.addItem(item)
            self._field_items[fld.coord] = item

            label = QGraphicsSimpleTextItem(str(fld.coord).upper())
            label.setFont(font)
            label.setBrush(
                QBrush(self._theme.coord_light if dark else self._theme.coord_dark)
            )
            x, y = self._geometry.field_polygon(fld.coord)[0]
            cx, cy = self._geometry.field_centre(fld.coord)
            # Tucked toward the field's first corner, clear of the glyph.
            label.setPos(x + (cx - x) * 0.35, y + (cy - y) * 0.35 - font.pointSize())
            label.setZValue(0.3)
            label.setVisible(self._show_coordinates)
            self.addItem(label)
            self._coord_items.append(label)

        self.setSceneRect(0, 0, self.SIZE, self.SIZE)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all glyph items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        font = QFont("DejaVu Sans", max(10, int(self._geometry.half_height / 9)))
        outline = QPen(QColor(20, 20, 20))
        outline.setWidthF(0.8)
        for coord, piece in self._board.occupied():
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            item.setBrush(QBrush(self._theme.piece_color(piece.player)))
            item.setPen(outline)
            rect = item.boundingRect()
            cx, cy = self._geometry.field_centre(coord)
            item.setPos(cx - rect.width() / 2, cy - rect.height() / 2)
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[coord] = item

    # ── Selection / highlights ───────────────────────────────────────────

    def _sync_highlights(self) -> None:
        for item in self._highlight_items:
            self.removeItem(item)
        self._highlight_items.clear()

        for coord in self._checked:
            self._add_overlay(coord, self._theme.highlight_check, 0.6)
        if self._selected is not None:
            self._add_overlay(self._selected, self._theme.highlight_from, 0.7)
        for coord in self.highlighted_destinations():
            self._add_dot(coord)

    def _add_overlay(self, coord: Coord, color: QColor, z: float) -> None:
        item = QGraphicsPolygonItem(self.field_polygon(coord))
        item.setBrush(QBrush(color))
        item.setPen(QPen(Qt.PenStyle.NoPen))
        item.setZValue(z)
        self.addItem(item)
        self._highlight_items.append(item)

    def _add_dot(self, coord: Coord) -> None:
        r = self.SIZE / 80
        cx, cy = self._geometry.field_centre(coord)
        dot = QGraphicsEllipseItem(cx - r, cy - r, 2 * r, 2 * r)
        dot.setBrush(QBrush(self._theme.highlight_to))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(0.8)
        self.addItem(dot)
        self._highlight_items.append(dot)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)

        coord = self.coord_at(event.scenePos())
        if coord is None:
            _LOGGER.debug("Click outside the board at %s", event.scenePos())
            return super().mousePressEvent(event)

        self.field_clicked.emit(str(coord))
        event.accept()
