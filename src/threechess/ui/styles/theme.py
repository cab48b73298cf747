"""Visual theme constants and QSS styles for threechess."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from threechess.core.enums import Player


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the hexagonal board."""

    light_field: QColor
    dark_field: QColor
    field_border: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal destination dots
    highlight_check: QColor  # king in check
    coord_light: QColor  # coordinate text on dark fields
    coord_dark: QColor  # coordinate text on light fields
    red_piece: QColor
    green_piece: QColor
    yellow_piece: QColor

    def piece_color(self, player: Player) -> QColor:
        return (self.red_piece, self.green_piece, self.yellow_piece)[player]

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_field=QColor(240, 217, 181),  # tan
            dark_field=QColor(181, 136, 99),  # brown
            field_border=QColor(90, 60, 40),
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(0, 0, 0, 70),  # dark dot overlay
            highlight_check=QColor(255, 0, 0, 120),  # red transparent
            coord_light=QColor(230, 210, 180),
            coord_dark=QColor(120, 85, 60),
            red_piece=QColor(200, 30, 30),
            green_piece=QColor(30, 140, 40),
            yellow_piece=QColor(225, 190, 20),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_field=QColor(224, 226, 231),
            dark_field=QColor(101, 110, 122),
            field_border=QColor(55, 60, 68),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 70),
            highlight_check=QColor(255, 0, 0, 120),
            coord_light=QColor(224, 226, 231),
            coord_dark=QColor(101, 110, 122),
            red_piece=QColor(210, 40, 40),
            green_piece=QColor(40, 150, 60),
            yellow_piece=QColor(235, 200, 30),
        )

    @classmethod
    def contrast(cls) -> BoardTheme:
        """Black and white fields, as drawn by the first prototype."""
        return cls(
            light_field=QColor(255, 255, 255),
            dark_field=QColor(0, 0, 0),
            field_border=QColor(255, 0, 0),
            highlight_from=QColor(0, 120, 255, 110),
            highlight_to=QColor(0, 120, 255, 160),
            highlight_check=QColor(255, 0, 0, 140),
            coord_light=QColor(0xDD, 0xDD, 0xDD),
            coord_dark=QColor(0x22, 0x22, 0x22),
            red_piece=QColor(220, 20, 20),
            green_piece=QColor(20, 170, 20),
            yellow_piece=QColor(240, 210, 0),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Theme preset for a settings name; unknown names fall back to Classic."""
        factory = THEME_PRESETS.get(name, cls.default)
        return factory()


THEME_PRESETS = {
    "Classic": BoardTheme.default,
    "Slate": BoardTheme.slate,
    "Contrast": BoardTheme.contrast,
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QLabel#turnLabel {
    font-size: 16px;
    font-weight: bold;
}

QListWidget {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    font-family: "Consolas", monospace;
    font-size: 13px;
}

QListWidget::item:selected {
    background: #264f78;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
