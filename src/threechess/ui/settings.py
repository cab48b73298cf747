"""Application settings and their application to a main window."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from threechess.ui.styles.theme import THEME_PRESETS, BoardTheme

if TYPE_CHECKING:
    from threechess.ui.board.board_scene import BoardScene

_LOGGER = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Diagnostics
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.board_theme not in THEME_PRESETS:
            _LOGGER.warning("Unknown board theme %r, using Classic", self.board_theme)
            self.board_theme = "Classic"
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level!r}")


def apply_board_settings(scene: BoardScene, settings: AppSettings) -> None:
    scene.set_theme(BoardTheme.by_name(settings.board_theme))
    scene.set_show_coordinates(settings.show_coordinates)
    scene.set_show_legal_moves(settings.show_legal_moves)
