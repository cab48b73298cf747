"""Tests for MainWindow wiring between clicks, controller and scene."""

from __future__ import annotations

from threechess.core.enums import Player
from threechess.core.types import parse_coord
from threechess.ui.main_window import MainWindow
from threechess.ui.settings import AppSettings

TWO_MATES = "rKe1 rRa1 gKl8 yKl12 yRh12"


def _click(window: MainWindow, *names: str) -> None:
    for name in names:
        window._on_field_clicked(name)


def test_starts_with_red_to_move() -> None:
    window = MainWindow()
    assert window.controller.current_player == Player.RED
    assert window._turn_label.text() == "Red to move"
    assert window.board_view.board_scene.piece_text(parse_coord("e2")) == "♟"


def test_selection_highlights_destinations() -> None:
    window = MainWindow()
    _click(window, "e2")
    scene = window.board_view.board_scene
    assert set(scene.highlighted_destinations()) == {
        parse_coord("e3"),
        parse_coord("e4"),
    }


def test_move_updates_board_and_list() -> None:
    window = MainWindow()
    _click(window, "e2", "e4")
    scene = window.board_view.board_scene
    assert scene.piece_text(parse_coord("e4")) == "♟"
    assert scene.piece_text(parse_coord("e2")) is None
    assert scene.highlighted_destinations() == []
    assert window._move_list.count() == 1
    assert window._turn_label.text() == "Green to move"


def test_game_over_is_reported() -> None:
    window = MainWindow()
    window.new_game(TWO_MATES)
    _click(window, "a1", "a8", "h12", "e12")
    assert window.controller.winner == Player.YELLOW
    assert window._turn_label.text() == "Yellow wins"
    assert "Red: mated" in window._players_label.text()
    assert "Green: mated" in window._players_label.text()


def test_new_game_action_resets() -> None:
    window = MainWindow()
    _click(window, "e2", "e4")
    window._act_new_game.trigger()
    assert window._move_list.count() == 0
    assert window.controller.current_player == Player.RED


def test_settings_applied_to_scene() -> None:
    window = MainWindow(AppSettings(show_coordinates=False, board_theme="Slate"))
    scene = window.board_view.board_scene
    assert all(not item.isVisible() for item in scene._coord_items)

    window._act_coords.trigger()
    assert window.settings.show_coordinates
    assert all(item.isVisible() for item in scene._coord_items)

    window._theme_actions["Contrast"].trigger()
    assert window.settings.board_theme == "Contrast"
