"""MainWindow — top-level window assembling the board and side panel."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtGui import QAction, QActionGroup, QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QMainWindow,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from threechess.core.enums import Player
from threechess.core.types import Coord
from threechess.game.controller import GameController
from threechess.game.interfaces import GamePhase
from threechess.game.state import GameState, MoveRecord
from threechess.ui.board.board_view import BoardView
from threechess.ui.settings import AppSettings, apply_board_settings
from threechess.ui.styles.theme import THEME_PRESETS

_LOGGER = logging.getLogger(__name__)

TCallback = TypeVar("TCallback", bound=Callable[..., None])


def _player_name(player: Player) -> str:
    return player.name.capitalize()


class MainWindow(QMainWindow):
    """Main application window for threechess."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Three-Player Chess")
        self.setMinimumSize(800, 600)
        self.resize(1000, 760)

        self._controller = GameController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()
        self._apply_settings()

        # Start with a default game
        self.new_game()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board (center)
        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._turn_label = QLabel()
        self._turn_label.setObjectName("turnLabel")
        right.addWidget(self._turn_label)

        self._players_label = QLabel()
        self._players_label.setWordWrap(True)
        right.addWidget(self._players_label)

        self._move_list = QListWidget()
        right.addWidget(self._move_list, stretch=1)

        self._new_game_button = QPushButton("New game")
        right.addWidget(self._new_game_button)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(240)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("Ready")
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # Game menu
        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("&New game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self.new_game)
        self._menu_game.addAction(self._act_new_game)

        self._menu_game.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.setMenuRole(QAction.MenuRole.QuitRole)
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # View menu
        self._menu_view = menu_bar.addMenu("&View")
        assert self._menu_view is not None

        self._act_coords = QAction("Show &coordinates", self)
        self._act_coords.setCheckable(True)
        self._act_coords.setChecked(self._settings.show_coordinates)
        self._act_coords.toggled.connect(self._on_toggle_coordinates)
        self._menu_view.addAction(self._act_coords)

        self._act_legal = QAction("Show &legal moves", self)
        self._act_legal.setCheckable(True)
        self._act_legal.setChecked(self._settings.show_legal_moves)
        self._act_legal.toggled.connect(self._on_toggle_legal_moves)
        self._menu_view.addAction(self._act_legal)

        self._menu_theme = self._menu_view.addMenu("Board &theme")
        assert self._menu_theme is not None
        self._theme_group = QActionGroup(self)
        self._theme_actions: dict[str, QAction] = {}
        for name in THEME_PRESETS:
            action = QAction(name, self)
            action.setCheckable(True)
            action.setChecked(name == self._settings.board_theme)
            action.triggered.connect(
                lambda _checked=False, n=name: self._on_theme_selected(n)
            )
            self._theme_group.addAction(action)
            self._menu_theme.addAction(action)
            self._theme_actions[name] = action

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.field_clicked.connect(self._on_field_clicked)
        self._new_game_button.clicked.connect(self.new_game)

    def _connect_game_events(self) -> None:
        """Subscribe to GameController callbacks (idempotent)."""
        events = self._controller.events
        self._replace_callback(events.on_move, self._on_game_move)
        self._replace_callback(events.on_player_mated, self._on_player_mated)
        self._replace_callback(events.on_game_over, self._on_game_over)
        self._replace_callback(events.on_phase_changed, self._on_phase_changed)
        self._replace_callback(
            events.on_selection_changed, self._on_selection_changed
        )

    def _disconnect_game_events(self) -> None:
        """Detach this window from GameController callbacks."""
        events = self._controller.events
        self._remove_callback(events.on_move, self._on_game_move)
        self._remove_callback(events.on_player_mated, self._on_player_mated)
        self._remove_callback(events.on_game_over, self._on_game_over)
        self._remove_callback(events.on_phase_changed, self._on_phase_changed)
        self._remove_callback(
            events.on_selection_changed, self._on_selection_changed
        )

    @staticmethod
    def _replace_callback(
        callbacks: list[TCallback],
        callback: TCallback,
    ) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    @staticmethod
    def _remove_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    def new_game(
        self,
        placement: str | None = None,
        to_move: Player = Player.RED,
    ) -> None:
        """Start a fresh game, optionally from a placement string."""
        # QAction.triggered passes a bool
        if not isinstance(placement, str):
            placement = None
        self._move_list.clear()
        self._controller.new_game(placement, to_move)
        self._board_view.board_scene.set_interactive(True)
        self._refresh_board()
        self._update_status()

    # ── Game event handlers ──────────────────────────────────────────────

    def _on_field_clicked(self, name: str) -> None:
        self._controller.select_or_move(name)

    def _on_selection_changed(self, coord: Coord | None) -> None:
        destinations = (
            self._controller.legal_destinations(coord) if coord is not None else []
        )
        self._board_view.board_scene.set_selection(coord, destinations)

    def _on_game_move(self, record: MoveRecord, state: GameState) -> None:
        text = f"{state.ply_count}. {_player_name(record.player)} {record.move}"
        if record.captured is not None:
            text += f" x{record.captured}"
        self._move_list.addItem(text)
        self._move_list.scrollToBottom()
        self._refresh_board()
        self._update_status()

    def _on_player_mated(self, player: Player) -> None:
        self._status_label.setText(f"{_player_name(player)} is mated")
        self._update_status()

    def _on_game_over(self, winner: Player) -> None:
        self._board_view.board_scene.set_interactive(False)
        self._status_label.setText(f"Game over: {_player_name(winner)} wins")
        self._update_status()

    def _on_phase_changed(self, phase: GamePhase) -> None:
        _LOGGER.debug("Phase changed to %s", phase.name)

    # ── Settings ─────────────────────────────────────────────────────────

    def _apply_settings(self) -> None:
        apply_board_settings(self._board_view.board_scene, self._settings)

    def _on_toggle_coordinates(self, checked: bool) -> None:
        self._settings.show_coordinates = checked
        self._apply_settings()

    def _on_toggle_legal_moves(self, checked: bool) -> None:
        self._settings.show_legal_moves = checked
        self._apply_settings()

    def _on_theme_selected(self, name: str) -> None:
        self._settings.board_theme = name
        self._apply_settings()

    # ── Display helpers ──────────────────────────────────────────────────

    def _refresh_board(self) -> None:
        state = self._controller.state
        scene = self._board_view.board_scene
        scene.set_board(state.board)
        scene.set_selection(None, [])
        checked: list[Coord] = []
        for player in Player:
            king = state.board.king_coord(player)
            if king is not None and state.is_check(player):
                checked.append(king)
        scene.set_check(checked)

    def _update_status(self) -> None:
        ctrl = self._controller
        state = ctrl.state
        if ctrl.winner is not None:
            self._turn_label.setText(f"{_player_name(ctrl.winner)} wins")
        else:
            self._turn_label.setText(f"{_player_name(ctrl.current_player)} to move")

        lines = []
        for player in Player:
            if ctrl.mate_flag(player):
                status = "mated"
            elif state.is_check(player):
                status = "in check"
            else:
                status = "playing"
            lines.append(f"{_player_name(player)}: {status}")
        self._players_label.setText("\n".join(lines))

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._disconnect_game_events()
        super().closeEvent(event)
