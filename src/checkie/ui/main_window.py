"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QMainWindow,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from checkie.core.enums import GameResult, Player
from checkie.game.controller import GameController
from checkie.game.state import GameState, MoveRecord
from checkie.ui.board.board_view import BoardView
from checkie.ui.dialogs.settings_dialog import AppSettings, SettingsDialog
from checkie.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

_PLAYER_NAMES = {Player.PLAYER_A: "Player A", Player.PLAYER_B: "Player B"}


class MainWindow(QMainWindow):
    """Main application window for Checkie."""

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Checkie")
        self.setMinimumSize(760, 560)
        self.resize(960, 700)

        self._controller = GameController()
        self._settings = AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_game_events()

        self._start_new_game()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_view = BoardView(self._controller)
        root.addWidget(self._board_view, stretch=3)

        right = QVBoxLayout()
        right.setSpacing(6)

        self._score_label = QLabel()
        right.addWidget(self._score_label)

        self._move_list = QListWidget()
        right.addWidget(self._move_list, stretch=1)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(240)
        root.addWidget(right_widget)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("&New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._start_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._act_flip = QAction("&Flip Board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_game.addAction(self._act_flip)

        self._act_deselect = QAction("&Deselect", self)
        self._act_deselect.setShortcut(QKeySequence("Esc"))
        self._act_deselect.triggered.connect(self._on_deselect)
        self._menu_game.addAction(self._act_deselect)

        self._menu_game.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        self._menu_settings = menu_bar.addMenu("&Settings")
        assert self._menu_settings is not None

        self._act_settings = QAction("&Settings...", self)
        self._act_settings.setShortcut("Ctrl+,")
        self._act_settings.setMenuRole(QAction.MenuRole.NoRole)
        self._act_settings.triggered.connect(self._on_settings)
        self._menu_settings.addAction(self._act_settings)

    def _connect_game_events(self) -> None:
        events = self._controller.events
        events.on_move.append(self._on_game_move)
        events.on_game_over.append(self._on_game_over)

    # ── Actions ──────────────────────────────────────────────────────────

    def _start_new_game(self) -> None:
        self._controller.new_game(self._settings.game)
        self._move_list.clear()
        self._update_labels()

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    def _on_deselect(self) -> None:
        self._controller.deselect()

    def _on_settings(self) -> None:
        dlg = SettingsDialog(self._settings, self)
        if dlg.exec():
            self._apply_settings()

    def _apply_settings(self) -> None:
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.by_name(self._settings.board_theme))
        scene.set_show_drop_zones(self._settings.show_drop_zones)

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_game_move(self, record: MoveRecord, state: GameState) -> None:
        self._move_list.addItem(f"{state.ply_count}. {_PLAYER_NAMES[record.player]}: {record}")
        self._move_list.scrollToBottom()
        self._update_labels()

    def _on_game_over(self, result: GameResult) -> None:
        _LOGGER.info("Game over: %s", result.name)
        self._update_labels()

    def _update_labels(self) -> None:
        state = self._controller.state
        board = state.board
        self._score_label.setText(
            f"{_PLAYER_NAMES[Player.PLAYER_A]}: {board.count(Player.PLAYER_A)} stones\n"
            f"{_PLAYER_NAMES[Player.PLAYER_B]}: {board.count(Player.PLAYER_B)} stones"
        )
        winner = state.winner
        if winner is not None:
            self._status_label.setText(f"{_PLAYER_NAMES[winner]} wins")
        else:
            self._status_label.setText(f"{_PLAYER_NAMES[state.player_on_turn]} to move")
