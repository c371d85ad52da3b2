"""SettingsDialog — game and board settings with a category sidebar."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from checkie.core.enums import Player
from checkie.core.types import BOARD_SIZES
from checkie.game.settings import GameSettings
from checkie.ui.styles.theme import THEMES

# ── Settings data class ──────────────────────────────────────────────────────


@dataclass
class AppSettings:
    """All user-configurable settings. Game settings apply to the next new game."""

    # Board
    board_theme: str = "Classic"
    show_drop_zones: bool = True

    # Game
    game: GameSettings = field(default_factory=GameSettings)


_TITLE_STYLE = "font-size: 16px; font-weight: bold; color: #e0e0e0;"
_PLAYER_LABELS = {Player.PLAYER_A: "Player A (top)", Player.PLAYER_B: "Player B (bottom)"}


# ── Individual settings pages ────────────────────────────────────────────────


class _GamePage(QWidget):
    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._form = QFormLayout(self)
        self._form.setSpacing(12)
        self._form.setContentsMargins(16, 16, 16, 16)

        title = QLabel("Game")
        title.setStyleSheet(_TITLE_STYLE)
        self._form.addRow(title)

        game = settings.game

        self._size_combo = QComboBox()
        for size in BOARD_SIZES:
            self._size_combo.addItem(f"{size} x {size}", size)
        self._size_combo.setCurrentIndex(max(0, self._size_combo.findData(game.board_size)))
        self._form.addRow(QLabel("Board size"), self._size_combo)

        self._first_combo = QComboBox()
        for player, label in _PLAYER_LABELS.items():
            self._first_combo.addItem(label, int(player))
        self._first_combo.setCurrentIndex(
            max(0, self._first_combo.findData(int(game.first_player)))
        )
        self._form.addRow(QLabel("First move"), self._first_combo)

        self._mandatory_check = QCheckBox("Capturing the most stones possible is mandatory")
        self._mandatory_check.setChecked(game.rules.mandatory_capture)
        self._form.addRow(self._mandatory_check)

        self._flying_check = QCheckBox("Flying kings")
        self._flying_check.setChecked(game.rules.flying_king)
        self._form.addRow(self._flying_check)

        self._move_back_check = QCheckBox("Men may step backwards")
        self._move_back_check.setChecked(game.rules.men_move_backwards)
        self._form.addRow(self._move_back_check)

        self._backwards_check = QCheckBox("Men may capture backwards")
        self._backwards_check.setChecked(game.rules.men_capture_backwards)
        self._form.addRow(self._backwards_check)

        note = QLabel("Changes take effect when a new game starts.")
        note.setStyleSheet("color: #9a9a9a;")
        self._form.addRow(note)

    def apply(self, settings: AppSettings) -> None:
        game = GameSettings(
            board_size=int(self._size_combo.currentData()),
            first_player=Player(int(self._first_combo.currentData())),
            rules=replace(
                settings.game.rules,
                mandatory_capture=self._mandatory_check.isChecked(),
                flying_king=self._flying_check.isChecked(),
                men_move_backwards=self._move_back_check.isChecked(),
                men_capture_backwards=self._backwards_check.isChecked(),
            ),
        )
        game.validate()
        settings.game = game


class _BoardPage(QWidget):
    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._form = QFormLayout(self)
        self._form.setSpacing(12)
        self._form.setContentsMargins(16, 16, 16, 16)

        title = QLabel("Board")
        title.setStyleSheet(_TITLE_STYLE)
        self._form.addRow(title)

        self._theme_combo = QComboBox()
        self._theme_combo.addItems(list(THEMES))
        self._theme_combo.setCurrentText(settings.board_theme)
        self._theme_combo.setMinimumWidth(220)
        self._form.addRow(QLabel("Theme"), self._theme_combo)

        self._drop_zones_check = QCheckBox("Highlight drop zones")
        self._drop_zones_check.setChecked(settings.show_drop_zones)
        self._form.addRow(self._drop_zones_check)

    def apply(self, settings: AppSettings) -> None:
        settings.board_theme = self._theme_combo.currentText()
        settings.show_drop_zones = self._drop_zones_check.isChecked()


_PAGE_FACTORIES: tuple[tuple[str, type[_GamePage] | type[_BoardPage]], ...] = (
    ("Game", _GamePage),
    ("Board", _BoardPage),
)


# ── Dialog ───────────────────────────────────────────────────────────────────


class SettingsDialog(QDialog):
    """Modal settings dialog with a left category list and stacked pages."""

    def __init__(
        self,
        settings: AppSettings,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumSize(620, 380)
        self.setWindowTitle("Settings")
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._settings = settings
        self._pages: list[_GamePage | _BoardPage] = []

        self._build_ui()

    def _build_ui(self) -> None:
        root = QHBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        self._sidebar = QListWidget()
        self._sidebar.setFixedWidth(150)
        self._sidebar.setStyleSheet(
            "QListWidget { background: #1e1e1e; border: none;"
            "  border-right: 1px solid #3c3c3c; }"
            "QListWidget::item { padding: 10px 14px; color: #c0c0c0; font-size: 13px; }"
            "QListWidget::item:selected { background: #264f78; color: #ffffff; }"
        )

        self._stack = QStackedWidget()
        self._stack.setStyleSheet("background: #2b2b2b;")

        for label, PageClass in _PAGE_FACTORIES:
            item = QListWidgetItem(label)
            item.setTextAlignment(
                Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter
            )
            self._sidebar.addItem(item)

            page = PageClass(self._settings)
            self._pages.append(page)
            self._stack.addWidget(page)

        self._sidebar.setCurrentRow(0)
        self._sidebar.currentRowChanged.connect(self._stack.setCurrentIndex)

        root.addWidget(self._sidebar)

        right = QVBoxLayout()
        right.setContentsMargins(0, 0, 0, 0)
        right.setSpacing(0)
        right.addWidget(self._stack)

        self._btn_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self._btn_box.setContentsMargins(12, 8, 12, 8)
        self._btn_box.accepted.connect(self._on_accept)
        self._btn_box.rejected.connect(self.reject)
        right.addWidget(self._btn_box)

        right_widget = QWidget()
        right_widget.setLayout(right)
        root.addWidget(right_widget)

    def _on_accept(self) -> None:
        for page in self._pages:
            page.apply(self._settings)
        self.accept()
