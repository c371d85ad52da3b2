"""Tests for settings dialog widgets and apply pipeline."""

from __future__ import annotations

from checkie.core.enums import Player
from checkie.ui.dialogs.settings_dialog import (
    AppSettings,
    SettingsDialog,
    _BoardPage,
    _GamePage,
)


def test_dialog_accept_applies_board_page() -> None:
    settings = AppSettings()
    dialog = SettingsDialog(settings)

    board_page = next(page for page in dialog._pages if isinstance(page, _BoardPage))
    board_page._theme_combo.setCurrentText("Blue")
    board_page._drop_zones_check.setChecked(False)

    dialog._on_accept()

    assert settings.board_theme == "Blue"
    assert settings.show_drop_zones is False


def test_dialog_accept_applies_game_page() -> None:
    settings = AppSettings()
    dialog = SettingsDialog(settings)

    game_page = next(page for page in dialog._pages if isinstance(page, _GamePage))
    game_page._size_combo.setCurrentIndex(game_page._size_combo.findData(10))
    game_page._first_combo.setCurrentIndex(
        game_page._first_combo.findData(int(Player.PLAYER_B))
    )
    game_page._mandatory_check.setChecked(True)
    game_page._flying_check.setChecked(True)
    game_page._backwards_check.setChecked(False)
    game_page._move_back_check.setChecked(True)

    dialog._on_accept()

    assert settings.game.board_size == 10
    assert settings.game.first_player is Player.PLAYER_B
    assert settings.game.rules.mandatory_capture
    assert settings.game.rules.flying_king
    assert not settings.game.rules.men_capture_backwards
    assert settings.game.rules.men_move_backwards


def test_game_page_reflects_current_settings() -> None:
    settings = AppSettings()
    settings.game = settings.game.with_rules(flying_king=True)
    page = _GamePage(settings)
    assert page._flying_check.isChecked()
    assert not page._move_back_check.isChecked()
    assert page._size_combo.currentData() == 8


def test_sidebar_matches_pages() -> None:
    dialog = SettingsDialog(AppSettings())
    assert dialog._sidebar.count() == len(dialog._pages) == 2
    dialog._sidebar.setCurrentRow(1)
    assert dialog._stack.currentIndex() == 1


def test_cancel_keeps_settings() -> None:
    settings = AppSettings()
    dialog = SettingsDialog(settings)
    board_page = next(page for page in dialog._pages if isinstance(page, _BoardPage))
    board_page._theme_combo.setCurrentText("Walnut")
    dialog.reject()
    assert settings.board_theme == "Classic"
