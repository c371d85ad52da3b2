"""Tests for MainWindow wiring between the controller and the board."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Player
from checkie.core.stone import Stone
from checkie.core.types import Position
from checkie.game.payload import StonePayload
from checkie.game.settings import GameSettings
from checkie.ui.main_window import MainWindow


def test_starts_with_default_game() -> None:
    window = MainWindow()
    assert window._controller.board == Board.initial()
    assert "Player A to move" in window._status_label.text()
    assert window._move_list.count() == 0


def test_move_updates_list_and_status() -> None:
    window = MainWindow()
    scene = window._board_view.board_scene
    assert scene._commit(StonePayload(Position(2, 1)).encode(), Position(3, 0))

    assert window._move_list.count() == 1
    item = window._move_list.item(0)
    assert item is not None
    assert item.text() == "1. Player A: (2,1)-(3,0)"
    assert "Player B to move" in window._status_label.text()


def test_new_game_applies_game_settings() -> None:
    window = MainWindow()
    window._settings.game = GameSettings(board_size=10, first_player=Player.PLAYER_B)
    window._act_new_game.trigger()

    assert window._controller.board.size == 10
    assert window._board_view.board_scene.board_size == 10
    assert "Player B to move" in window._status_label.text()


def test_new_game_clears_move_list() -> None:
    window = MainWindow()
    window._controller.commit_move((2, 1), (3, 0))
    assert window._move_list.count() == 1
    window._act_new_game.trigger()
    assert window._move_list.count() == 0


def test_game_over_disables_board() -> None:
    window = MainWindow()
    board = Board()
    board[(2, 3)] = Stone(Player.PLAYER_A)
    board[(3, 4)] = Stone(Player.PLAYER_B)
    window._controller.new_game(board=board)

    assert window._controller.commit_move((2, 3), (4, 5))

    assert "Player A wins" in window._status_label.text()
    assert window._board_view.board_scene._interactive is False


def test_flip_action_toggles_orientation() -> None:
    window = MainWindow()
    scene = window._board_view.board_scene
    assert not scene.is_flipped()
    window._act_flip.trigger()
    assert scene.is_flipped()


def test_apply_settings_updates_scene() -> None:
    window = MainWindow()
    window._settings.show_drop_zones = False
    window._settings.board_theme = "Blue"
    window._apply_settings()
    scene = window._board_view.board_scene
    assert scene._show_drop_zones is False
