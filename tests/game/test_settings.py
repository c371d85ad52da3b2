"""Tests for GameSettings."""

import pytest

from checkie.core.enums import Player
from checkie.core.rules import GameRules
from checkie.game.settings import GameSettings


def test_defaults_are_valid() -> None:
    settings = GameSettings()
    settings.validate()
    assert settings.board_size == 8
    assert settings.first_player is Player.PLAYER_A
    assert settings.rules == GameRules()


@pytest.mark.parametrize("size", [8, 10, 12])
def test_supported_sizes(size: int) -> None:
    GameSettings(board_size=size).validate()


@pytest.mark.parametrize("size", [6, 9, 14])
def test_unsupported_size(size: int) -> None:
    with pytest.raises(ValueError, match="board size"):
        GameSettings(board_size=size).validate()


def test_invalid_first_player() -> None:
    with pytest.raises(ValueError):
        GameSettings(first_player=2).validate()  # type: ignore[arg-type]


def test_with_rules_copies() -> None:
    base = GameSettings(board_size=10)
    changed = base.with_rules(flying_king=True)
    assert changed.rules.flying_king
    assert changed.board_size == 10
    assert not base.rules.flying_king


def test_backward_steps_are_off_by_default() -> None:
    rules = GameSettings().rules
    assert not rules.men_move_backwards
    assert rules.men_capture_backwards
    assert GameSettings().with_rules(men_move_backwards=True).rules.men_move_backwards
