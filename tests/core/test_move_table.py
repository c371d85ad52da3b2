"""Tests for the per-turn move table and its drop-zone cache."""

import logging

import pytest

from checkie.core.board import Board
from checkie.core.enums import Player
from checkie.core.errors import NoSuchStoneError
from checkie.core.executor import commit
from checkie.core.move_table import DropZoneCache, TurnMoveTable
from checkie.core.move_tree import MoveTree
from checkie.core.rules import GameRules
from checkie.core.stone import Stone
from checkie.core.types import Position, position_key


def _capture_board() -> Board:
    board = Board()
    board[(2, 3)] = Stone(Player.PLAYER_A)
    board[(2, 7)] = Stone(Player.PLAYER_A)
    board[(3, 4)] = Stone(Player.PLAYER_B)
    board[(6, 1)] = Stone(Player.PLAYER_B)
    return board


def _longest_chain_board() -> Board:
    # (2,3) can take two stones, (4,1) only one.
    board = Board()
    board[(2, 3)] = Stone(Player.PLAYER_A)
    board[(4, 1)] = Stone(Player.PLAYER_A)
    board[(3, 4)] = Stone(Player.PLAYER_B)
    board[(5, 6)] = Stone(Player.PLAYER_B)
    board[(5, 2)] = Stone(Player.PLAYER_B)
    return board


class TestRecompute:
    def test_opening_movable_stones(self) -> None:
        table = TurnMoveTable.recompute(Board.initial())
        assert table.player is Player.PLAYER_A
        assert table.movable_positions() == [
            Position(2, 1),
            Position(2, 3),
            Position(2, 5),
            Position(2, 7),
        ]
        assert len(table) == 4

    def test_keys_are_position_strings(self) -> None:
        table = TurnMoveTable.recompute(Board.initial())
        assert "2,1" in table
        assert isinstance(table["2,1"], MoveTree)
        assert "0,1" not in table

    def test_stone_without_moves_is_absent(self) -> None:
        table = TurnMoveTable.recompute(Board.initial())
        assert not table.is_movable((0, 1))
        assert table.tree_for((0, 1)) is None
        assert table.drop_zones_for((0, 1)) == ()

    def test_only_player_on_turn(self) -> None:
        board = Board.initial(first_player=Player.PLAYER_B)
        table = TurnMoveTable.recompute(board)
        assert table.player is Player.PLAYER_B
        assert all(p.row == 5 for p in table.movable_positions())

    def test_capture_is_not_mandatory_across_stones_by_default(self) -> None:
        table = TurnMoveTable.recompute(_capture_board())
        assert table.has_captures()
        assert table.is_movable((2, 7))
        assert table.drop_zones_for((2, 3)) == (Position(4, 5),)

    def test_mandatory_capture_restricts_side(self) -> None:
        table = TurnMoveTable.recompute(_capture_board(), GameRules(mandatory_capture=True))
        assert table.movable_positions() == [Position(2, 3)]

    def test_mandatory_capture_without_captures_keeps_everything(self) -> None:
        table = TurnMoveTable.recompute(Board.initial(), GameRules(mandatory_capture=True))
        assert len(table) == 4

    def test_mandatory_capture_requires_longest_chain(self) -> None:
        board = _longest_chain_board()
        table = TurnMoveTable.recompute(board, GameRules(mandatory_capture=True))
        assert list(table) == ["2,3"]
        assert table.min_captures == 2
        assert table.drop_zones_for((2, 3)) == (Position(6, 7),)

    def test_shorter_chain_is_kept_without_mandatory_capture(self) -> None:
        table = TurnMoveTable.recompute(_longest_chain_board())
        assert sorted(table) == ["2,3", "4,1"]
        assert table.min_captures == 0
        assert table.drop_zones_for((4, 1)) == (Position(6, 3),)

    def test_mandatory_capture_drops_short_branch_of_same_stone(self) -> None:
        board = Board()
        board[(2, 3)] = Stone(Player.PLAYER_A)
        board[(3, 2)] = Stone(Player.PLAYER_B)
        board[(3, 4)] = Stone(Player.PLAYER_B)
        board[(5, 6)] = Stone(Player.PLAYER_B)
        relaxed = TurnMoveTable.recompute(board)
        strict = TurnMoveTable.recompute(board, GameRules(mandatory_capture=True))
        assert set(relaxed.drop_zones_for((2, 3))) == {Position(4, 1), Position(6, 7)}
        assert strict.drop_zones_for((2, 3)) == (Position(6, 7),)

    def test_short_chain_rejected_under_mandatory_capture(self) -> None:
        board = _longest_chain_board()
        before = board.copy()
        table = TurnMoveTable.recompute(board, GameRules(mandatory_capture=True))
        with pytest.raises(NoSuchStoneError):
            commit(board, table, (4, 1), (6, 3))
        assert board == before
        commit(board, table, (2, 3), (6, 7))
        assert board.count(Player.PLAYER_B) == 1

    def test_refresh_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="checkie.core.move_table"):
            TurnMoveTable.recompute(Board.initial())
        assert "4 movable stone(s)" in caplog.text


class TestDropZoneCache:
    def test_memoized_within_turn(self) -> None:
        table = TurnMoveTable.recompute(Board.initial())
        first = table.drop_zones_for((2, 1))
        second = table.drop_zones_for((2, 1))
        assert first is second
        assert table.cache.misses == 1
        assert table.cache.hits == 1
        assert position_key((2, 1)) in table.cache

    def test_invalidated_on_turn_switch(self) -> None:
        board = Board.initial()
        table = TurnMoveTable.recompute(board)
        table.drop_zones_for((2, 1))
        table.drop_zones_for((2, 3))
        assert len(table.cache) == 2

        commit(board, table, (2, 1), (3, 0))
        table.refresh(board)

        assert len(table.cache) == 0
        assert table.player is Player.PLAYER_B
        assert table.drop_zones_for((5, 0)) == (Position(4, 1),)

    def test_refresh_reflects_new_board(self) -> None:
        board = Board.initial()
        table = TurnMoveTable.recompute(board)
        commit(board, table, (2, 1), (3, 2))
        table.refresh(board)
        commit(board, table, (5, 4), (4, 3))
        table.refresh(board)
        # Player A now has a capture from (3,2) over (4,3).
        assert table.has_captures()
        assert Position(5, 4) in table.drop_zones_for((3, 2))

    def test_cache_direct(self) -> None:
        tree = TurnMoveTable.recompute(Board.initial())["2,1"]
        cache = DropZoneCache()
        cache.get_or_compute("2,1", tree)
        cache.get_or_compute("2,1", tree)
        assert (cache.hits, cache.misses) == (1, 1)
        cache.invalidate()
        assert "2,1" not in cache
