"""Tests for GameState and MoveRecord."""

import pytest

from checkie.core.board import Board
from checkie.core.enums import GameResult, Player
from checkie.core.errors import IllegalDestinationError, NoSuchStoneError
from checkie.core.stone import Stone
from checkie.core.types import Position
from checkie.game.interfaces import GamePhase
from checkie.game.settings import GameSettings
from checkie.game.state import GameState, MoveRecord


def _fresh(settings: GameSettings | None = None, board: Board | None = None) -> GameState:
    state = GameState()
    state.setup(settings, board)
    return state


class TestSetup:
    def test_defaults(self) -> None:
        state = _fresh()
        assert state.phase == GamePhase.AWAITING_MOVE
        assert state.result == GameResult.IN_PROGRESS
        assert state.ply_count == 0
        assert state.winner is None
        assert state.move_table.player is Player.PLAYER_A

    def test_unstarted_state(self) -> None:
        assert GameState().phase == GamePhase.NOT_STARTED

    def test_custom_board_is_used(self) -> None:
        board = Board(player_on_turn=Player.PLAYER_B)
        board[(5, 2)] = Stone(Player.PLAYER_B)
        board[(2, 1)] = Stone(Player.PLAYER_A)
        state = _fresh(board=board)
        assert state.board is board
        assert state.player_on_turn is Player.PLAYER_B

    def test_rules_reach_move_table(self) -> None:
        settings = GameSettings().with_rules(mandatory_capture=True)
        state = _fresh(settings)
        assert state.move_table.rules.mandatory_capture

    def test_setup_resets_history(self) -> None:
        state = _fresh()
        state.apply_move((2, 1), (3, 0))
        state.setup()
        assert state.move_history == []
        assert state.board == Board.initial()


class TestApplyMove:
    def test_records_simple_move(self) -> None:
        state = _fresh()
        record = state.apply_move((2, 1), (3, 0))
        assert record == MoveRecord(
            player=Player.PLAYER_A,
            origin=Position(2, 1),
            destination=Position(3, 0),
            path=(Position(3, 0),),
        )
        assert not record.was_capture
        assert state.move_history == [record]
        assert state.player_on_turn is Player.PLAYER_B

    def test_records_capture_chain(self) -> None:
        board = Board()
        board[(2, 3)] = Stone(Player.PLAYER_A)
        board[(3, 4)] = Stone(Player.PLAYER_B)
        board[(5, 6)] = Stone(Player.PLAYER_B)
        board[(7, 0)] = Stone(Player.PLAYER_B)
        state = _fresh(board=board)
        record = state.apply_move((2, 3), (6, 7))
        assert record.was_capture
        assert record.captured == (Position(3, 4), Position(5, 6))
        assert str(record) == "(2,3)x(4,5)x(6,7)"

    def test_engine_errors_propagate_without_side_effects(self) -> None:
        state = _fresh()
        before = state.board.copy()
        with pytest.raises(IllegalDestinationError):
            state.apply_move((2, 1), (5, 4))
        with pytest.raises(NoSuchStoneError):
            state.apply_move((0, 1), (1, 0))
        assert state.board == before
        assert state.ply_count == 0

    def test_side_without_moves_loses(self) -> None:
        board = Board()
        board[(2, 3)] = Stone(Player.PLAYER_A)
        board[(3, 4)] = Stone(Player.PLAYER_B)
        state = _fresh(board=board)
        state.apply_move((2, 3), (4, 5))
        assert state.is_game_over
        assert state.result == GameResult.PLAYER_A_WINS
        assert state.winner is Player.PLAYER_A

    def test_promotion_recorded(self) -> None:
        board = Board()
        board[(6, 1)] = Stone(Player.PLAYER_A)
        board[(1, 0)] = Stone(Player.PLAYER_B)
        state = _fresh(board=board)
        record = state.apply_move((6, 1), (7, 0))
        assert record.promoted
        assert state.board[(7, 0)].is_king
