"""GameController — the central orchestrator of a checkers game.

Coordinates: GameState, TurnMoveTable, selection and drop handling.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import GameResult, Player
from checkie.core.errors import IllegalDestinationError, NoSuchStoneError
from checkie.core.move_tree import MoveTree
from checkie.core.types import Position, require_in_bounds
from checkie.game.interfaces import GamePhase, IGameController
from checkie.game.payload import DropPayload, StonePayload
from checkie.game.settings import GameSettings
from checkie.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]
SelectionCallback = Callable[[Position | None], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: selection, drop zones, commits, turn switches.

    Thread-safety: every method is synchronous and meant to be called from
    the main/UI thread, e.g. directly inside drag and drop handlers.
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def player_on_turn(self) -> Player:
        return self._state.player_on_turn

    @property
    def current_player_move_trees(self) -> Mapping[str, MoveTree]:
        return self._state.move_table

    @property
    def selected_position(self) -> Position | None:
        return self._state.selected

    @selected_position.setter
    def selected_position(self, position: tuple[int, int] | None) -> None:
        if position is None:
            self.deselect()
        else:
            self.select(position)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        settings: GameSettings | None = None,
        board: Board | None = None,
    ) -> None:
        self._state = GameState()
        self._state.setup(settings, board)
        _LOGGER.debug(
            "New %dx%d game, player %s to move",
            self._state.board.size,
            self._state.board.size,
            self._state.player_on_turn,
        )
        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def select(self, position: tuple[int, int]) -> bool:
        if self._state.is_game_over:
            return False
        pos = require_in_bounds(position, self._state.board.size)
        if not self._state.move_table.is_movable(pos):
            self.deselect()
            return False
        if self._state.selected != pos:
            self._state.selected = pos
            self._emit_selection(pos)
        return True

    def deselect(self) -> None:
        if self._state.selected is None:
            return
        self._state.selected = None
        self._emit_selection(None)

    def drop_zones_for(self, position: tuple[int, int]) -> tuple[Position, ...]:
        if self._state.is_game_over:
            return ()
        return self._state.move_table.drop_zones_for(position)

    def commit_move(
        self, selected: tuple[int, int], destination: tuple[int, int]
    ) -> bool:
        if self._state.is_game_over:
            return False
        if self._state.phase != GamePhase.AWAITING_MOVE:
            return False

        had_selection = self._state.selected is not None
        try:
            record = self._state.apply_move(selected, destination)
        except (NoSuchStoneError, IllegalDestinationError) as exc:
            _LOGGER.debug("Rejected move: %s", exc)
            return False

        if had_selection:
            self._emit_selection(None)
        self._emit_move(record)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
        return True

    def handle_drop(self, payload: DropPayload, destination: tuple[int, int]) -> bool:
        if not isinstance(payload, StonePayload):
            return False
        return self.commit_move(payload.position, destination)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_selection(self, position: Position | None) -> None:
        for cb in self.events.on_selection_changed:
            cb(position)
