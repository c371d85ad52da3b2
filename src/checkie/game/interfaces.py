"""Abstract interfaces for the game layer.

Collaborators (the board UI, tests) depend on :class:`IGameController`
rather than on the concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from checkie.core.move_tree import MoveTree
    from checkie.core.types import Position
    from checkie.game.payload import DropPayload
    from checkie.game.settings import GameSettings


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, settings: GameSettings | None = None) -> None:
        """Set up a new game."""

    @property
    @abstractmethod
    def current_player_move_trees(self) -> Mapping[str, MoveTree]:
        """Move trees of every movable stone of the player on turn."""

    @property
    @abstractmethod
    def selected_position(self) -> Position | None:
        """The stone currently picked up, if any."""

    @abstractmethod
    def select(self, position: tuple[int, int]) -> bool:
        """Pick up a stone. Returns True if it can move this turn."""

    @abstractmethod
    def deselect(self) -> None:
        """Drop the current selection without moving."""

    @abstractmethod
    def drop_zones_for(self, position: tuple[int, int]) -> tuple[Position, ...]:
        """Squares the stone on *position* may be dropped on this turn."""

    @abstractmethod
    def commit_move(
        self, selected: tuple[int, int], destination: tuple[int, int]
    ) -> bool:
        """Commit a move. Returns True if legal and applied."""

    @abstractmethod
    def handle_drop(self, payload: DropPayload, destination: tuple[int, int]) -> bool:
        """Commit a drag-and-drop whose payload was already validated."""
