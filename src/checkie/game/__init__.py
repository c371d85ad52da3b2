"""Game management layer — controller, state machine, settings, drop payloads.

Quick start::

    from checkie.game import GameController, GameSettings

    ctrl = GameController()
    ctrl.new_game(GameSettings(board_size=10))
    ctrl.select((3, 0))
    ctrl.commit_move((3, 0), ctrl.drop_zones_for((3, 0))[0])
"""

from checkie.game.controller import GameController, GameEvents
from checkie.game.interfaces import GamePhase, IGameController
from checkie.game.payload import (
    STONE_TAG,
    DropPayload,
    StonePayload,
    parse_drop_payload,
)
from checkie.game.settings import GameSettings
from checkie.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSettings",
    "GameState",
    "MoveRecord",
    # Drag and drop
    "DropPayload",
    "STONE_TAG",
    "StonePayload",
    "parse_drop_payload",
]
