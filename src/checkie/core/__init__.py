"""Core domain layer — pure checkers logic with zero external dependencies.

Quick start::

    from checkie.core import Board, TurnMoveTable, commit

    board = Board.initial()
    table = TurnMoveTable.recompute(board)
    print(table.drop_zones_for((2, 1)))
    commit(board, table, (2, 1), (3, 0))
    table.refresh(board)
"""

from checkie.core.board import Board
from checkie.core.drop_zones import drop_nodes, drop_zones, has_capture, max_captures
from checkie.core.enums import GameResult, Player
from checkie.core.errors import (
    BoundsError,
    CheckersError,
    IllegalDestinationError,
    NoSuchStoneError,
    NotAStoneError,
)
from checkie.core.executor import CommitResult, commit, execute, find_path
from checkie.core.move_generator import MoveGenerator, generate
from checkie.core.move_table import DropZoneCache, TurnMoveTable
from checkie.core.move_tree import MoveTree, MoveTreeNode
from checkie.core.rules import DEFAULT_RULES, GameRules
from checkie.core.stone import Stone
from checkie.core.types import (
    BOARD_SIZES,
    DEFAULT_BOARD_SIZE,
    Position,
    is_playable,
    parse_position_key,
    position_key,
)

__all__ = [
    # Enums
    "GameResult",
    "Player",
    # Types / helpers
    "BOARD_SIZES",
    "DEFAULT_BOARD_SIZE",
    "Position",
    "is_playable",
    "parse_position_key",
    "position_key",
    # Errors
    "BoundsError",
    "CheckersError",
    "IllegalDestinationError",
    "NoSuchStoneError",
    "NotAStoneError",
    # Domain objects
    "Board",
    "DEFAULT_RULES",
    "GameRules",
    "MoveTree",
    "MoveTreeNode",
    "Stone",
    # Engine
    "CommitResult",
    "DropZoneCache",
    "MoveGenerator",
    "TurnMoveTable",
    "commit",
    "drop_nodes",
    "drop_zones",
    "execute",
    "find_path",
    "generate",
    "has_capture",
    "max_captures",
]
