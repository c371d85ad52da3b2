"""Move execution: apply a chosen destination to the board."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from checkie.core.board import Board
from checkie.core.drop_zones import drop_nodes
from checkie.core.enums import Player
from checkie.core.errors import CheckersError, IllegalDestinationError, NoSuchStoneError
from checkie.core.move_table import TurnMoveTable
from checkie.core.move_tree import MoveTree, MoveTreeNode
from checkie.core.types import Position, require_in_bounds

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommitResult:
    """What a committed move did to the board."""

    board: Board
    player: Player
    origin: Position
    destination: Position
    path: tuple[Position, ...]
    captured: tuple[Position, ...]
    promoted: bool


def find_path(tree: MoveTree, destination: tuple[int, int]) -> MoveTreeNode | None:
    """Stopping node whose landing is *destination*.

    When several chains end on the same square the one with the most
    captures wins, ties going to the first generated.
    """
    best: MoveTreeNode | None = None
    best_captures = -1
    for node in drop_nodes(tree):
        if node.landing != destination:
            continue
        n_captures = len(node.captured_along())
        if n_captures > best_captures:
            best, best_captures = node, n_captures
    return best


def execute(
    board: Board,
    table: TurnMoveTable,
    selected: tuple[int, int],
    destination: tuple[int, int],
) -> CommitResult:
    """Validate and apply a move; see :func:`commit`."""
    origin = require_in_bounds(selected, board.size)
    target = require_in_bounds(destination, board.size)

    if table.player is not board.player_on_turn:
        raise CheckersError(
            f"Move table belongs to player {table.player}, "
            f"but player {board.player_on_turn} is on turn"
        )

    tree = table.tree_for(origin)
    if tree is None:
        raise NoSuchStoneError(origin)
    if target not in table.drop_zones_for(origin):
        raise IllegalDestinationError(origin, target)

    leaf = find_path(tree, target)
    if leaf is None:  # pragma: no cover - drop zones are derived from the same nodes
        raise IllegalDestinationError(origin, target)

    # Validation is complete; everything below must succeed.
    captured = tuple(leaf.captured_along())
    path = tuple(node.landing for node in leaf.path())
    for pos in captured:
        board.remove(pos)
    stone = board.move_stone(origin, target)

    mover = stone.owner
    promoted = False
    if not stone.is_king and target.row == mover.promotion_row(board.size):
        stone.promote()
        promoted = True

    board.player_on_turn = mover.opposite

    _LOGGER.debug(
        "Player %s moved %s -> %s, captured %d%s",
        mover,
        origin,
        target,
        len(captured),
        " (promoted)" if promoted else "",
    )
    return CommitResult(
        board=board,
        player=mover,
        origin=origin,
        destination=target,
        path=path,
        captured=captured,
        promoted=promoted,
    )


def commit(
    board: Board,
    table: TurnMoveTable,
    selected: tuple[int, int],
    destination: tuple[int, int],
) -> Board:
    """Move the stone on *selected* to *destination* and pass the turn.

    Removes every stone captured along the chosen path, promotes on the
    mover's farthest row and switches ``board.player_on_turn``. The caller
    refreshes *table* afterwards.

    Raises:
        BoundsError: A coordinate is off the board.
        NoSuchStoneError: *selected* has no legal move this turn.
        IllegalDestinationError: *destination* is not one of its drop zones.

    A rejected commit leaves *board* untouched.
    """
    return execute(board, table, selected, destination).board
