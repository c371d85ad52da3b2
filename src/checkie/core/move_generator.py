"""Move-tree generation for a single stone.

Generation is read-only against the real board. Within a capture chain the
generator works on a logical view in which the moving stone has left its
origin and every stone captured earlier on the current path is gone: such
squares are neither capture targets nor obstacles.
"""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.errors import NotAStoneError
from checkie.core.move_tree import ROOT, MoveTree
from checkie.core.rules import DEFAULT_RULES, GameRules
from checkie.core.stone import Stone
from checkie.core.types import DIAGONALS, Position, require_in_bounds


class MoveGenerator:
    """Builds :class:`MoveTree` objects for stones on a :class:`Board`."""

    __slots__ = ("_board", "_rules")

    def __init__(self, board: Board, rules: GameRules = DEFAULT_RULES) -> None:
        self._board = board
        self._rules = rules

    # -- Public API ---------------------------------------------------------

    def generate(self, position: tuple[int, int]) -> MoveTree:
        """Full tree of legal continuations for the stone on *position*.

        Raises:
            BoundsError: *position* is off the board.
            NotAStoneError: *position* is empty.
        """
        origin = require_in_bounds(position, self._board.size)
        stone = self._board[origin]
        if stone is None:
            raise NotAStoneError(origin)

        tree = MoveTree(origin)
        self._gen_simple(tree, origin, stone)
        self._gen_captures(tree, ROOT, origin, stone, origin, frozenset())
        return tree

    # -- Simple steps (root only) -------------------------------------------

    def _gen_simple(self, tree: MoveTree, origin: Position, stone: Stone) -> None:
        board = self._board
        for d_row, d_col in self._step_directions(stone):
            target = origin.step(d_row, d_col)
            while board.is_empty(target):
                tree.add(ROOT, target, None)
                if not (stone.is_king and self._rules.flying_king):
                    break
                target = target.step(d_row, d_col)

    # -- Captures -----------------------------------------------------------

    def _gen_captures(
        self,
        tree: MoveTree,
        parent: int,
        at: Position,
        stone: Stone,
        origin: Position,
        captured: frozenset[Position],
    ) -> None:
        flying = stone.is_king and self._rules.flying_king
        for d_row, d_col in self._capture_directions(stone):
            victim = at.step(d_row, d_col)
            if flying:
                while self._is_free(victim, origin, captured):
                    victim = victim.step(d_row, d_col)
            if not self._is_opponent(victim, stone, captured):
                continue

            landing = victim.step(d_row, d_col)
            chain_captured = captured | {victim}
            while self._is_free(landing, origin, captured):
                child = tree.add(parent, landing, victim)
                self._gen_captures(tree, child, landing, stone, origin, chain_captured)
                if not flying:
                    break
                landing = landing.step(d_row, d_col)

    # -- Helpers ------------------------------------------------------------

    def _step_directions(self, stone: Stone) -> tuple[tuple[int, int], ...]:
        if stone.is_king or self._rules.men_move_backwards:
            return DIAGONALS
        return _forward_diagonals(stone)

    def _capture_directions(self, stone: Stone) -> tuple[tuple[int, int], ...]:
        if stone.is_king or self._rules.men_capture_backwards:
            return DIAGONALS
        return _forward_diagonals(stone)

    def _is_free(
        self,
        sq: Position,
        origin: Position,
        captured: frozenset[Position],
    ) -> bool:
        if not self._board.in_bounds(sq):
            return False
        if sq == origin or sq in captured:
            return True
        return self._board.is_empty(sq)

    def _is_opponent(
        self,
        sq: Position,
        stone: Stone,
        captured: frozenset[Position],
    ) -> bool:
        if sq in captured:
            return False
        target = self._board[sq]
        return target is not None and target.owner is not stone.owner


def _forward_diagonals(stone: Stone) -> tuple[tuple[int, int], ...]:
    forward = stone.owner.forward
    return tuple(d for d in DIAGONALS if d[0] == forward)


def generate(
    board: Board,
    position: tuple[int, int],
    rules: GameRules = DEFAULT_RULES,
) -> MoveTree:
    """Functional shortcut for ``MoveGenerator(board, rules).generate(position)``."""
    return MoveGenerator(board, rules).generate(position)
