"""Turn move table — every movable stone of the side on turn, plus drop-zone memo."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from checkie.core.board import Board
from checkie.core.drop_zones import drop_zones, has_capture, max_captures
from checkie.core.enums import Player
from checkie.core.move_generator import MoveGenerator
from checkie.core.move_tree import MoveTree
from checkie.core.rules import DEFAULT_RULES, GameRules
from checkie.core.types import Position, parse_position_key, position_key

_LOGGER = logging.getLogger(__name__)


class DropZoneCache:
    """Memo of drop zones keyed by stringified position.

    Valid for a single turn only; the owner calls :meth:`invalidate` on
    every turn switch.
    """

    __slots__ = ("_entries", "hits", "misses")

    def __init__(self) -> None:
        self._entries: dict[str, tuple[Position, ...]] = {}
        self.hits = 0
        self.misses = 0

    def get_or_compute(
        self, key: str, tree: MoveTree, min_captures: int = 0
    ) -> tuple[Position, ...]:
        zones = self._entries.get(key)
        if zones is not None:
            self.hits += 1
            return zones
        self.misses += 1
        zones = drop_zones(tree, min_captures)
        self._entries[key] = zones
        return zones

    def invalidate(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class TurnMoveTable(Mapping[str, MoveTree]):
    """Read-only mapping ``position key → MoveTree`` for the side on turn.

    A stone is movable this turn iff its key is present. :meth:`refresh`
    recomputes the table in place after a committed move and invalidates
    the drop-zone cache exactly once.

    Under mandatory capture only the stones able to make the longest chain
    on the side are kept, and their drop zones are limited to chains of
    that length.
    """

    __slots__ = ("_rules", "_player", "_trees", "_cache", "_min_captures")

    def __init__(self, rules: GameRules = DEFAULT_RULES) -> None:
        self._rules = rules
        self._player = Player.PLAYER_A
        self._trees: dict[str, MoveTree] = {}
        self._cache = DropZoneCache()
        self._min_captures = 0

    @classmethod
    def recompute(cls, board: Board, rules: GameRules = DEFAULT_RULES) -> TurnMoveTable:
        """Fresh table for ``board.player_on_turn``."""
        table = cls(rules)
        table.refresh(board)
        return table

    # -- Mapping protocol ---------------------------------------------------

    def __getitem__(self, key: str) -> MoveTree:
        return self._trees[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._trees)

    def __len__(self) -> int:
        return len(self._trees)

    # -- Queries ------------------------------------------------------------

    @property
    def player(self) -> Player:
        return self._player

    @property
    def rules(self) -> GameRules:
        return self._rules

    @property
    def cache(self) -> DropZoneCache:
        return self._cache

    @property
    def min_captures(self) -> int:
        """Captures every move must make this turn (0 unless capturing is forced)."""
        return self._min_captures

    def tree_for(self, position: tuple[int, int]) -> MoveTree | None:
        return self._trees.get(position_key(position))

    def is_movable(self, position: tuple[int, int]) -> bool:
        return position_key(position) in self._trees

    def movable_positions(self) -> list[Position]:
        return sorted(parse_position_key(key) for key in self._trees)

    def has_captures(self) -> bool:
        return any(has_capture(tree) for tree in self._trees.values())

    def drop_zones_for(self, position: tuple[int, int]) -> tuple[Position, ...]:
        """Memoized drop zones; empty for stones that cannot move."""
        key = position_key(position)
        tree = self._trees.get(key)
        if tree is None:
            return ()
        return self._cache.get_or_compute(key, tree, self._min_captures)

    # -- Recompute ----------------------------------------------------------

    def refresh(self, board: Board) -> None:
        gen = MoveGenerator(board, self._rules)
        player = board.player_on_turn
        trees: dict[str, MoveTree] = {}
        for pos in board.stones_of(player):
            tree = gen.generate(pos)
            if tree.root.children:
                trees[position_key(pos)] = tree

        min_captures = 0
        if self._rules.mandatory_capture:
            longest = {key: max_captures(tree) for key, tree in trees.items()}
            min_captures = max(longest.values(), default=0)
            if min_captures:
                trees = {
                    key: tree for key, tree in trees.items() if longest[key] == min_captures
                }

        self._player = player
        self._trees = trees
        self._min_captures = min_captures
        self._cache.invalidate()
        _LOGGER.debug(
            "Move table for player %s: %d movable stone(s)", player, len(trees)
        )
