"""Board - stone placement plus the player on turn."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from checkie.core.enums import Player
from checkie.core.stone import Stone
from checkie.core.types import (
    BOARD_SIZES,
    DEFAULT_BOARD_SIZE,
    Position,
    in_bounds,
    is_playable,
    require_in_bounds,
)


class Board:
    """Mutable N×N board: a partial mapping Position → Stone.

    Only :mod:`checkie.core.executor` mutates a board during play; tests and
    setup code use item assignment directly.
    """

    __slots__ = ("size", "player_on_turn", "_stones")

    def __init__(
        self,
        size: int = DEFAULT_BOARD_SIZE,
        player_on_turn: Player = Player.PLAYER_A,
    ) -> None:
        if size < 4 or size % 2:
            raise ValueError(f"Board size must be an even number >= 4, got {size}")
        self.size = size
        self.player_on_turn = player_on_turn
        self._stones: dict[Position, Stone] = {}

    # -- Element access -----------------------------------------------------

    def __getitem__(self, position: tuple[int, int]) -> Stone | None:
        if not in_bounds(position, self.size):
            return None
        return self._stones.get(Position(*position))

    def __setitem__(self, position: tuple[int, int], stone: Stone | None) -> None:
        pos = require_in_bounds(position, self.size)
        if stone is None:
            self._stones.pop(pos, None)
            return
        if not is_playable(pos):
            raise ValueError(f"Stones may only stand on playable squares, got {pos}")
        self._stones[pos] = stone

    def __contains__(self, position: object) -> bool:
        return position in self._stones

    def __iter__(self) -> Iterator[Position]:
        return iter(sorted(self._stones))

    def __len__(self) -> int:
        return len(self._stones)

    def in_bounds(self, position: tuple[int, int]) -> bool:
        return in_bounds(position, self.size)

    def is_empty(self, position: tuple[int, int]) -> bool:
        return in_bounds(position, self.size) and Position(*position) not in self._stones

    # -- Query helpers ------------------------------------------------------

    def stones_of(self, player: Player) -> list[Position]:
        """Positions of *player*'s stones in row-major order."""
        return sorted(pos for pos, stone in self._stones.items() if stone.owner is player)

    def count(self, player: Player) -> int:
        return sum(1 for stone in self._stones.values() if stone.owner is player)

    def items(self) -> list[tuple[Position, Stone]]:
        return sorted(self._stones.items())

    # -- Mutation / copying -------------------------------------------------

    def move_stone(self, origin: Position, destination: Position) -> Stone:
        stone = self._stones.pop(origin)
        self._stones[destination] = stone
        return stone

    def remove(self, position: Position) -> Stone | None:
        return self._stones.pop(position, None)

    def copy(self) -> Board:
        b = Board(self.size, self.player_on_turn)
        b._stones = {pos: Stone(s.owner, s.is_king) for pos, s in self._stones.items()}
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(
        cls,
        size: int = DEFAULT_BOARD_SIZE,
        first_player: Player = Player.PLAYER_A,
    ) -> Board:
        """Standard opening: every playable square outside the two middle rows."""
        if size not in BOARD_SIZES:
            raise ValueError(f"Unsupported board size {size}; expected one of {BOARD_SIZES}")
        b = cls(size, first_player)
        center = size // 2
        for row in range(size):
            if row in (center - 1, center):
                continue
            owner = Player.PLAYER_A if row < center else Player.PLAYER_B
            for col in range(size):
                if is_playable((row, col)):
                    b._stones[Position(row, col)] = Stone(owner)
        return b

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        player_on_turn: Player = Player.PLAYER_A,
    ) -> Board:
        """Build a board from text rows, whitespace ignored.

        ``.`` empty, ``a``/``b`` men, ``A``/``B`` kings::

            Board.from_rows([
                ". a . . . . . .",
                ...
            ])
        """
        grid = ["".join(row.split()) for row in rows]
        size = len(grid)
        b = cls(size, player_on_turn)
        for row, line in enumerate(grid):
            if len(line) != size:
                raise ValueError(f"Row {row} has {len(line)} squares, expected {size}")
            for col, char in enumerate(line):
                if char == ".":
                    continue
                b[(row, col)] = Stone.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.size == other.size
            and self.player_on_turn == other.player_on_turn
            and self._stones == other._stones
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(self.size):
            cells = []
            for col in range(self.size):
                stone = self._stones.get(Position(row, col))
                cells.append(str(stone) if stone else ".")
            rows.append(" ".join(cells))
        rows.append(f"to move: {self.player_on_turn}")
        return "\n".join(rows)
