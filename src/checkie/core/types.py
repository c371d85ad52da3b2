"""Position type and coordinate helpers.

Board layout (row-major, row 0 at the top):
    (0, 0) (0, 1) ... (0, N-1)
    ...
    (N-1, 0) ...      (N-1, N-1)

Only squares with an odd ``row + col`` are playable.
"""

from __future__ import annotations

from typing import NamedTuple

from checkie.core.errors import BoundsError

BOARD_SIZES: tuple[int, ...] = (8, 10, 12)
DEFAULT_BOARD_SIZE = 8

# (row step, col step)
DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class Position(NamedTuple):
    """Zero-indexed ``(row, col)`` board coordinate."""

    row: int
    col: int

    def step(self, d_row: int, d_col: int, distance: int = 1) -> Position:
        return Position(self.row + d_row * distance, self.col + d_col * distance)

    def __str__(self) -> str:
        return position_key(self)


def in_bounds(position: tuple[int, int], size: int) -> bool:
    row, col = position
    return 0 <= row < size and 0 <= col < size


def is_playable(position: tuple[int, int]) -> bool:
    """Dark squares: ``(row + col)`` odd."""
    return (position[0] + position[1]) % 2 == 1


def require_in_bounds(position: tuple[int, int], size: int) -> Position:
    """Coerce *position* to :class:`Position`, raising :class:`BoundsError`."""
    if not in_bounds(position, size):
        raise BoundsError(position, size)
    return Position(*position)


def position_key(position: tuple[int, int]) -> str:
    """Stringified position used as a mapping key, e.g. ``(2, 1)`` → ``'2,1'``."""
    return f"{position[0]},{position[1]}"


def parse_position_key(key: str) -> Position:
    """Inverse of :func:`position_key`."""
    parts = key.split(",")
    if len(parts) != 2:
        raise ValueError(f"Invalid position key: {key!r}")
    try:
        return Position(int(parts[0]), int(parts[1]))
    except ValueError:
        raise ValueError(f"Invalid position key: {key!r}") from None
