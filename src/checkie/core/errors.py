"""Engine exceptions."""

from __future__ import annotations


class CheckersError(Exception):
    """Base class for all engine errors."""


class BoundsError(CheckersError, ValueError):
    """A position lies outside ``[0, N)`` in either coordinate."""

    def __init__(self, position: tuple[int, int], size: int) -> None:
        super().__init__(f"Position {tuple(position)} is out of bounds for a {size}x{size} board")
        self.position = tuple(position)
        self.size = size


class NotAStoneError(CheckersError):
    """Move generation was requested for a square without a stone."""

    def __init__(self, position: tuple[int, int]) -> None:
        super().__init__(f"No stone at {tuple(position)}")
        self.position = tuple(position)


class NoSuchStoneError(CheckersError):
    """Commit attempted for a stone that has no legal move this turn."""

    def __init__(self, position: tuple[int, int]) -> None:
        super().__init__(f"No movable stone at {tuple(position)} this turn")
        self.position = tuple(position)


class IllegalDestinationError(CheckersError):
    """Commit attempted onto a square outside the stone's drop zones."""

    def __init__(self, selected: tuple[int, int], destination: tuple[int, int]) -> None:
        super().__init__(
            f"{tuple(destination)} is not a legal destination for the stone at {tuple(selected)}"
        )
        self.selected = tuple(selected)
        self.destination = tuple(destination)
