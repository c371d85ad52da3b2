"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """Side owning a set of stones.

    ``PLAYER_A`` starts on the low rows and moves toward higher rows,
    ``PLAYER_B`` starts on the high rows and moves toward row 0.
    """

    PLAYER_A = 0
    PLAYER_B = 1

    @property
    def opposite(self) -> Player:
        return Player(1 - self.value)

    @property
    def forward(self) -> int:
        """Row step pointing at the opponent's back row."""
        return 1 if self is Player.PLAYER_A else -1

    def promotion_row(self, size: int) -> int:
        """Farthest row from this player's home side."""
        return size - 1 if self is Player.PLAYER_A else 0

    def __str__(self) -> str:
        return "A" if self is Player.PLAYER_A else "B"


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    PLAYER_A_WINS = 1
    PLAYER_B_WINS = 2

    @classmethod
    def win_for(cls, player: Player) -> GameResult:
        return cls.PLAYER_A_WINS if player is Player.PLAYER_A else cls.PLAYER_B_WINS
