"""Game setup options chosen before a new game starts."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from checkie.core.enums import Player
from checkie.core.rules import GameRules
from checkie.core.types import BOARD_SIZES, DEFAULT_BOARD_SIZE


@dataclass
class GameSettings:
    """Board size, opening player and rule variants."""

    board_size: int = DEFAULT_BOARD_SIZE
    first_player: Player = Player.PLAYER_A
    rules: GameRules = field(default_factory=GameRules)

    def validate(self) -> None:
        """Raise ``ValueError`` describing the first invalid field."""
        if self.board_size not in BOARD_SIZES:
            raise ValueError(
                f"Invalid board size {self.board_size!r}; expected one of {BOARD_SIZES}"
            )
        if not isinstance(self.first_player, Player):
            raise ValueError(f"Invalid first player {self.first_player!r}")
        if not isinstance(self.rules, GameRules):
            raise ValueError(f"Invalid rules {self.rules!r}")

    def with_rules(self, **changes: bool) -> GameSettings:
        """Copy with some rule flags changed."""
        return replace(self, rules=replace(self.rules, **changes))
