"""Rule variants that change move generation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GameRules:
    """Toggleable rule flags.

    Attributes:
        mandatory_capture: The side on turn must make the longest capture
            chain available to it; stones that cannot reach that many
            captures do not move, and shorter chains are not legal drops.
        flying_king: Kings slide any distance along a free diagonal and may
            capture a stone at any distance, landing on any free square
            beyond it.
        men_move_backwards: Men may also step backwards. Kings always can.
        men_capture_backwards: Men may capture in all four directions.
    """

    mandatory_capture: bool = False
    flying_king: bool = False
    men_move_backwards: bool = False
    men_capture_backwards: bool = True


DEFAULT_RULES = GameRules()
