"""Stone value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Player

_CHARS: dict[tuple[Player, bool], str] = {
    (Player.PLAYER_A, False): "a",
    (Player.PLAYER_A, True): "A",
    (Player.PLAYER_B, False): "b",
    (Player.PLAYER_B, True): "B",
}
_FROM_CHAR: dict[str, tuple[Player, bool]] = {v: k for k, v in _CHARS.items()}


@dataclass(slots=True)
class Stone:
    """A playing piece. Only ``is_king`` ever changes, and only to ``True``."""

    owner: Player
    is_king: bool = False

    def promote(self) -> None:
        self.is_king = True

    def __str__(self) -> str:
        """Board character: lowercase = man, uppercase = king."""
        return _CHARS[(self.owner, self.is_king)]

    @classmethod
    def from_char(cls, char: str) -> Stone:
        try:
            owner, is_king = _FROM_CHAR[char]
        except KeyError:
            raise ValueError(f"Invalid stone character: {char!r}") from None
        return cls(owner, is_king)
