"""Drag-and-drop payloads.

The board UI only forwards drops whose payload parses as a
:class:`StonePayload`; anything else is rejected before the engine runs.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

from checkie.core.types import Position

STONE_TAG = "stone"


@dataclass(frozen=True, slots=True)
class StonePayload:
    """A stone being dragged from *position*."""

    position: Position
    kind: Literal["stone"] = STONE_TAG

    def encode(self) -> bytes:
        return json.dumps(
            {"kind": self.kind, "position": [self.position.row, self.position.col]}
        ).encode("utf-8")


# Only one variant today; new drag sources add members here.
DropPayload: TypeAlias = StonePayload


def parse_drop_payload(raw: Any) -> DropPayload | None:
    """Decode a payload from bytes, str, mapping or payload object.

    Returns ``None`` for anything that is not a well-formed stone payload.
    """
    if isinstance(raw, StonePayload):
        return raw
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            return None
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError:
            return None
    if not isinstance(raw, dict) or raw.get("kind") != STONE_TAG:
        return None

    position = raw.get("position")
    if (
        not isinstance(position, (list, tuple))
        or len(position) != 2
        or not all(isinstance(v, int) and not isinstance(v, bool) for v in position)
    ):
        return None
    return StonePayload(Position(position[0], position[1]))
