"""Core domain models.

Every NPC in the dungeon is one record tagged with its kind; no kind carries
fields or behaviour of its own beyond the tag. Pydantic validates the records
at construction time.
"""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, Field

MAP_MIN = 0
MAP_MAX = 500


class NPCKind(str, Enum):
    """Closed set of NPC kinds. The value is the persistence keyword."""

    PRINCESS = "PRINCESS"
    DRAGON = "DRAGON"
    KNIGHT = "KNIGHT"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def command(self) -> str:
        return self.value.lower()


def in_bounds(x: int, y: int) -> bool:
    """Return True if (x, y) lies on the map, edges included."""
    return MAP_MIN <= x <= MAP_MAX and MAP_MIN <= y <= MAP_MAX


class NPC(BaseModel):
    """A princess, dragon or knight standing somewhere in the dungeon."""

    kind: NPCKind
    name: str
    x: int = Field(ge=MAP_MIN, le=MAP_MAX)
    y: int = Field(ge=MAP_MIN, le=MAP_MAX)
    alive: bool = True

    def distance_to(self, other: NPC) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def mark_dead(self) -> None:
        self.alive = False

    def describe(self) -> str:
        """Human-readable form used by the `print` command."""
        return f"{self.kind.label} {self.name} at ({self.x}, {self.y})"

    def to_line(self) -> str:
        """Persistence form: `<KIND> <name> <x> <y>`."""
        return f"{self.kind.value} {self.name} {self.x} {self.y}"


class KillEvent(BaseModel):
    """One kill produced by a battle pass."""

    killer: str
    killer_kind: NPCKind
    victim: str
    victim_kind: NPCKind
