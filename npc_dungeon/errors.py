"""Exceptions raised by the dungeon registry.

Only the command loop turns these into user-facing messages; everything
below it raises and lets the caller decide.
"""

from __future__ import annotations


class DungeonError(RuntimeError):
    """Base class for all recoverable dungeon failures."""


class CoordinatesOutOfRange(DungeonError):
    """Raised by Dungeon.add when x or y falls outside the map."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Coordinates ({x}, {y}) are outside the map")
        self.x = x
        self.y = y


class DungeonStorageError(DungeonError):
    """Raised when a save or load target cannot be opened."""
