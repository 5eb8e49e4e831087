"""The dungeon registry — sole owner of the NPC collection.

NPCs are kept in insertion (or load) order, which is the order used by
`print`, `save` and the battle pass. Dead NPCs are purged at the end of
every battle and never seen again.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from npc_dungeon.combat import purge_dead, resolve_battle
from npc_dungeon.errors import CoordinatesOutOfRange, DungeonStorageError
from npc_dungeon.factory import create_npc, parse_lines
from npc_dungeon.models import NPC, KillEvent, NPCKind, in_bounds
from npc_dungeon.notifiers import KillNotifier

logger = logging.getLogger(__name__)


class Dungeon:
    def __init__(self, notifiers: Iterable[KillNotifier] | None = None) -> None:
        self._npcs: list[NPC] = []
        self._notifiers: list[KillNotifier] = list(notifiers or [])

    def __len__(self) -> int:
        return len(self._npcs)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, notifier: KillNotifier) -> None:
        """Register a notifier; every kill is reported to all of them in order."""
        self._notifiers.append(notifier)

    def _notify(self, killer: NPC, victim: NPC) -> None:
        for notifier in self._notifiers:
            notifier(killer, victim)

    # ------------------------------------------------------------------
    # Registry operations
    # ------------------------------------------------------------------

    def add(self, kind: NPCKind, name: str, x: int, y: int) -> NPC:
        if not in_bounds(x, y):
            raise CoordinatesOutOfRange(x, y)
        npc = create_npc(kind, name, x, y)
        self._npcs.append(npc)
        logger.debug("added %s", npc.to_line())
        return npc

    def list(self) -> Iterator[NPC]:
        """Yield the living NPCs in registry order."""
        for npc in self._npcs:
            if npc.alive:
                yield npc

    def save(self, path: Path | str) -> int:
        """Overwrite `path` with one line per living NPC. Returns the count."""
        lines = [npc.to_line() + "\n" for npc in self.list()]
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.writelines(lines)
        except OSError as e:
            raise DungeonStorageError(f"Cannot save to {path}") from e
        logger.debug("saved %d npcs to %s", len(lines), path)
        return len(lines)

    def load(self, path: Path | str) -> int:
        """Replace the registry with the NPCs parsed from `path`.

        The previous contents are discarded even if the file cannot be read,
        in which case the registry is left empty.
        """
        self._npcs.clear()
        try:
            with open(path, encoding="utf-8") as f:
                loaded = list(parse_lines(f))
        except (OSError, UnicodeDecodeError) as e:
            raise DungeonStorageError(f"Cannot load from {path}") from e
        self._npcs.extend(loaded)
        logger.debug("loaded %d npcs from %s", len(self._npcs), path)
        return len(self._npcs)

    def battle(self, reach: float) -> list[KillEvent]:
        """Run one battle pass, then remove the dead."""
        kills = resolve_battle(self._npcs, reach, self._notify)
        removed = purge_dead(self._npcs)
        logger.debug("battle reach=%s kills=%d removed=%d", reach, len(kills), removed)
        return kills

    def close(self) -> None:
        """Release notifiers that hold resources (e.g. an open kill log)."""
        for notifier in self._notifiers:
            close = getattr(notifier, "close", None)
            if callable(close):
                close()
