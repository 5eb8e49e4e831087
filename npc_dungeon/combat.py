"""Battle resolution — one pass over every pair of NPCs.

Kill rules (killer → victim, directional):
  DRAGON kills PRINCESS
  KNIGHT kills DRAGON
Every other ordered pair does nothing; princesses never kill.

Pass flow:
  1. Snapshot who is alive; only pairs alive at the start take part.
  2. For each pair (i, j), i < j in registry order, within reach:
       i strikes j, then j strikes i unless i just killed j.
     A strike kills only a victim that is still alive, so nobody dies twice.
  3. Each kill marks the victim dead and is reported to `notify` once.
Dead NPCs are removed afterwards with purge_dead().
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from npc_dungeon.models import NPC, KillEvent, NPCKind

logger = logging.getLogger(__name__)

KILL_RULES: frozenset[tuple[NPCKind, NPCKind]] = frozenset({
    (NPCKind.DRAGON, NPCKind.PRINCESS),
    (NPCKind.KNIGHT, NPCKind.DRAGON),
})


def can_kill(killer: NPC, victim: NPC) -> bool:
    return (killer.kind, victim.kind) in KILL_RULES


def resolve_battle(
    npcs: list[NPC],
    reach: float,
    notify: Callable[[NPC, NPC], None],
) -> list[KillEvent]:
    """Run one battle pass over `npcs` in place and return the kills, in order."""
    started_alive = [npc.alive for npc in npcs]
    kills: list[KillEvent] = []

    def _strike(killer: NPC, victim: NPC) -> bool:
        if not victim.alive or not can_kill(killer, victim):
            return False
        victim.mark_dead()
        kills.append(KillEvent(
            killer=killer.name, killer_kind=killer.kind,
            victim=victim.name, victim_kind=victim.kind,
        ))
        logger.debug("%s %s killed %s %s", killer.kind.value, killer.name,
                     victim.kind.value, victim.name)
        notify(killer, victim)
        return True

    for i, first in enumerate(npcs):
        if not started_alive[i]:
            continue
        for j in range(i + 1, len(npcs)):
            if not started_alive[j]:
                continue
            second = npcs[j]
            if not first.distance_to(second) <= reach:
                continue
            if not _strike(first, second):
                _strike(second, first)

    return kills


def purge_dead(npcs: list[NPC]) -> int:
    """Drop dead NPCs from the list in place. Returns how many were removed."""
    before = len(npcs)
    npcs[:] = [npc for npc in npcs if npc.alive]
    return before - len(npcs)
