"""NPC construction — from explicit fields or from one persisted line.

Line format (whitespace-separated, one NPC per line):

    <KIND> <name> <x> <y>

KIND is one of PRINCESS, DRAGON, KNIGHT (uppercase, exact match); x and y
are base-10 integers on the map. Anything else makes the line unparsable.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator

from npc_dungeon.models import NPC, NPCKind, in_bounds

logger = logging.getLogger(__name__)

_COMMAND_KINDS = {kind.command: kind for kind in NPCKind}

# Optional sign, then ASCII digits
_INT_RE = re.compile(r"[+-]?[0-9]+")


def create_npc(kind: NPCKind, name: str, x: int, y: int) -> NPC:
    """Build an NPC. Callers are expected to have checked the coordinates."""
    return NPC(kind=kind, name=name, x=x, y=y)


def parse_int(token: str) -> int | None:
    """Parse a base-10 integer token, or return None."""
    if not _INT_RE.fullmatch(token):
        return None
    return int(token)


def kind_from_keyword(word: str) -> NPCKind | None:
    """Map a persistence keyword (`DRAGON`) to its kind, or None."""
    try:
        return NPCKind(word)
    except ValueError:
        return None


def kind_from_command(word: str) -> NPCKind | None:
    """Map an `add` command keyword (`dragon`) to its kind, or None."""
    return _COMMAND_KINDS.get(word)


def parse_line(text: str) -> NPC | None:
    """Parse one persisted line. Returns None if the line is not well-formed."""
    tokens = text.split()
    if len(tokens) != 4:
        return None
    keyword, name, raw_x, raw_y = tokens

    kind = kind_from_keyword(keyword)
    if kind is None:
        return None
    x, y = parse_int(raw_x), parse_int(raw_y)
    if x is None or y is None or not in_bounds(x, y):
        return None
    return create_npc(kind, name, x, y)


def parse_lines(lines: Iterable[str]) -> Iterator[NPC]:
    """Yield an NPC for every well-formed line; malformed lines are skipped."""
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        npc = parse_line(line)
        if npc is None:
            logger.debug("skipping malformed line %d: %r", lineno, line.rstrip("\n"))
            continue
        yield npc
