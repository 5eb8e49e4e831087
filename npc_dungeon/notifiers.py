"""Kill notifiers — observers invoked once per kill.

The dungeon holds a list of notifiers and calls each one for every kill of a
battle pass. A notifier is anything matching the protocol:

    def __call__(self, killer: NPC, victim: NPC) -> None: ...

Two implementations are provided:

    ConsoleNotifier — prints the kill line to a text stream (stdout).
    FileNotifier    — appends the kill line to a log file kept open for the
                      notifier's lifetime. If the file cannot be opened,
                      notifications are dropped.

Plain functions and lambdas with the same signature work too.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Protocol, TextIO

from npc_dungeon.models import NPC

logger = logging.getLogger(__name__)


class KillNotifier(Protocol):
    def __call__(self, killer: NPC, victim: NPC) -> None: ...


def format_kill(killer: NPC, victim: NPC) -> str:
    return f"{killer.name} killed {victim.name}"


class ConsoleNotifier:
    """Writes each kill to a text stream, stdout by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def __call__(self, killer: NPC, victim: NPC) -> None:
        stream = self._stream or sys.stdout
        print(format_kill(killer, victim), file=stream, flush=True)


class FileNotifier:
    """Appends each kill to a log file.

    Args:
        path: Log file, opened in append mode (UTF-8) right away and kept
              open until close() is called.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._file: TextIO | None
        try:
            self._file = self.path.open("a", encoding="utf-8")
        except OSError as e:
            logger.debug("kill log %s unavailable, notifications dropped: %s", self.path, e)
            self._file = None

    @property
    def is_open(self) -> bool:
        return self._file is not None and not self._file.closed

    def __call__(self, killer: NPC, victim: NPC) -> None:
        if not self.is_open:
            return
        self._file.write(format_kill(killer, victim) + "\n")
        self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
