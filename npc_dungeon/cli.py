"""Interactive command loop.

Commands are read as one whitespace-delimited token stream, so a command and
its arguments may span lines:

    add <princess|dragon|knight> <name> <x> <y>
    print
    save <path>
    load <path>
    battle <range>
    exit

Bad input is reported and the loop continues; `exit` or end of input stops
it. The process always exits with status 0.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from npc_dungeon.config import DEFAULT_PROMPT, load_settings
from npc_dungeon.dungeon import Dungeon
from npc_dungeon.errors import CoordinatesOutOfRange, DungeonError
from npc_dungeon.factory import kind_from_command, parse_int
from npc_dungeon.notifiers import ConsoleNotifier, FileNotifier

logger = logging.getLogger(__name__)

# Number of argument tokens each command consumes
COMMAND_ARITY = {"add": 4, "print": 0, "save": 1, "load": 1, "battle": 1, "exit": 0}


def read_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-delimited tokens from `stream` until end of input."""
    for line in stream:
        yield from line.split()


def _take(tokens: Iterator[str], count: int) -> list[str] | None:
    args = [tok for _, tok in zip(range(count), tokens)]
    return args if len(args) == count else None


def run(
    dungeon: Dungeon,
    stdin: TextIO,
    stdout: TextIO,
    prompt: str = DEFAULT_PROMPT,
) -> int:
    """Drive `dungeon` from the commands on `stdin`. Returns the exit status."""

    def say(text: str) -> None:
        print(text, file=stdout, flush=True)

    tokens = read_tokens(stdin)
    while True:
        stdout.write(prompt)
        stdout.flush()
        command = next(tokens, None)
        if command is None:
            break

        arity = COMMAND_ARITY.get(command)
        if arity is None:
            say(f"Unknown command: {command}")
            continue
        args = _take(tokens, arity)
        if args is None:
            logger.debug("input ended in the middle of %r", command)
            break
        logger.debug("command %s %s", command, args)

        if command == "exit":
            break

        elif command == "add":
            word, name, raw_x, raw_y = args
            kind = kind_from_command(word)
            if kind is None:
                say(f"Unknown NPC kind: {word}")
                continue
            x, y = parse_int(raw_x), parse_int(raw_y)
            if x is None or y is None:
                say(f"Invalid number: {raw_x if x is None else raw_y}")
                continue
            try:
                dungeon.add(kind, name, x, y)
            except CoordinatesOutOfRange:
                say("Invalid coordinates!")

        elif command == "print":
            for npc in dungeon.list():
                say(npc.describe())

        elif command == "battle":
            try:
                reach = float(args[0])
                if math.isnan(reach):
                    raise ValueError(args[0])
            except ValueError:
                say(f"Invalid number: {args[0]}")
                continue
            dungeon.battle(reach)

        else:  # save / load
            try:
                if command == "save":
                    dungeon.save(args[0])
                else:
                    dungeon.load(args[0])
            except DungeonError as e:
                logger.warning("%s: %s", e, e.__cause__)
                say(str(e))

    return 0


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(
        prog="npc-dungeon",
        description="Spawn princesses, dragons and knights and let them fight",
    )
    parser.add_argument("--kill-log", type=Path, default=settings.kill_log,
                        help="Append every kill to this file (default: disabled)")
    parser.add_argument("--no-console", action="store_true",
                        help="Do not print kills to the console")
    parser.add_argument("--log-level", default=settings.log_level,
                        help="Diagnostics level on stderr (default: WARNING)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    dungeon = Dungeon()
    if not args.no_console:
        dungeon.subscribe(ConsoleNotifier(sys.stdout))
    if args.kill_log:
        dungeon.subscribe(FileNotifier(args.kill_log))

    try:
        return run(dungeon, sys.stdin, sys.stdout, prompt=settings.prompt)
    finally:
        dungeon.close()
