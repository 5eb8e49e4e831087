"""NPC Dungeon — console launcher. Reads commands from stdin until exit."""

import sys

from npc_dungeon.cli import main

if __name__ == "__main__":
    sys.exit(main())
