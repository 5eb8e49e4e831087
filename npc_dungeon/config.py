"""Runtime settings, read from the environment (and an optional .env file).

    NPC_DUNGEON_KILL_LOG   path of the append-only kill log; empty disables it
    NPC_DUNGEON_LOG_LEVEL  logging level for diagnostics on stderr (WARNING)
    NPC_DUNGEON_PROMPT     prompt printed before each command
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

ROOT = Path(__file__).parent.parent

DEFAULT_PROMPT = "Choose a command: "


class Settings(BaseModel):
    kill_log: Path | None = None
    log_level: str = "WARNING"
    prompt: str = DEFAULT_PROMPT


def load_settings(env_file: Path | None = None) -> Settings:
    """Build Settings from environment variables, loading `.env` first."""
    load_dotenv(env_file or ROOT / ".env")
    kill_log = os.getenv("NPC_DUNGEON_KILL_LOG", "")
    return Settings(
        kill_log=Path(kill_log) if kill_log else None,
        log_level=os.getenv("NPC_DUNGEON_LOG_LEVEL", "WARNING").upper(),
        prompt=os.getenv("NPC_DUNGEON_PROMPT", DEFAULT_PROMPT),
    )
