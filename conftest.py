from unittest.mock import MagicMock

import pytest

from npc_dungeon.dungeon import Dungeon


@pytest.fixture
def notifier() -> MagicMock:
    """A spy notifier that records every (killer, victim) call."""
    return MagicMock()


@pytest.fixture
def dungeon(notifier: MagicMock) -> Dungeon:
    return Dungeon(notifiers=[notifier])
