"""Tests for kill notifiers."""

import io

from npc_dungeon.models import NPC, NPCKind
from npc_dungeon.notifiers import ConsoleNotifier, FileNotifier, format_kill

DRAGON = NPC(kind=NPCKind.DRAGON, name="D", x=0, y=0)
PRINCESS = NPC(kind=NPCKind.PRINCESS, name="P", x=3, y=4)


def test_format_kill():
    assert format_kill(DRAGON, PRINCESS) == "D killed P"


class TestConsoleNotifier:
    def test_writes_to_stream(self) -> None:
        out = io.StringIO()
        ConsoleNotifier(out)(DRAGON, PRINCESS)
        assert out.getvalue() == "D killed P\n"

    def test_defaults_to_stdout(self, capsys) -> None:
        ConsoleNotifier()(DRAGON, PRINCESS)
        assert capsys.readouterr().out == "D killed P\n"


class TestFileNotifier:
    def test_appends_lines(self, tmp_path) -> None:
        path = tmp_path / "log.txt"
        path.write_text("earlier\n", encoding="utf-8")
        notifier = FileNotifier(path)
        notifier(DRAGON, PRINCESS)
        notifier(DRAGON, PRINCESS)
        notifier.close()
        assert path.read_text(encoding="utf-8") == "earlier\nD killed P\nD killed P\n"

    def test_lines_visible_before_close(self, tmp_path) -> None:
        path = tmp_path / "log.txt"
        notifier = FileNotifier(path)
        notifier(DRAGON, PRINCESS)
        assert path.read_text(encoding="utf-8") == "D killed P\n"
        notifier.close()

    def test_unopenable_path_drops_silently(self, tmp_path) -> None:
        notifier = FileNotifier(tmp_path / "missing-dir" / "log.txt")
        assert not notifier.is_open
        notifier(DRAGON, PRINCESS)
        notifier.close()

    def test_calls_after_close_are_ignored(self, tmp_path) -> None:
        path = tmp_path / "log.txt"
        notifier = FileNotifier(path)
        notifier.close()
        notifier(DRAGON, PRINCESS)
        assert path.read_text(encoding="utf-8") == ""
