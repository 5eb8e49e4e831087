"""Tests for NPC construction and line parsing."""

import pytest

from npc_dungeon.factory import (
    create_npc,
    kind_from_command,
    kind_from_keyword,
    parse_int,
    parse_line,
    parse_lines,
)
from npc_dungeon.models import NPCKind


def test_create_npc_keeps_fields():
    npc = create_npc(NPCKind.DRAGON, "Smaug", 12, 34)
    assert (npc.kind, npc.name, npc.x, npc.y, npc.alive) == (
        NPCKind.DRAGON, "Smaug", 12, 34, True,
    )


def test_kind_from_keyword_is_case_sensitive():
    assert kind_from_keyword("KNIGHT") is NPCKind.KNIGHT
    assert kind_from_keyword("knight") is None
    assert kind_from_keyword("Knight") is None


def test_kind_from_command():
    assert kind_from_command("princess") is NPCKind.PRINCESS
    assert kind_from_command("PRINCESS") is None
    assert kind_from_command("goblin") is None


# ── parse_int ───────────────────────────────────────────────


@pytest.mark.parametrize("token,expected", [("0", 0), ("500", 500), ("-3", -3), ("+7", 7)])
def test_parse_int_accepts_plain_integers(token, expected):
    assert parse_int(token) == expected


@pytest.mark.parametrize("token", ["", "-", "1_0", "1.0", "0x10", " 1", "١٢"])
def test_parse_int_rejects(token):
    assert parse_int(token) is None


# ── parse_line ──────────────────────────────────────────────


def test_parse_line_well_formed():
    npc = parse_line("PRINCESS Fiona 100 200\n")
    assert npc is not None
    assert npc.kind is NPCKind.PRINCESS
    assert npc.name == "Fiona"
    assert (npc.x, npc.y) == (100, 200)


def test_parse_line_extra_whitespace():
    npc = parse_line("  DRAGON\tSmaug   0  500 ")
    assert npc is not None
    assert (npc.x, npc.y) == (0, 500)


@pytest.mark.parametrize("line", [
    "",
    "DRAGON Smaug 1",
    "DRAGON Smaug 1 2 3",
    "dragon Smaug 1 2",
    "GOBLIN Grub 1 2",
    "DRAGON Smaug x 2",
    "DRAGON Smaug 1 2.5",
    "DRAGON Smaug -1 2",
    "DRAGON Smaug 1 501",
    "DRAGON Smaug 1_0 2",
    "DRAGON Smaug ١٢ 2",
])
def test_parse_line_rejects(line):
    assert parse_line(line) is None


# ── parse_lines ─────────────────────────────────────────────


def test_parse_lines_skips_bad_lines_and_keeps_going():
    lines = [
        "KNIGHT Arthur 1 1\n",
        "KNIGHT Mordred 1 900\n",
        "\n",
        "garbage\n",
        "DRAGON Smaug 2 2\n",
    ]
    npcs = list(parse_lines(lines))
    assert [n.name for n in npcs] == ["Arthur", "Smaug"]
