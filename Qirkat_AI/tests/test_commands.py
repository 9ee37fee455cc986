"""Command-line parsing."""

import pytest

from Qirkat_AI.engine.commands import Command, GameError, parse_command, parse_move_operand


@pytest.mark.parametrize(
    "line, expected",
    [
        ("start", Command("start")),
        ("  Clear ", Command("clear")),
        ("auto Black", Command("auto", ("Black",))),
        ("manual white", Command("manual", ("white",))),
        ("seed 42", Command("seed", ("42",))),
        ("load games/one.txt", Command("load", ("games/one.txt",))),
        ("set black wwwww wwwww bb-ww bbbbb bbbbb", Command("set", ("black", "wwwww wwwww bb-ww bbbbb bbbbb"))),
        ("c2-c3", Command("move", ("c2-c3",))),
        ("a3-c5-c3", Command("move", ("a3-c5-c3",))),
        ("dump # show it", Command("dump")),
        ("", Command("blank")),
        ("quit", Command("quit")),
    ],
)
def test_parse_command(line, expected):
    assert parse_command(line) == expected


def test_end_of_input():
    assert parse_command(None).kind == "eof"


@pytest.mark.parametrize("line", ["jump", "auto green", "seed x", "c2-c6", "set white"])
def test_unknown_command(line):
    with pytest.raises(GameError):
        parse_command(line)


def test_parse_move_operand():
    assert str(parse_move_operand("a3-c5-c3")) == "a3-c5-c3"
    with pytest.raises(GameError):
        parse_move_operand("z9-a1")
