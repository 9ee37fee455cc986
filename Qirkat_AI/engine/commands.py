"""Parsing of text commands typed at the qirkat prompt or read from files."""

import re
from dataclasses import dataclass
from typing import Tuple

from ..Move import parse_move


class GameError(ValueError):
    """A user-level error: bad command, bad operand, or a move that may not be played."""


@dataclass(frozen=True)
class Command:
    kind: str
    operands: Tuple[str, ...] = ()


# (kind, pattern) pairs, tried in order. Keywords are case-insensitive.
COMMAND_PATTERNS = (
    ("move", re.compile(r"([a-e][1-5](?:-[a-e][1-5])+)")),
    ("auto", re.compile(r"auto\s+(white|black)", re.IGNORECASE)),
    ("manual", re.compile(r"manual\s+(white|black)", re.IGNORECASE)),
    ("set", re.compile(r"set\s+(white|black)\s+([-bwBW\s]+)", re.IGNORECASE)),
    ("seed", re.compile(r"seed\s+(\d+)", re.IGNORECASE)),
    ("load", re.compile(r"load\s+(\S+)", re.IGNORECASE)),
    ("clear", re.compile(r"clear", re.IGNORECASE)),
    ("start", re.compile(r"start", re.IGNORECASE)),
    ("dump", re.compile(r"dump", re.IGNORECASE)),
    ("undo", re.compile(r"undo", re.IGNORECASE)),
    ("help", re.compile(r"help|\?", re.IGNORECASE)),
    ("quit", re.compile(r"quit|exit", re.IGNORECASE)),
)

EOF = Command("eof")
BLANK = Command("blank")


def parse_command(line):
    """Return the Command for LINE; None means end of input. Raise GameError if not understood."""
    if line is None:
        return EOF
    text = line.split("#", 1)[0].strip()
    if not text:
        return BLANK
    for kind, pattern in COMMAND_PATTERNS:
        match = pattern.fullmatch(text)
        if match:
            return Command(kind, tuple(g.strip() for g in match.groups()))
    raise GameError(f"command not understood: {text}")


def parse_move_operand(text):
    """The Move denoted by TEXT, the operand of a 'move' command."""
    try:
        return parse_move(text)
    except ValueError as exc:
        raise GameError(str(exc)) from exc
