"""Qirkat moves and square-numbering helpers.

Squares are named by a column letter 'a'..'e' and a row digit '1'..'5', or
by a linearized index 0..24 counted in row-major order starting at a1.
A Move is one step or jump; a jump may carry a tail (the next hop of a
multi-jump), so a whole capture chain is a single Move value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

SIDE = 5
MAX_INDEX = SIDE * SIDE - 1

_MOVE_PATTERN = re.compile(r"^[a-e][1-5](?:-[a-e][1-5])+$")


def valid_square(*square) -> bool:
    """True iff SQUARE is an index 0..24 or a (column, row) pair of characters on the board."""
    if len(square) == 1:
        k = square[0]
        return isinstance(k, int) and 0 <= k <= MAX_INDEX
    c, r = square
    return "a" <= c <= "e" and "1" <= r <= "5" and len(c) == 1 and len(r) == 1


def index(c: str, r: str) -> int:
    """Linearized index of square C R."""
    if not valid_square(c, r):
        raise IndexError(f"square {c}{r} is off the board")
    return (ord(c) - ord("a")) + SIDE * (ord(r) - ord("1"))


def col(k: int) -> str:
    """Column letter of square K."""
    if not valid_square(k):
        raise IndexError(f"square index {k} is off the board")
    return chr(ord("a") + k % SIDE)


def row(k: int) -> str:
    """Row digit of square K."""
    if not valid_square(k):
        raise IndexError(f"square index {k} is off the board")
    return chr(ord("1") + k // SIDE)


def square_name(k: int) -> str:
    return col(k) + row(k)


@dataclass(frozen=True)
class Move:
    from_index: int
    to_index: int
    jump_tail: Optional["Move"] = None

    @classmethod
    def move(cls, c0, r0, c1, r1, tail=None):
        """The move C0R0-C1R1 (then TAIL), or None if either square is off the board."""
        if not (valid_square(c0, r0) and valid_square(c1, r1)):
            return None
        return cls(index(c0, r0), index(c1, r1), tail)

    @classmethod
    def offset(cls, k, dcol, drow):
        """The move from square K displaced by (DCOL, DROW), or None if it leaves the board."""
        c = k % SIDE + dcol
        r = k // SIDE + drow
        if not (0 <= c < SIDE and 0 <= r < SIDE):
            return None
        return cls(k, c + SIDE * r)

    @classmethod
    def chain(cls, first: "Move", rest: Optional["Move"]) -> "Move":
        """FIRST followed by REST, as one multi-jump."""
        if first.jump_tail is None:
            return cls(first.from_index, first.to_index, rest)
        return cls(first.from_index, first.to_index, cls.chain(first.jump_tail, rest))

    @property
    def row0(self):
        return row(self.from_index)

    @property
    def dcol(self):
        return self.to_index % SIDE - self.from_index % SIDE

    @property
    def drow(self):
        return self.to_index // SIDE - self.from_index // SIDE

    @property
    def is_jump(self):
        return abs(self.dcol) == 2 or abs(self.drow) == 2

    @property
    def jumped_index(self):
        """Square leapt over by this hop; meaningful only when is_jump."""
        return (self.from_index + self.to_index) // 2

    @property
    def is_left_move(self):
        return not self.is_jump and self.drow == 0 and self.dcol == -1

    @property
    def is_right_move(self):
        return not self.is_jump and self.drow == 0 and self.dcol == 1

    def hops(self):
        """Iterate over this move and each following hop."""
        mov = self
        while mov is not None:
            yield mov
            mov = mov.jump_tail

    def __str__(self):
        names = [square_name(self.from_index)]
        names.extend(square_name(hop.to_index) for hop in self.hops())
        return "-".join(names)


def parse_move(text: str) -> Move:
    """Parse 'c2-c3' or a chain such as 'a3-c5-c3'; raise ValueError on bad syntax."""
    text = text.strip()
    if not _MOVE_PATTERN.match(text):
        raise ValueError(f"bad move denotation: {text!r}")
    squares = [index(name[0], name[1]) for name in text.split("-")]
    mov = None
    for k0, k1 in reversed(list(zip(squares, squares[1:]))):
        mov = Move(k0, k1, mov)
    return mov
