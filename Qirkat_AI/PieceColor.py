"""Square contents: empty, or a piece of one of the two players."""

from enum import Enum


class PieceColor(Enum):
    EMPTY = "-"
    WHITE = "w"
    BLACK = "b"

    @property
    def short_name(self):
        """One-character name used in board layouts and dumps."""
        return self.value

    def opposite(self):
        """The other player's color; EMPTY stays EMPTY."""
        if self is PieceColor.WHITE:
            return PieceColor.BLACK
        if self is PieceColor.BLACK:
            return PieceColor.WHITE
        return PieceColor.EMPTY

    @classmethod
    def parse(cls, name):
        """Return WHITE or BLACK for a player name such as 'white' or 'Black'."""
        lowered = name.strip().lower()
        if lowered == "white":
            return cls.WHITE
        if lowered == "black":
            return cls.BLACK
        raise ValueError(f"unknown player color: {name!r}")

    def __str__(self):
        return self.name.capitalize()


EMPTY = PieceColor.EMPTY
WHITE = PieceColor.WHITE
BLACK = PieceColor.BLACK
