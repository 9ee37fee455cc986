"""Qirkat board state, move legality, move generation, apply/undo."""

import re

from .Move import MAX_INDEX, SIDE, Move, index, valid_square
from .PieceColor import BLACK, EMPTY, WHITE, PieceColor

# Even squares connect orthogonally and diagonally, odd squares orthogonally only.
# Offsets are (dcol, drow); their order fixes move generation order.
STEP_OFFSETS = {
    0: ((1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1)),
    1: ((1, 0), (0, 1), (-1, 0), (0, -1)),
}
JUMP_OFFSETS = {
    parity: tuple((2 * dc, 2 * dr) for dc, dr in offsets)
    for parity, offsets in STEP_OFFSETS.items()
}

# Row 1 first, column a first.
INITIAL_LAYOUT = "wwwww wwwww bb-ww bbbbb bbbbb"

BACK_ROW = {WHITE: "5", BLACK: "1"}

_LAYOUT_PATTERN = re.compile(r"[bw-]{%d}" % (MAX_INDEX + 1))


class IllegalMoveError(ValueError):
    """Raised when applying a move that fails the legality check."""


class EmptyHistoryError(IndexError):
    """Raised by undo() when no move has been made."""


class Board:
    def __init__(self):
        # positions[k] is the PieceColor on square k; directions[k] is -1/1 if that
        # piece last made a leftward/rightward step, else 0.
        self.positions = []
        self.directions = []
        self.whose_move = WHITE
        self.history = []
        self._saved_directions = []
        self.clear()

    def clear(self):
        """Reset to the standard starting position with White to move."""
        self.set_pieces(INITIAL_LAYOUT, WHITE)

    def set_pieces(self, layout, next_move):
        """
        Load LAYOUT: 25 characters from {b, w, -}, row 1 first, whitespace ignored.
        NEXT_MOVE (WHITE or BLACK) moves first. Clears directions and history.
        Raises ValueError and leaves the board unchanged on bad input.
        """
        if next_move not in (WHITE, BLACK):
            raise ValueError("bad player color")
        layout = re.sub(r"\s", "", layout)
        if not _LAYOUT_PATTERN.fullmatch(layout):
            raise ValueError("bad board description")
        self.positions = [PieceColor(ch) for ch in layout]
        self.directions = [0] * (MAX_INDEX + 1)
        self.whose_move = next_move
        self.history = []
        self._saved_directions = []

    def layout(self):
        """Serialized piece placement, the inverse of set_pieces()."""
        return "".join(p.short_name for p in self.positions)

    def clone(self):
        """Deep copy, including move history."""
        new_board = self.value_copy()
        new_board.history = self.history[:]
        new_board._saved_directions = self._saved_directions[:]
        return new_board

    def value_copy(self):
        """Copy of the position and side to move only, for throwaway exploration."""
        new_board = Board.__new__(Board)
        new_board.positions = self.positions[:]
        new_board.directions = self.directions[:]
        new_board.whose_move = self.whose_move
        new_board.history = []
        new_board._saved_directions = []
        return new_board

    def constant_view(self):
        return ReadOnlyBoard(self)

    def get(self, *square):
        """Contents of square K, or of square C R ('a'..'e', '1'..'5')."""
        return self.positions[_square_index(square)]

    def _set(self, k, color):
        if not valid_square(k):
            raise IndexError(f"square index {k} is off the board")
        self.positions[k] = color

    def legal_move(self, mov):
        """True iff the first hop of MOV may be played by the side to move."""
        if mov is None:
            return False
        a, b = mov.from_index, mov.to_index
        if not (valid_square(a) and valid_square(b)):
            return False
        if self.positions[b] is not EMPTY or self.positions[a] is not self.whose_move:
            return False

        mover = self.positions[a]
        if mov.is_jump:
            if (mov.dcol, mov.drow) not in JUMP_OFFSETS[a % 2]:
                return False
            return self.positions[mov.jumped_index] is mover.opposite()

        if (mov.dcol, mov.drow) not in STEP_OFFSETS[a % 2] or mov.jump_tail is not None:
            return False
        if mov.is_left_move or mov.is_right_move:
            if (mov.is_left_move and self.directions[a] == 1) or (
                mov.is_right_move and self.directions[a] == -1
            ):
                return False
            return mov.row0 != BACK_ROW[mover]
        if mover is WHITE:
            return b > a
        return b < a

    def get_moves(self):
        """All legal moves for the side to move; only jumps when any jump exists."""
        moves = []
        if self.jump_possible():
            for k in range(MAX_INDEX + 1):
                if self.positions[k] is self.whose_move:
                    moves.extend(self.get_jumps(k))
        else:
            for k in range(MAX_INDEX + 1):
                moves.extend(self._get_steps(k))
        return moves

    def _get_steps(self, k):
        steps = []
        for dcol, drow in STEP_OFFSETS[k % 2]:
            step = Move.offset(k, dcol, drow)
            if self.legal_move(step):
                steps.append(step)
        return steps

    def get_jumps(self, k):
        """
        Every capture the piece on square K can make, each extended as far as its
        branch allows: a hop that can be continued is only offered with its continuations.
        """
        jumps = []
        for dcol, drow in JUMP_OFFSETS[k % 2]:
            hop = Move.offset(k, dcol, drow)
            if not self.legal_move(hop):
                continue
            after = self.value_copy()
            after._perform(hop)
            continuations = after.get_jumps(hop.to_index)
            if not continuations:
                jumps.append(hop)
            else:
                jumps.extend(Move.chain(hop, rest) for rest in continuations)
        return jumps

    def check_jump(self, mov, allow_partial=False):
        """
        True iff MOV is a valid jump sequence from this position. With ALLOW_PARTIAL
        only the first hop is checked; otherwise every hop must be a legal jump in turn.
        """
        if mov is None:
            return not allow_partial
        if allow_partial:
            return mov.is_jump and self.legal_move(mov)
        board = self.value_copy()
        for hop in mov.hops():
            if not hop.is_jump or not board.legal_move(hop):
                return False
            board._perform(hop)
        return True

    def jump_possible(self, *square):
        """True iff the side to move can capture (from square K or C R, if given)."""
        if not square:
            return any(self.jump_possible(k) for k in range(MAX_INDEX + 1))
        k = _square_index(square)
        if self.positions[k] is not self.whose_move:
            return False
        return any(self.legal_move(Move.offset(k, dcol, drow)) for dcol, drow in JUMP_OFFSETS[k % 2])

    def is_move(self):
        """True iff the side to move has a legal move."""
        return self.jump_possible() or any(self._get_steps(k) for k in range(MAX_INDEX + 1))

    def game_over(self):
        return not self.is_move()

    def apply(self, mov):
        """Play MOV (a step or a whole jump chain) for the side to move."""
        if not self.legal_move(mov):
            raise IllegalMoveError(f"illegal move {mov} for {self.whose_move}")
        self._saved_directions.append(tuple(self.directions))
        self._perform(mov)
        if mov.is_right_move:
            self.directions[mov.to_index] = 1
        elif mov.is_left_move:
            self.directions[mov.to_index] = -1
        self.whose_move = self.whose_move.opposite()
        self.history.append(mov)

    def _perform(self, mov):
        """Move pieces for every hop of MOV without changing the side to move."""
        mover = self.whose_move
        for hop in mov.hops():
            self._set(hop.from_index, EMPTY)
            self._set(hop.to_index, mover)
            self.directions[hop.from_index] = 0
            self.directions[hop.to_index] = 0
            if hop.is_jump:
                self._set(hop.jumped_index, EMPTY)
                self.directions[hop.jumped_index] = 0

    def undo(self):
        """Take back the last move, restoring pieces, directions and side to move."""
        if not self.history:
            raise EmptyHistoryError("nothing to undo")
        mov = self.history.pop()
        self.whose_move = self.whose_move.opposite()
        mover = self.whose_move
        for hop in reversed(list(mov.hops())):
            self._set(hop.from_index, mover)
            if hop.is_jump:
                self._set(hop.jumped_index, mover.opposite())
            self._set(hop.to_index, EMPTY)
        self.directions = list(self._saved_directions.pop())

    def to_string(self, legend=False):
        """Rows 5 down to 1; with LEGEND, label rows and columns."""
        lines = []
        for r in range(SIDE - 1, -1, -1):
            cells = " ".join(self.positions[r * SIDE + c].short_name for c in range(SIDE))
            lines.append(f"{r + 1} {cells}" if legend else f"  {cells}")
        if legend:
            lines.append("  " + " ".join("abcde"))
        return "\n".join(lines)

    def __str__(self):
        return self.to_string()


def _square_index(square):
    if len(square) == 1:
        k = square[0]
        if not valid_square(k):
            raise IndexError(f"square index {k} is off the board")
        return k
    return index(*square)


class ReadOnlyBoard:
    """
    Borrowed read-only reference to a live Board. Reads go straight to the
    live board, so the view is never stale; mutators raise TypeError.
    """

    _READERS = frozenset({
        "get", "legal_move", "get_moves", "get_jumps", "check_jump", "jump_possible",
        "is_move", "game_over", "layout", "to_string", "clone", "value_copy",
    })
    _MUTATORS = frozenset({"apply", "undo", "clear", "set_pieces"})

    def __init__(self, board):
        self._board = board

    @property
    def whose_move(self):
        return self._board.whose_move

    @property
    def positions(self):
        return tuple(self._board.positions)

    @property
    def directions(self):
        return tuple(self._board.directions)

    @property
    def history(self):
        return tuple(self._board.history)

    def constant_view(self):
        return self

    def __getattr__(self, name):
        if name in ReadOnlyBoard._MUTATORS:
            raise TypeError(f"cannot {name} a read-only board")
        if name in ReadOnlyBoard._READERS:
            return getattr(self._board, name)
        raise AttributeError(name)

    def __str__(self):
        return str(self._board)
