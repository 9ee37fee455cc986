"""Command interpreter and turn loop for a Qirkat session."""

import random
import sys
from pathlib import Path

from .Board import Board, EmptyHistoryError
from .PieceColor import BLACK, WHITE, PieceColor
from .Player import AIPlayer, HumanPlayer, RandomPlayer
from .ai import search_minimax
from .engine import referee
from .engine.commands import GameError, parse_command, parse_move_operand
from .utils.logger import log_event
from .utils.timer import MoveTimer

SETUP = "setup"
PLAYING = "playing"

PLAYER_KINDS = ("human", "ai", "random")

HELP_TEXT = """\
Commands (one per line):
  clear            abandon the game and reset the board
  start            start playing from the current position
  auto C           let the program play color C (white or black)
  manual C         let a person play color C
  set C LAYOUT     load 25 squares (b, w, -) from a1 row-wise, C to move
  dump             print the board
  seed N           reseed the random player
  load FILE        read commands from FILE
  undo             take back the last move
  help             print this summary
  quit             leave the program
  c2-c3, a3-c5-c3  play a move (steps or whole capture chains)"""


def _print_error(message):
    print(message, file=sys.stderr)


class ConsoleSource:
    """Interactive lines from the terminal."""

    def __init__(self, reader=input):
        self.reader = reader

    def read_line(self, prompt):
        try:
            return self.reader(prompt)
        except EOFError:
            return None


class LineSource:
    """Lines from a file or any iterable of strings; prompts are not shown."""

    def __init__(self, lines):
        self._lines = iter(lines)

    def read_line(self, prompt):
        line = next(self._lines, None)
        return None if line is None else line.rstrip("\n")


class Qirkatgame:
    def __init__(
        self,
        board=None,
        source=None,
        output=print,
        error_output=_print_error,
        logger=log_event,
        depth=search_minimax.DEFAULT_DEPTH,
        white_player="human",
        black_player="ai",
        seed=None,
        report_timing=False,
    ):
        for kind in (white_player, black_player):
            if kind not in PLAYER_KINDS:
                raise ValueError(f"unknown player kind: {kind!r}")
        if depth < 1:
            raise ValueError(f"search depth must be at least 1: {depth}")
        self.board = board if board is not None else Board()
        self.view = self.board.constant_view()
        self._inputs = [source if source is not None else ConsoleSource()]
        self.output = output
        self.error_output = error_output
        self.logger = logger
        self.depth = depth
        self.default_players = {WHITE: white_player, BLACK: black_player}
        self.players = dict(self.default_players)
        self.rng = random.Random(seed)
        self.report_timing = report_timing
        self.timer = MoveTimer()
        self.stats = []
        self.state = SETUP
        self.running = False

        self._commands = {
            "auto": self.do_auto,
            "manual": self.do_manual,
            "clear": self.do_clear,
            "start": self.do_start,
            "set": self.do_set,
            "dump": self.do_dump,
            "seed": self.do_seed,
            "load": self.do_load,
            "undo": self.do_undo,
            "help": self.do_help,
            "quit": self.do_quit,
            "eof": self.do_quit,
            "move": self.do_move,
            "blank": lambda operands: None,
        }

    def process(self):
        """Run commands and games until quit or end of input."""
        self.do_clear(())
        self.running = True
        while self.running:
            while self.running and self.state == SETUP:
                self.do_command()

            while self.running and self.state == PLAYING and self.board.is_move():
                if not self._play_turn():
                    break

            if self.running and self.state == PLAYING:
                self.report_winner()
                self.do_clear(())

    def _play_turn(self):
        """Get and play one move for the side to move; False if an automated player produced none."""
        color = self.board.whose_move
        player = self.make_player(color)
        if isinstance(player, HumanPlayer):
            try:
                move = player.next_move(self.view)
                if move is None:
                    return True
                referee.check_move(move, self.board, color)
            except GameError as exc:
                self.error_output(str(exc))
                return True
        else:
            with self.timer.timing():
                move = player.next_move(self.view)
            if move is None:
                return False
            self.output(f"{color} moves {move}.")

        self.board.apply(move)
        self.logger(f"Move {len(self.board.history)}: {color} {move}")
        return True

    def make_player(self, color):
        kind = self.players[color]
        if kind == "human":
            return HumanPlayer(color, self)
        if kind == "random":
            return RandomPlayer(color, self.rng)
        return AIPlayer(color, depth=self.depth, stats=self.stats)

    def do_command(self):
        """Read and perform one command, reporting any error."""
        try:
            command = parse_command(self._next_line("qirkat: "))
            self._commands[command.kind](command.operands)
        except GameError as exc:
            self.error_output(str(exc))

    def get_move_command(self, prompt, color):
        """
        Perform commands until one is a move, and return it. Return None if the
        game leaves the playing state first or COLOR is no longer to move.
        """
        while self.running and self.state == PLAYING and self.board.whose_move is color:
            try:
                command = parse_command(self._next_line(prompt))
                if command.kind == "move":
                    return command
                self._commands[command.kind](command.operands)
            except GameError as exc:
                self.error_output(str(exc))
        return None

    def _next_line(self, prompt):
        while self._inputs:
            line = self._inputs[-1].read_line(prompt)
            if line is not None:
                return line
            self._inputs.pop()
        return None

    def report_winner(self):
        self.output(f"{self.board.whose_move.opposite()} wins.")

    # Command processors

    def do_auto(self, operands):
        self.state = SETUP
        self.players[PieceColor.parse(operands[0])] = "ai"

    def do_manual(self, operands):
        self.state = SETUP
        self.players[PieceColor.parse(operands[0])] = "human"

    def do_clear(self, operands):
        self.board.clear()
        self.state = SETUP
        self.players = dict(self.default_players)

    def do_start(self, operands):
        self.state = PLAYING

    def do_set(self, operands):
        color, layout = operands
        self.state = SETUP
        try:
            self.board.set_pieces(layout, PieceColor.parse(color))
        except ValueError as exc:
            raise GameError(str(exc)) from exc

    def do_dump(self, operands):
        self.output(f"===\n{self.board}\n===")

    def do_seed(self, operands):
        self.rng.seed(int(operands[0]))

    def do_load(self, operands):
        path = Path(operands[0])
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except OSError as exc:
            raise GameError(f"cannot open file {path}") from exc
        self._inputs.append(LineSource(lines))

    def do_undo(self, operands):
        """Take back a move; while playing, keep going back to a manual player's turn."""
        try:
            self.board.undo()
        except EmptyHistoryError as exc:
            raise GameError("nothing to undo") from exc
        if self.state == PLAYING:
            while self.board.history and self.players[self.board.whose_move] != "human":
                self.board.undo()

    def do_help(self, operands):
        self.output(HELP_TEXT)

    def do_quit(self, operands):
        if self.report_timing:
            self.output(self.timer.summary())
        self.running = False

    def do_move(self, operands):
        """A move typed while setting up: play it if legal for the side to move."""
        move = parse_move_operand(operands[0])
        referee.check_move(move, self.board)
        self.board.apply(move)
