"""Player interface and the manual, minimax and random controllers."""

from .ai import search_minimax
from .engine.commands import parse_move_operand


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, board):
        """Return a Move for the side to move on BOARD, or None if there is none to give."""
        raise NotImplementedError


class HumanPlayer(Player):
    """Takes its moves from the game's command stream, so other commands may be typed meanwhile."""

    def __init__(self, color, game):
        super().__init__(color)
        self.game = game
        self.prompt = f"{color}: "

    def next_move(self, board):
        command = self.game.get_move_command(self.prompt, self.color)
        if command is None:
            return None
        return parse_move_operand(command.operands[0])


class AIPlayer(Player):
    def __init__(self, color, depth=search_minimax.DEFAULT_DEPTH, stats=None):
        super().__init__(color)
        self.depth = depth
        self.stats = stats

    def next_move(self, board):
        return search_minimax.choose_move(board, self.color, depth=self.depth, stats=self.stats)


class RandomPlayer(Player):
    """Plays a uniformly random legal move drawn from an explicit generator."""

    def __init__(self, color, rng):
        super().__init__(color)
        self.rng = rng

    def next_move(self, board):
        moves = board.get_moves()
        if not moves:
            return None
        return self.rng.choice(moves)
