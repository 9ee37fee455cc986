"""Minimax with alpha-beta pruning and a one-ply lookahead at the horizon."""

import logging
import time

from . import heuristic
from ..PieceColor import WHITE


LOGGER = logging.getLogger(__name__)

INF = 10 ** 9
WINNING_VALUE = INF - 1  # a side with no move has lost
DEFAULT_DEPTH = 5


class MinimaxSearcher:
    """Search state for choosing one move for `color`. White maximizes, Black minimizes."""

    def __init__(self, color, depth=DEFAULT_DEPTH, stats=None):
        self.color = color
        self.depth = depth
        self.stats_list = stats

        self.node_counter = 0
        self.start_time = None
        self.best_move = None
        self.root_score = None

    def choose_move(self, board):
        """
        Return the best move for self.color from BOARD, or None if there is no legal move.
        BOARD is never modified; the search runs on copies.
        """
        self.start_time = time.time()
        self.node_counter = 0
        self.best_move = None
        sense = 1 if self.color is WHITE else -1

        root = board.value_copy()
        self.root_score = self.find_move(root, self.depth, True, sense, -INF, INF)

        elapsed = time.time() - self.start_time
        LOGGER.debug(
            "%s: depth %d, %d nodes, %.3fs, score %d, move %s",
            self.color, self.depth, self.node_counter, elapsed, self.root_score, self.best_move,
        )
        if self.stats_list is not None:
            self._record_stats(elapsed)
        return self.best_move

    def find_move(self, board, depth, save_move, sense, alpha, beta):
        """
        Value of BOARD searched DEPTH plies deep, maximizing if SENSE is 1 and
        minimizing if -1. When SAVE_MOVE, the first move reaching the best value
        is kept in self.best_move. Depth 0 and dead ends fall through to
        simple_find_move().
        """
        self.node_counter += 1
        moves = board.get_moves() if depth > 0 else []
        if not moves:
            return self.simple_find_move(board, sense, alpha, beta)

        best = -sense * INF
        for move in moves:
            after = board.value_copy()
            after.apply(move)
            response = self.find_move(after, depth - 1, False, -sense, alpha, beta)

            if sense == 1:
                if response > best:
                    best = response
                    if save_move:
                        self.best_move = move
                    alpha = max(alpha, response)
                    if beta <= alpha:
                        break
            else:
                if response < best:
                    best = response
                    if save_move:
                        self.best_move = move
                    beta = min(beta, response)
                    if beta <= alpha:
                        break
        return best

    def simple_find_move(self, board, sense, alpha, beta):
        """Best static score reachable in one move from BOARD, or a loss if the side to move is stuck."""
        moves = board.get_moves()
        if not moves:
            return -sense * WINNING_VALUE

        best = -sense * INF
        for move in moves:
            self.node_counter += 1
            after = board.value_copy()
            after.apply(move)
            value = heuristic.score_board(after)

            if sense == 1:
                if value >= best:
                    best = value
                    alpha = max(alpha, value)
                    if beta <= alpha:
                        break
            else:
                if value <= best:
                    best = value
                    beta = min(beta, value)
                    if beta <= alpha:
                        break
        return best

    def _record_stats(self, elapsed):
        elapsed = max(elapsed, 1e-9)
        self.stats_list.append({
            "color": str(self.color),
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": elapsed,
            "nps": self.node_counter / elapsed,
            "score": self.root_score,
        })


def choose_move(board, color, depth=DEFAULT_DEPTH, stats=None):
    """Public function to start a search. Instantiates and uses MinimaxSearcher."""
    searcher = MinimaxSearcher(color=color, depth=depth, stats=stats)
    return searcher.choose_move(board)
