"""Static evaluation of Qirkat positions (material balance)."""

from ..PieceColor import BLACK, WHITE


def count_pieces(board, color):
    """Number of squares holding COLOR."""
    return sum(1 for p in board.positions if p is color)


def score_board(board):
    """White pieces minus black pieces. Positive favors White, negative favors Black."""
    return count_pieces(board, WHITE) - count_pieces(board, BLACK)
