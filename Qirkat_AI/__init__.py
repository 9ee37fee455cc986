"""Qirkat_AI package exports."""

from .PieceColor import PieceColor, EMPTY, WHITE, BLACK
from .Move import Move, parse_move
from .Board import Board, ReadOnlyBoard, IllegalMoveError, EmptyHistoryError
from .Player import Player, HumanPlayer, AIPlayer, RandomPlayer
from .Qirkatgame import Qirkatgame

__all__ = [
    "PieceColor",
    "EMPTY",
    "WHITE",
    "BLACK",
    "Move",
    "parse_move",
    "Board",
    "ReadOnlyBoard",
    "IllegalMoveError",
    "EmptyHistoryError",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "RandomPlayer",
    "Qirkatgame",
]
