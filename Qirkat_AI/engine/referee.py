"""Validation of moves supplied from outside the engine (manual players)."""

from .commands import GameError


def check_move(move, board, color=None):
    """
    Validate MOVE for the side to move on BOARD (optionally also checking that
    COLOR is that side). Raises GameError with a user-facing reason.
    """
    if color is not None and board.whose_move is not color:
        raise GameError(f"it is not {color}'s move")
    if move is None:
        raise GameError("no move given")
    if move in board.get_moves():
        return True

    if board.jump_possible():
        if not move.is_jump:
            raise GameError("a capture is available and must be taken")
        if board.check_jump(move):
            raise GameError(f"capture {move} must be continued")
    raise GameError(f"illegal move: {move}")
