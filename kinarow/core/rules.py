"""
Win and draw detection.
"""
import numpy as np

from .board import Mark
from .errors import InvariantViolation
from .lines import DIRECTIONS, scan


def has_won(board, mark, win_streak):
    """
    Check whether ``mark`` has a run of at least ``win_streak`` anywhere on
    the board, in a row, column or any diagonal.

    Only the mark that just moved needs checking: a move never creates a win
    for the opponent.

    Args:
        board: Board instance
        mark (Mark): Mark.X or Mark.O, with at least one cell on the board
        win_streak (int): Run length required to win

    Returns:
        bool: True if the mark has a winning run

    Raises:
        InvariantViolation: If ``mark`` is EMPTY or has no cells on the board
    """
    if mark == Mark.EMPTY:
        raise InvariantViolation("Cannot check a win for an empty mark")

    cells = np.argwhere(board.state == mark)
    if len(cells) == 0:
        raise InvariantViolation(f"No {Mark(mark).symbol} marks on the board")

    for row, col in cells:
        pivot = (int(row), int(col))
        for direction in DIRECTIONS:
            # The pivot already holds ``mark``, so the scan measures real runs
            if scan(board, pivot, mark, direction) >= win_streak:
                return True
    return False


def find_winner(board, win_streak):
    """
    Find a mark with a winning run.

    Returns:
        Mark or None: Winning mark, or None if nobody has won
    """
    for mark in (Mark.X, Mark.O):
        if board.count(mark) and has_won(board, mark, win_streak):
            return mark
    return None


def is_draw(board, win_streak):
    """
    Check if the board is a draw: full with no winner.
    A full board whose last move completed a run is a win, not a draw.
    """
    if not board.is_full():
        return False
    return find_winner(board, win_streak) is None
