"""
Board implementation for k-in-a-row games.
"""
from enum import IntEnum

import numpy as np


class Mark(IntEnum):
    """
    Cell state of the board.

    The integer values are the encoding stored in ``Board.state``:
    - 0: empty cell
    - 1: X (moves first)
    - -1: O
    """
    EMPTY = 0
    X = 1
    O = -1

    @property
    def opponent(self):
        """The other player's mark."""
        if self is Mark.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Mark(-self.value)

    @property
    def symbol(self):
        """Single character used when printing the board."""
        return {Mark.X: 'X', Mark.O: 'O'}.get(self, '.')


class Board:
    """
    Represents an n x n board.

    Cells are write-once: a cell holding X or O never changes again.
    Coordinates outside the board read as EMPTY and cannot be written.
    """

    DEFAULT_SIZE = 4

    def __init__(self, size=DEFAULT_SIZE):
        """
        Initialize an empty board.

        Args:
            size (int): Board dimension n (the board is n x n)
        """
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self.state = np.zeros((self.size, self.size), dtype=np.int8)

    def in_bounds(self, row, col):
        """Return True if (row, col) are integers that lie on the board."""
        if not all(isinstance(v, (int, np.integer)) for v in (row, col)):
            return False
        return 0 <= row < self.size and 0 <= col < self.size

    def get_mark(self, row, col):
        """
        Get the mark at a position.

        Args:
            row (int): Row position
            col (int): Column position

        Returns:
            Mark: Mark at (row, col), or Mark.EMPTY if out of bounds
        """
        if not self.in_bounds(row, col):
            return Mark.EMPTY
        return Mark(int(self.state[row, col]))

    def apply_move(self, row, col, mark):
        """
        Place a mark on the board.

        Args:
            row (int): Row position
            col (int): Column position
            mark (Mark): Mark.X or Mark.O

        Returns:
            bool: True if the mark was placed, False if the move is invalid
        """
        # Validate coordinates are in bounds
        if not self.in_bounds(row, col):
            return False

        # Validate cell is empty
        if self.state[row, col] != Mark.EMPTY:
            return False

        # Validate mark value
        if mark not in (Mark.X, Mark.O):
            return False

        self.state[row, col] = mark
        return True

    def get_legal_moves(self):
        """
        Get all empty positions in row-major order.

        Returns:
            list: List of (row, col) tuples
        """
        legal_moves = []
        for row in range(self.size):
            for col in range(self.size):
                if self.state[row, col] == Mark.EMPTY:
                    legal_moves.append((row, col))
        return legal_moves

    def is_full(self):
        """Return True if no cell is empty."""
        return not np.any(self.state == Mark.EMPTY)

    def count(self, mark):
        """Number of cells holding ``mark``."""
        return int(np.count_nonzero(self.state == mark))

    def copy(self):
        """Return an independent copy of this board."""
        board = Board(self.size)
        board.state = self.state.copy()
        return board
