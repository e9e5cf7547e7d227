"""
Random agent for k-in-a-row.
"""
import random

from ...core.board import Mark


class RandomAgent:
    """
    An agent that plays random legal moves.

    It draws uniformly random cells until it hits an empty one, so every
    empty cell is equally likely.
    """

    def __init__(self, seed=None, rng=None):
        """
        Initialize the random agent.

        Args:
            seed (int, optional): Random seed for reproducible behavior
            rng (random.Random, optional): Random source to use instead of seed
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def select_action(self, game):
        """
        Select a random legal move from the current game state.

        Args:
            game: Game instance with current board state

        Returns:
            tuple: (row, col) coordinates of selected move, or None if no legal moves
        """
        board = game.board

        if board.is_full():
            return None

        while True:
            row = self.rng.randrange(board.size)
            col = self.rng.randrange(board.size)
            if board.get_mark(row, col) == Mark.EMPTY:
                return (row, col)
