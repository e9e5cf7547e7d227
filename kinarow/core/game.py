"""
Game implementation for k-in-a-row.
"""
from .board import Board, Mark
from .config import GameConfig
from .rules import has_won, is_draw


class Game:
    """
    Manages a single k-in-a-row game.

    Handles turn management and the game state. X moves first; the game
    ends the moment a player completes a run of ``win_streak`` marks or the
    board fills up.
    """

    def __init__(self, config=None):
        """
        Initialize a new game.

        Args:
            config (GameConfig, optional): Board size and win streak
        """
        self.config = config or GameConfig()
        self.board = Board(self.config.size)
        self.current_player = Mark.X
        self._winner = None
        self._is_draw = False

    @property
    def win_streak(self):
        """Number of consecutive marks needed to win."""
        return self.config.win_streak

    @property
    def game_state(self):
        """
        Get the current game state.

        Returns:
            str: One of 'ongoing', 'win', 'draw'
        """
        if self._winner is not None:
            return 'win'
        elif self._is_draw:
            return 'draw'
        else:
            return 'ongoing'

    @property
    def winner(self):
        """
        Get the winner of the game.

        Returns:
            Mark or None: Winning mark, or None if no winner
        """
        return self._winner

    @property
    def is_over(self):
        """True once the game has been won or drawn."""
        return self.game_state != 'ongoing'

    def make_move(self, row, col):
        """
        Make a move for the current player.

        Args:
            row (int): Row position
            col (int): Column position

        Returns:
            bool: True if move was successful, False if invalid or game over
        """
        # Can't make moves if game is already over
        if self.is_over:
            return False

        if not self.board.apply_move(row, col, self.current_player):
            return False  # Out of bounds or occupied

        # Win is checked before fullness: a winning last move is not a draw
        if has_won(self.board, self.current_player, self.win_streak):
            self._winner = Mark(self.current_player)
        elif is_draw(self.board, self.win_streak):
            self._is_draw = True
        else:
            self.current_player = Mark(-self.current_player)

        return True
