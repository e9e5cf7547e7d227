"""
Naive agent for k-in-a-row.
"""


class NaiveAgent:
    """
    An agent that always plays the first empty cell, scanning row by row
    from the top-left corner.
    """

    def select_action(self, game):
        """
        Select the first legal move in row-major order.

        Args:
            game: Game instance with current board state

        Returns:
            tuple: (row, col) coordinates of selected move, or None if no legal moves
        """
        legal_moves = game.board.get_legal_moves()

        if not legal_moves:
            return None

        return legal_moves[0]
