"""
Human agent that reads moves from a text prompt.
"""
from ...core.board import Mark
from ...core.errors import GameAborted

QUIT_WORDS = ('quit', 'exit', 'q')


def parse_move(move_input):
    """
    Parse move input from user.

    Args:
        move_input (str): User input like "1 2", "1,2" or "12"

    Returns:
        tuple: (row, col) or None if the text is not a coordinate pair
    """
    text = move_input.strip()
    try:
        # Handle both space and comma separated input
        if ',' in text:
            parts = text.split(',')
        else:
            parts = text.split()

        # A single two-digit number: tens digit is the row, ones digit the column
        if len(parts) == 1 and len(parts[0]) == 2 and parts[0].isdigit():
            return (int(parts[0][0]), int(parts[0][1]))

        if len(parts) != 2:
            return None

        return (int(parts[0].strip()), int(parts[1].strip()))

    except ValueError:
        return None


class HumanAgent:
    """
    An agent controlled by a person typing coordinates.

    Keeps asking until it gets an in-bounds, empty cell.
    """

    def __init__(self, input_fn=input, output_fn=print):
        """
        Args:
            input_fn (callable): Reads one line given a prompt
            output_fn (callable): Shows feedback messages
        """
        self.input_fn = input_fn
        self.output_fn = output_fn

    def select_action(self, game):
        """
        Ask the player for a move.

        Returns:
            tuple: (row, col) of an empty cell, or None if no legal moves

        Raises:
            GameAborted: If the player quits or input ends
        """
        board = game.board
        if board.is_full():
            return None

        player_name = Mark(game.current_player).symbol
        prompt = f"Player {player_name}, type coordinates (row col) or 'quit': "

        while True:
            try:
                move_input = self.input_fn(prompt)
            except (KeyboardInterrupt, EOFError):
                raise GameAborted(f"Player {player_name} left the game")

            if move_input.strip().lower() in QUIT_WORDS:
                raise GameAborted(f"Player {player_name} quit")

            move = parse_move(move_input)
            if move is None:
                self.output_fn("Invalid input! Please enter: row col (e.g., '1 2')")
                continue

            row, col = move
            if not board.in_bounds(row, col):
                self.output_fn("Invalid mark position. Please choose a valid position.")
                continue
            if board.get_mark(row, col) != Mark.EMPTY:
                self.output_fn(f"Position ({row}, {col}) is already occupied!")
                continue

            return (row, col)
