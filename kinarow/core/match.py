"""
Play a full game between two agents.
"""
from .board import Mark
from .errors import InvariantViolation
from .game import Game


def play_game(agent_x, agent_o, config=None, renderer=None):
    """
    Play a single game between two agents.

    Args:
        agent_x: Agent playing X (goes first)
        agent_o: Agent playing O
        config (GameConfig, optional): Board size and win streak
        renderer (optional): Object with ``render_board(board)``, called after
            every accepted move

    Returns:
        Mark: Winning mark, or Mark.EMPTY for a draw

    Raises:
        InvariantViolation: If an agent fails to produce a legal move
    """
    game = Game(config)

    while not game.is_over:
        player = game.current_player
        current_agent = agent_x if player == Mark.X else agent_o

        move = current_agent.select_action(game)
        if move is None:
            raise InvariantViolation(f"{type(current_agent).__name__} returned no move for {player.symbol}")

        if not game.make_move(*move):
            raise InvariantViolation(
                f"{type(current_agent).__name__} chose illegal move {move} for {player.symbol}")

        if renderer is not None:
            renderer.render_board(game.board)

    if game.game_state == 'win':
        return game.winner
    return Mark.EMPTY
