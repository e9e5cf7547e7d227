"""
Multi-round tournaments between two agents.
"""
import time

from .board import Mark
from .config import GameConfig
from .match import play_game


class Tournament:
    """
    Plays a series of games between two agents, alternating who moves first.

    In even rounds (0, 2, 4, ...) agent1 plays X; in odd rounds agent2 does.
    Wins are credited to the agent, not to the mark.
    """

    def __init__(self, rounds, agent1, agent2, config=None, renderer=None):
        """
        Args:
            rounds (int): Number of games to play
            agent1: First agent
            agent2: Second agent
            config (GameConfig, optional): Board size and win streak for every game
            renderer (optional): Renderer passed to every game
        """
        if rounds < 0:
            raise ValueError(f"rounds must be non-negative, got {rounds}")
        self.rounds = rounds
        self.agent1 = agent1
        self.agent2 = agent2
        self.config = config or GameConfig()
        self.renderer = renderer

    def play(self, show_progress=False):
        """
        Play all rounds.

        Args:
            show_progress (bool): Print progress while playing

        Returns:
            dict: Results summary
        """
        results = {
            'agent1_wins': 0,
            'agent2_wins': 0,
            'draws': 0,
            'agent1_first': 0,
            'agent2_first': 0,
        }

        start_time = time.time()

        for i in range(self.rounds):
            if i % 2 == 0:
                agent_x, agent_o = self.agent1, self.agent2
                agent1_mark = Mark.X
                results['agent1_first'] += 1
            else:
                agent_x, agent_o = self.agent2, self.agent1
                agent1_mark = Mark.O
                results['agent2_first'] += 1

            winner = play_game(agent_x, agent_o, self.config, self.renderer)

            if winner == Mark.EMPTY:
                results['draws'] += 1
            elif winner == agent1_mark:
                results['agent1_wins'] += 1
            else:
                results['agent2_wins'] += 1

            if show_progress and (i + 1) % max(1, self.rounds // 20) == 0:
                progress = (i + 1) / self.rounds * 100
                print(f"Progress: {progress:.0f}% ({i + 1}/{self.rounds})")

        results['total_games'] = self.rounds
        results['elapsed_time'] = time.time() - start_time
        return results


def format_results(results, name1, name2):
    """
    Format tournament results as the classic results banner.

    Returns:
        str: Multi-line summary
    """
    return "\n".join([
        "######### Results #########",
        f"Player 1, {name1} won: {results['agent1_wins']} rounds",
        f"Player 2, {name2} won: {results['agent2_wins']} rounds",
        f"Ties: {results['draws']}",
    ])
