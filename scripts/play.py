#!/usr/bin/env python3
"""
CLI interface for playing k-in-a-row against humans or AI agents.
"""
import argparse
import os
import sys

# Add the parent directory to Python path so we can import kinarow
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from kinarow.ai.agents.factory import AGENT_TYPES, build_agent
from kinarow.core.board import Board, Mark
from kinarow.core.config import GameConfig
from kinarow.core.errors import GameAborted
from kinarow.core.match import play_game
from kinarow.ui.renderers import Renderer, format_board


def get_player_name(mark):
    """Get display name for a mark."""
    return f"Player {mark.symbol}"


def main(argv=None):
    """Main game loop."""
    parser = argparse.ArgumentParser(description='Play k-in-a-row in the terminal')
    parser.add_argument('--size', type=int, default=4, help='Board size n (n x n board)')
    parser.add_argument('--win-streak', type=int, default=3, help='Marks in a row needed to win')
    parser.add_argument('--x', dest='player_x', default='human', choices=sorted(AGENT_TYPES),
                        help='Player for X (moves first)')
    parser.add_argument('--o', dest='player_o', default='smart', choices=sorted(AGENT_TYPES),
                        help='Player for O')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for random players')
    args = parser.parse_args(argv)

    try:
        config = GameConfig(size=args.size, win_streak=args.win_streak)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print("=" * 60)
    print(f"           {config.win_streak} IN A ROW on a {config.size}x{config.size} board")
    print("=" * 60)
    print(f"Rules: Get {config.win_streak} marks in a row, column or diagonal to win.")
    print("X goes first. Enter moves as: row col")
    print("=" * 60)
    print(format_board(Board(config.size)))

    player_x = build_agent(args.player_x, seed=args.seed)
    player_o = build_agent(args.player_o, seed=args.seed)

    try:
        winner = play_game(player_x, player_o, config, renderer=Renderer())
    except GameAborted:
        print("\nThanks for playing!")
        return 0

    print("\n" + "=" * 60)
    if winner == Mark.EMPTY:
        print("GAME OVER - It's a draw!")
    else:
        print(f"GAME OVER - {get_player_name(winner)} wins!")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
