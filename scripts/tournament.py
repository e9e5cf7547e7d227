#!/usr/bin/env python3
"""
Run a tournament between two agents.

Usage:
    python scripts/tournament.py ROUNDS SIZE WIN_STREAK RENDERER PLAYER1 PLAYER2

Example:
    python scripts/tournament.py 10000 4 3 void smart whatever
"""
import argparse
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from kinarow.ai.agents.factory import AGENT_TYPES, build_agent
from kinarow.core.config import GameConfig
from kinarow.core.errors import GameAborted
from kinarow.core.tournament import Tournament, format_results
from kinarow.ui.renderers import RENDERER_TYPES, build_renderer


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Run a k-in-a-row tournament')
    parser.add_argument('rounds', type=int, help='Number of rounds to play')
    parser.add_argument('size', type=int, help='Board size n (n x n board)')
    parser.add_argument('win_streak', type=int, help='Marks in a row needed to win')
    parser.add_argument('renderer', choices=sorted(RENDERER_TYPES), help='Board renderer')
    parser.add_argument('player1', choices=sorted(AGENT_TYPES), help='First player type')
    parser.add_argument('player2', choices=sorted(AGENT_TYPES), help='Second player type')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for random players')
    parser.add_argument('--progress', action='store_true', help='Print progress while playing')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        config = GameConfig(size=args.size, win_streak=args.win_streak)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    seed2 = None if args.seed is None else args.seed + 1
    tournament = Tournament(
        args.rounds,
        build_agent(args.player1, seed=args.seed),
        build_agent(args.player2, seed=seed2),
        config=config,
        renderer=build_renderer(args.renderer),
    )

    try:
        results = tournament.play(show_progress=args.progress)
    except GameAborted as e:
        print(f"\n{e}. Tournament stopped.")
        return 1

    print(format_results(results, args.player1, args.player2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
