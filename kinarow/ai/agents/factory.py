"""
Build agents by name, as used by the command-line scripts.
"""
from .heuristic_agent import HeuristicAgent
from .human_agent import HumanAgent
from .naive_agent import NaiveAgent
from .random_agent import RandomAgent

AGENT_TYPES = {
    'human': HumanAgent,
    'naive': NaiveAgent,
    'random': RandomAgent,
    'whatever': RandomAgent,
    'heuristic': HeuristicAgent,
    'smart': HeuristicAgent,
}


def build_agent(name, seed=None):
    """
    Create an agent from its type name.

    Args:
        name (str): One of AGENT_TYPES (case-insensitive)
        seed (int, optional): Seed for agents that use randomness

    Returns:
        Agent instance with a ``select_action(game)`` method
    """
    key = name.strip().lower()
    if key not in AGENT_TYPES:
        raise ValueError(f"Unknown agent type: {name!r} (choose from {', '.join(sorted(AGENT_TYPES))})")

    agent_class = AGENT_TYPES[key]
    if agent_class is RandomAgent:
        return RandomAgent(seed=seed)
    return agent_class()
