"""
Tests for building agents and renderers by name.
"""
import pytest
from kinarow.ai.agents.factory import build_agent
from kinarow.ai.agents.heuristic_agent import HeuristicAgent
from kinarow.ai.agents.human_agent import HumanAgent
from kinarow.ai.agents.naive_agent import NaiveAgent
from kinarow.ai.agents.random_agent import RandomAgent
from kinarow.core.game import Game
from kinarow.ui.renderers import Renderer, VoidRenderer, build_renderer


@pytest.mark.parametrize("name, agent_class", [
    ("human", HumanAgent),
    ("naive", NaiveAgent),
    ("random", RandomAgent),
    ("whatever", RandomAgent),
    ("heuristic", HeuristicAgent),
    ("smart", HeuristicAgent),
    ("Smart", HeuristicAgent),
])
def test_build_agent(name, agent_class):
    """Test that agent names map to agent classes."""
    assert isinstance(build_agent(name), agent_class)


def test_build_agent_seeds_random_agents():
    """Test that the seed reaches random agents."""
    game = Game()
    move1 = build_agent("random", seed=9).select_action(game)
    move2 = build_agent("random", seed=9).select_action(game)
    assert move1 == move2


def test_build_agent_unknown_name():
    """Test that unknown agent names are rejected."""
    with pytest.raises(ValueError, match="Unknown agent type"):
        build_agent("clever")


@pytest.mark.parametrize("name, renderer_class", [
    ("console", Renderer),
    ("void", VoidRenderer),
    ("none", VoidRenderer),
])
def test_build_renderer(name, renderer_class):
    """Test that renderer names map to renderer classes."""
    assert isinstance(build_renderer(name), renderer_class)


def test_build_renderer_unknown_name():
    """Test that unknown renderer names are rejected."""
    with pytest.raises(ValueError, match="Unknown renderer type"):
        build_renderer("fancy")
