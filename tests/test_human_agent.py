"""
Tests for HumanAgent class.
"""
import pytest
from kinarow.ai.agents.human_agent import HumanAgent, parse_move
from kinarow.core.board import Mark
from kinarow.core.errors import GameAborted
from kinarow.core.game import Game


class ScriptedInput:
    """Feeds prepared answers to the agent and records the prompts."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.mark.parametrize("text, expected", [
    ("1 2", (1, 2)),
    ("1,2", (1, 2)),
    (" 3 , 0 ", (3, 0)),
    ("12", (1, 2)),
    ("10 11", (10, 11)),
    ("-1 2", (-1, 2)),
    ("abc", None),
    ("1 2 3", None),
    ("", None),
    ("123", None),
])
def test_parse_move(text, expected):
    """Test parsing of coordinate input."""
    assert parse_move(text) == expected


def test_human_agent_valid_move():
    """Test that a legal answer is returned immediately."""
    game = Game()
    inputs = ScriptedInput(["2 3"])
    messages = []

    agent = HumanAgent(input_fn=inputs, output_fn=messages.append)
    assert agent.select_action(game) == (2, 3)
    assert messages == []
    assert "Player X" in inputs.prompts[0]


def test_human_agent_retries_until_legal():
    """Test that bad input, off-board and occupied cells are re-asked."""
    game = Game()
    game.make_move(0, 0)  # X
    inputs = ScriptedInput(["hello", "9 9", "0 0", "1 1"])
    messages = []

    agent = HumanAgent(input_fn=inputs, output_fn=messages.append)
    assert agent.select_action(game) == (1, 1)

    assert len(messages) == 3
    assert "Invalid input" in messages[0]
    assert "Invalid mark position" in messages[1]
    assert "already occupied" in messages[2]
    assert all("Player O" in prompt for prompt in inputs.prompts)


def test_human_agent_does_not_modify_board():
    """Test that the agent only chooses and leaves placement to the game."""
    game = Game()
    agent = HumanAgent(input_fn=ScriptedInput(["1 1"]), output_fn=lambda message: None)

    agent.select_action(game)
    assert game.board.get_mark(1, 1) == Mark.EMPTY


@pytest.mark.parametrize("answer", ["quit", "Q", "exit"])
def test_human_agent_quit(answer):
    """Test that quitting raises GameAborted."""
    agent = HumanAgent(input_fn=ScriptedInput([answer]), output_fn=lambda message: None)
    with pytest.raises(GameAborted):
        agent.select_action(Game())


def test_human_agent_end_of_input():
    """Test that running out of input raises GameAborted."""
    agent = HumanAgent(input_fn=ScriptedInput([]), output_fn=lambda message: None)
    with pytest.raises(GameAborted):
        agent.select_action(Game())
