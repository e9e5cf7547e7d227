"""
Tests for Game class.
"""
import pytest
from kinarow.core.board import Board, Mark
from kinarow.core.config import GameConfig
from kinarow.core.game import Game


def play_moves(game, moves):
    for move in moves:
        assert game.make_move(*move) == True, f"Move {move} should be accepted"


def test_game_initialization():
    """Test that a game is initialized correctly."""
    game = Game()

    assert isinstance(game.board, Board)
    assert game.board.size == 4
    assert game.win_streak == 3

    # X goes first
    assert game.current_player == Mark.X

    assert game.game_state == 'ongoing'
    assert game.winner is None
    assert game.is_over == False
    assert len(game.board.get_legal_moves()) == 16


def test_game_with_config():
    """Test that the configuration sets board size and streak."""
    game = Game(GameConfig(size=6, win_streak=4))
    assert game.board.size == 6
    assert game.win_streak == 4
    assert len(game.board.get_legal_moves()) == 36


def test_valid_move_processing():
    """Test that valid moves are processed correctly."""
    game = Game()

    assert game.make_move(1, 1) == True
    assert game.board.get_mark(1, 1) == Mark.X
    assert game.current_player == Mark.O

    assert game.make_move(2, 2) == True
    assert game.board.get_mark(2, 2) == Mark.O
    assert game.current_player == Mark.X
    assert game.game_state == 'ongoing'


def test_invalid_move_rejection():
    """Test that invalid moves are rejected without passing the turn."""
    game = Game()

    assert game.make_move(-1, 2) == False
    assert game.make_move(4, 0) == False
    assert game.current_player == Mark.X

    game.make_move(1, 1)
    assert game.make_move(1, 1) == False, "Occupied position should be rejected"
    assert game.current_player == Mark.O
    assert game.board.get_mark(1, 1) == Mark.X


def test_win_detection_after_move():
    """Test that a completed run ends the game."""
    game = Game()
    play_moves(game, [(0, 0), (1, 0), (0, 1), (1, 1)])
    assert game.game_state == 'ongoing'

    assert game.make_move(0, 2) == True
    assert game.game_state == 'win'
    assert game.winner == Mark.X
    assert game.is_over == True

    # Current player does not switch after the winning move
    assert game.current_player == Mark.X


def test_win_detection_second_player():
    """Test that O wins are detected."""
    game = Game()
    play_moves(game, [(0, 0), (1, 1), (3, 0), (2, 2), (0, 3), (3, 3)])

    assert game.game_state == 'win'
    assert game.winner == Mark.O


def test_game_over_move_rejection():
    """Test that moves are rejected once the game is over."""
    game = Game()
    play_moves(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    assert game.game_state == 'win'

    assert game.make_move(3, 3) == False
    assert game.board.get_mark(3, 3) == Mark.EMPTY


def test_draw_detection_after_move():
    """Test that a full board without a winner ends in a draw."""
    game = Game(GameConfig(size=3, win_streak=3))
    play_moves(game, [
        (0, 0), (0, 1), (0, 2), (1, 1), (1, 0),
        (2, 0), (2, 1), (1, 2),
    ])
    assert game.game_state == 'ongoing'

    assert game.make_move(2, 2) == True
    assert game.game_state == 'draw'
    assert game.winner is None
    assert game.make_move(0, 0) == False


def test_win_on_last_cell_beats_draw():
    """Test that filling the board with a winning move is a win."""
    game = Game(GameConfig(size=3, win_streak=3))
    play_moves(game, [
        (1, 2), (1, 0), (2, 0), (1, 1), (0, 0),
        (2, 1), (0, 1), (2, 2),
    ])
    assert game.game_state == 'ongoing'

    assert game.make_move(0, 2) == True
    assert game.board.is_full()
    assert game.game_state == 'win'
    assert game.winner == Mark.X


def test_single_cell_games():
    """Test degenerate one-cell boards."""
    game = Game(GameConfig(size=1, win_streak=1))
    assert game.make_move(0, 0) == True
    assert game.winner == Mark.X

    game = Game(GameConfig(size=1, win_streak=2))
    assert game.make_move(0, 0) == True
    assert game.game_state == 'draw'


def test_is_over_property():
    """Test that is_over follows the game state."""
    game = Game()
    assert game.is_over == False

    play_moves(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    assert game.is_over == True
    assert Game.is_over.__doc__
