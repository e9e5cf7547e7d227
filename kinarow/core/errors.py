"""
Exceptions raised by the k-in-a-row engine.

Illegal placements are not exceptions: ``Board.apply_move`` and
``Game.make_move`` report them by returning False.
"""


class InvariantViolation(RuntimeError):
    """A logic defect: state that correct code can never produce."""


class GameAborted(Exception):
    """A player asked to stop the game before it finished."""
