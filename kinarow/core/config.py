"""
Game configuration.
"""
from typing import Any, Dict


class GameConfig:
    """Configuration for a single game (board size and winning streak)."""

    def __init__(self,
                 size: int = 4,
                 win_streak: int = 3):
        # k > 2n - 1 is accepted; it only makes the game unwinnable
        for name, value in (('size', size), ('win_streak', win_streak)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"{name} must be positive, got {value}")

        self.size = size
        self.win_streak = win_streak

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'size': self.size,
            'win_streak': self.win_streak,
        }

    def __eq__(self, other):
        if not isinstance(other, GameConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"GameConfig(size={self.size}, win_streak={self.win_streak})"
