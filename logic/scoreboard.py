"""
Session scoreboard for Tic Tac Toe Classic.
Counts finished rounds. Lives in memory only.
"""

from dataclasses import dataclass

from .game_state import Player
from .win_checker import Outcome, Win, Tie


@dataclass
class Scoreboard:
    """Wins per player and ties, accumulated over a session."""
    x_wins: int = 0
    o_wins: int = 0
    ties: int = 0

    @property
    def rounds_played(self) -> int:
        return self.x_wins + self.o_wins + self.ties

    def record(self, outcome: Outcome) -> bool:
        """
        Count a finished round.

        Args:
            outcome: Outcome of the round.

        Returns:
            True if something was counted, False for an unfinished round.
        """
        if isinstance(outcome, Win):
            if outcome.player == Player.X:
                self.x_wins += 1
            else:
                self.o_wins += 1
            return True
        if isinstance(outcome, Tie):
            self.ties += 1
            return True
        return False

    def clear(self):
        self.x_wins = 0
        self.o_wins = 0
        self.ties = 0

    def format(self, template: str = "X: {x}  O: {o}") -> str:
        return template.format(x=self.x_wins, o=self.o_wins, ties=self.ties)
