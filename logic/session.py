"""
Game session for Tic Tac Toe Classic.

A session is one or more rounds on the same device. It owns the round's
GameState and the running Scoreboard, and is the only object a front end
needs to hold.
"""

from dataclasses import dataclass, field

from .game_state import GameState, MoveResult, MoveStatus
from .scoreboard import Scoreboard


@dataclass
class GameSession:
    """
    One GameState plus the scores that survive round resets.

    Game flow:
    1. Front end forwards a cell selection to play()
    2. GameState accepts or rejects it
    3. A finished round is counted on the scoreboard
    4. new_round() clears the board, scores stay
    """

    game_state: GameState = field(default_factory=GameState)
    scoreboard: Scoreboard = field(default_factory=Scoreboard)

    def play(self, index) -> MoveResult:
        """
        Play the current player's marker at index.

        Args:
            index: Cell index (0-8).

        Returns:
            The MoveResult from GameState.attempt_move().
        """
        result = self.game_state.attempt_move(index)
        if result.status == MoveStatus.ROUND_OVER:
            self.scoreboard.record(result.outcome)
        return result

    def new_round(self):
        """Clear the board for another round; scores are kept."""
        self.game_state.reset()

    @property
    def is_round_over(self) -> bool:
        return self.game_state.is_game_over
