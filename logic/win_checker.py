"""
Win checker for Tic Tac Toe Classic.
Checks if a player has won or if the round is a tie.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np


Line = Tuple[int, int, int]


@dataclass(frozen=True)
class InProgress:
    """Nobody has won and there are empty cells left."""


@dataclass(frozen=True)
class Win:
    """A player filled a whole line."""
    player: int             # Player marker (logic.game_state.Player)
    line: Line              # Cell indices of the winning line


@dataclass(frozen=True)
class Tie:
    """Board is full and no line is complete."""


Outcome = Union[InProgress, Win, Tie]


class WinChecker:
    """
    Checks for win conditions in Tic Tac Toe.

    Win condition: 3 markers of the same player in a row
    (horizontally, vertically, or diagonally).

    Lines are always checked in WINNING_LINES order, so when more than one
    line is complete the first one listed is reported.
    """

    # All possible winning lines, as flat cell indices
    WINNING_LINES: Tuple[Line, ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def __init__(self):
        self._lines = np.array(self.WINNING_LINES, dtype=np.intp)

    def get_winning_line(self, board: np.ndarray) -> Optional[Line]:
        """
        Get the first complete line on the board.

        Args:
            board: Flat array of 9 markers (0 = empty).

        Returns:
            The winning line as a tuple of indices, or None.
        """
        cells = np.asarray(board)[self._lines]          # shape (8, 3)
        complete = (cells[:, 0] != 0) & (cells[:, 0] == cells[:, 1]) & (cells[:, 1] == cells[:, 2])
        hits = np.flatnonzero(complete)
        if hits.size == 0:
            return None
        return self.WINNING_LINES[int(hits[0])]

    def check_winner(self, board: np.ndarray) -> Optional[int]:
        """
        Check if there's a winner.

        Returns:
            The winning marker, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return int(np.asarray(board)[line[0]])

    def evaluate(self, board: np.ndarray, move_count: int) -> Outcome:
        """
        Work out the outcome of a position.

        Args:
            board: Flat array of 9 markers (0 = empty).
            move_count: Number of filled cells.

        Returns:
            Win for the first complete line, Tie on a full board,
            otherwise InProgress.
        """
        line = self.get_winning_line(board)
        if line is not None:
            return Win(int(np.asarray(board)[line[0]]), line)

        if move_count == len(board):
            return Tie()

        return InProgress()
