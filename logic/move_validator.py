"""
Move validator for Tic Tac Toe Classic.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, List, TYPE_CHECKING
from dataclasses import dataclass

import numpy as np

if TYPE_CHECKING:
    from .game_state import GameState


class MoveError(Enum):
    """Why a move was rejected."""
    GAME_ALREADY_OVER = "game_already_over"
    INVALID_INDEX = "invalid_index"
    CELL_OCCUPIED = "cell_occupied"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates Tic Tac Toe moves.

    Rules, checked in this order:
    1. Round must not be over
    2. Index must address a cell (0-8)
    3. Cell must be empty
    """

    @staticmethod
    def is_valid_index(index) -> bool:
        """True for an integer (not bool) in [0, 8]."""
        if isinstance(index, (bool, np.bool_)):
            return False
        if not isinstance(index, (int, np.integer)):
            return False
        return 0 <= index <= 8

    def validate_move(self, game_state: "GameState", index) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place a marker in (0-8).

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error=MoveError.GAME_ALREADY_OVER,
                error_message="Game is already over!",
            )

        if not self.is_valid_index(index):
            return ValidationResult(
                is_valid=False,
                error=MoveError.INVALID_INDEX,
                error_message=f"Invalid cell {index!r}. Must be 0-8.",
            )

        occupant = game_state.get_cell(index)
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error=MoveError.CELL_OCCUPIED,
                error_message=f"Cell {index} is already occupied by {occupant.symbol}",
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: "GameState") -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of playable cell indices (empty once the round is over).
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()
