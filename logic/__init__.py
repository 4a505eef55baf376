"""
Logic module for Tic Tac Toe Classic.
Handles game state, rules, outcome detection and session scores.
"""

__version__ = "1.0.0"

from .win_checker import WinChecker, Outcome, InProgress, Win, Tie
from .move_validator import MoveValidator, MoveError, ValidationResult
from .game_state import (
    GameState,
    Player,
    Phase,
    Move,
    MoveResult,
    MoveStatus,
    index_to_cell,
    cell_to_index,
)
from .scoreboard import Scoreboard
from .session import GameSession
