"""
Game state management for Tic Tac Toe Classic.
Tracks the board, current player, move count and round status.

The board is a flat length-9 numpy array, addressed by a linear index:
row = index // 3, col = index % 3.
"""

from enum import Enum, IntEnum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np

from .win_checker import WinChecker, Outcome, InProgress, Win, Tie
from .move_validator import MoveValidator, MoveError


BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

# Value stored in an empty board cell
EMPTY = 0


class Player(IntEnum):
    """The two players. The value is the marker stored on the board."""
    X = 1
    O = 2

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def symbol(self) -> str:
        return self.name


class Phase(Enum):
    """Round lifecycle."""
    IN_ROUND = "in_round"
    ROUND_OVER = "round_over"


class MoveStatus(Enum):
    """What happened to an attempted move."""
    CONTINUE = "continue"
    ROUND_OVER = "round_over"
    CELL_OCCUPIED = "cell_occupied"
    GAME_ALREADY_OVER = "game_already_over"
    INVALID_INDEX = "invalid_index"


_ERROR_STATUS = {
    MoveError.CELL_OCCUPIED: MoveStatus.CELL_OCCUPIED,
    MoveError.GAME_ALREADY_OVER: MoveStatus.GAME_ALREADY_OVER,
    MoveError.INVALID_INDEX: MoveStatus.INVALID_INDEX,
}


def index_to_cell(index: int) -> Tuple[int, int]:
    """
    Convert a linear cell index to (row, col).

    Raises:
        ValueError: If index is not in [0, 8].
    """
    if not MoveValidator.is_valid_index(index):
        raise ValueError(f"Invalid cell index {index!r}. Must be 0-8.")
    return int(index) // BOARD_SIZE, int(index) % BOARD_SIZE


def cell_to_index(row: int, col: int) -> int:
    """
    Convert (row, col) to a linear cell index.

    Raises:
        ValueError: If row or col is not in [0, 2].
    """
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ValueError(f"Invalid position ({row}, {col}). Must be 0-2.")
    return row * BOARD_SIZE + col


@dataclass(frozen=True)
class Move:
    """
    An accepted move in the current round.
    """
    player: Player          # Who made the move
    index: int              # Cell index (0-8)
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # 1 for the first move of the round, up to 9


@dataclass(frozen=True)
class MoveResult:
    """
    Result of GameState.attempt_move().

    Rejections are reported through status, never raised.
    """
    status: MoveStatus
    index: object
    player: Player          # Player who moved, or whose turn it still is
    outcome: Outcome
    message: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.status in (MoveStatus.CONTINUE, MoveStatus.ROUND_OVER)


@dataclass(eq=False)
class GameState:
    """
    The complete state of one round of Tic Tac Toe.

    Tracks:
    - The 3x3 board (flat array of markers)
    - Current player
    - How many cells are filled
    - Move history for the round
    - Whether the round is over

    All changes go through attempt_move() and reset(). Nothing here
    prints or touches the UI.
    """

    # The 3x3 board - EMPTY or a Player value per cell
    board: np.ndarray = field(
        default_factory=lambda: np.full(NUM_CELLS, EMPTY, dtype=np.int8)
    )

    # Current player's turn
    current_player: Player = Player.X

    # Number of non-empty cells (0-9)
    move_count: int = 0

    # Moves made this round
    moves: List[Move] = field(default_factory=list)

    is_game_over: bool = False

    win_checker: WinChecker = field(default_factory=WinChecker, repr=False, compare=False)
    validator: MoveValidator = field(default_factory=MoveValidator, repr=False, compare=False)

    @property
    def phase(self) -> Phase:
        return Phase.ROUND_OVER if self.is_game_over else Phase.IN_ROUND

    def get_cell(self, index: int) -> Optional[Player]:
        """
        Get the player occupying a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            The Player, or None if the cell is empty.
        """
        row, col = index_to_cell(index)
        value = int(self.board[row * BOARD_SIZE + col])
        return None if value == EMPTY else Player(value)

    def grid(self) -> List[List[Optional[Player]]]:
        """The board as a 3x3 list of rows."""
        return [
            [self.get_cell(row * BOARD_SIZE + col) for col in range(BOARD_SIZE)]
            for row in range(BOARD_SIZE)
        ]

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell indices in ascending order.
        """
        return [int(i) for i in np.flatnonzero(self.board == EMPTY)]

    def attempt_move(self, index: int) -> MoveResult:
        """
        Try to place the current player's marker at index.

        Args:
            index: Cell index (0-8).

        Returns:
            MoveResult. CONTINUE or ROUND_OVER when the move was made,
            otherwise the reason it was rejected (state unchanged).
        """
        validation = self.validator.validate_move(self, index)
        if not validation.is_valid:
            return MoveResult(
                status=_ERROR_STATUS[validation.error],
                index=index,
                player=self.current_player,
                outcome=self.evaluate(),
                message=validation.error_message,
            )

        player = self.current_player
        row, col = index_to_cell(index)
        self.board[index] = player.value
        self.move_count += 1
        self.moves.append(Move(
            player=player,
            index=int(index),
            row=row,
            col=col,
            move_number=self.move_count,
        ))

        outcome = self.evaluate()
        if isinstance(outcome, InProgress):
            self.current_player = player.opposite()
            return MoveResult(MoveStatus.CONTINUE, int(index), player, outcome)

        self.is_game_over = True
        return MoveResult(MoveStatus.ROUND_OVER, int(index), player, outcome)

    def evaluate(self) -> Outcome:
        """Evaluate the board. Pure; does not change any state."""
        outcome = self.win_checker.evaluate(self.board, self.move_count)
        if isinstance(outcome, Win):
            # Board stores raw markers; hand back the Player enum
            return Win(Player(outcome.player), outcome.line)
        return outcome

    def reset(self):
        """Start a new round: empty board, X to move."""
        self.board[:] = EMPTY
        self.move_count = 0
        self.current_player = Player.X
        self.moves.clear()
        self.is_game_over = False

    @property
    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            move_count=self.move_count,
            moves=list(self.moves),
            is_game_over=self.is_game_over,
        )

    def render_text(self) -> str:
        """
        Plain-text picture of the board.

        Empty cells show their index so console players know what to type.
        """
        lines = ["", "  0   1   2"]
        lines.append("+---+---+---+")
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                index = row * BOARD_SIZE + col
                player = self.get_cell(index)
                cells.append(player.symbol if player else str(index))
            lines.append(f"| {' | '.join(cells)} | {row}")
            lines.append("+---+---+---+")

        outcome = self.evaluate()
        if isinstance(outcome, Win):
            lines.append(f"{outcome.player.symbol} WINS!")
        elif isinstance(outcome, Tie):
            lines.append("It's a TIE!")
        else:
            lines.append(f"Current turn: {self.current_player.symbol}")
        return "\n".join(lines)
