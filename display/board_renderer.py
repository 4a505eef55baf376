"""
Board renderer for Tic Tac Toe Classic.
Draws the game board as an image and converts clicks to cell indices.
"""

import time
from pathlib import Path
from typing import Optional

import cv2
import numpy as np

from logic.game_state import GameState, Player
from logic.win_checker import Win, Tie
from .config import DisplayConfig


class BoardRenderer:
    """
    Renders a GameState into a BGR image (numpy array).

    Shows:
    - The 3x3 grid
    - X as a cross, O as a ring
    - Index hints in empty cells
    - When a round is won: winning cells tinted, the rest dimmed
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or DisplayConfig()

    @property
    def size(self) -> int:
        return self.config.CELL_IMAGE_SIZE * self.config.BOARD_SIZE

    def player_color(self, player: Player):
        return self.config.X_COLOR if player == Player.X else self.config.O_COLOR

    def render(self, game_state: GameState) -> np.ndarray:
        """
        Draw the board.

        Args:
            game_state: State to draw.

        Returns:
            BGR image of shape (size, size, 3).
        """
        cfg = self.config
        cell_size = cfg.CELL_IMAGE_SIZE
        size = self.size

        image = np.zeros((size, size, 3), dtype=np.uint8)
        image[:] = cfg.CELL_BG_COLOR

        for index in range(cfg.BOARD_SIZE * cfg.BOARD_SIZE):
            player = game_state.get_cell(index)
            if player is not None:
                self._draw_marker(image, index, player)
            elif cfg.SHOW_CELL_INDEX and not game_state.is_game_over:
                self._draw_index(image, index)

        outcome = game_state.evaluate()
        if isinstance(outcome, Win):
            self._highlight(image, outcome.line, self.player_color(outcome.player))

        # Grid lines go on last so dimming doesn't fade them
        for i in range(1, cfg.BOARD_SIZE):
            pos = i * cell_size
            cv2.line(image, (pos, 0), (pos, size), cfg.GRID_COLOR, cfg.GRID_LINE_THICKNESS)
            cv2.line(image, (0, pos), (size, pos), cfg.GRID_COLOR, cfg.GRID_LINE_THICKNESS)

        if isinstance(outcome, Tie):
            cv2.rectangle(image, (0, 0), (size - 1, size - 1), cfg.TIE_COLOR, cfg.GRID_LINE_THICKNESS)

        return image

    def _cell_origin(self, index: int):
        cell_size = self.config.CELL_IMAGE_SIZE
        row, col = divmod(index, self.config.BOARD_SIZE)
        return col * cell_size, row * cell_size

    def _draw_marker(self, image: np.ndarray, index: int, player: Player):
        cfg = self.config
        x0, y0 = self._cell_origin(index)
        cx = x0 + cfg.CELL_IMAGE_SIZE // 2
        cy = y0 + cfg.CELL_IMAGE_SIZE // 2
        marker_size = cfg.CELL_IMAGE_SIZE // 2 - cfg.MARKER_MARGIN
        color = self.player_color(player)

        if player == Player.X:
            cv2.line(image,
                     (cx - marker_size, cy - marker_size),
                     (cx + marker_size, cy + marker_size),
                     color, cfg.MARKER_THICKNESS)
            cv2.line(image,
                     (cx + marker_size, cy - marker_size),
                     (cx - marker_size, cy + marker_size),
                     color, cfg.MARKER_THICKNESS)
        else:
            cv2.circle(image, (cx, cy), marker_size, color, cfg.MARKER_THICKNESS)

    def _draw_index(self, image: np.ndarray, index: int):
        x0, y0 = self._cell_origin(index)
        cv2.putText(image, str(index), (x0 + 8, y0 + 24),
                    self.config.FONT, 0.6, self.config.INDEX_COLOR, 1)

    def _highlight(self, image: np.ndarray, line, color):
        """Tint the winning cells and dim all others."""
        cfg = self.config
        cell_size = cfg.CELL_IMAGE_SIZE
        background = np.array(cfg.CELL_BG_COLOR, dtype=np.float32)
        tint = np.array(color, dtype=np.float32)

        for index in range(cfg.BOARD_SIZE * cfg.BOARD_SIZE):
            x0, y0 = self._cell_origin(index)
            cell = image[y0:y0 + cell_size, x0:x0 + cell_size].astype(np.float32)
            if index in line:
                cell = cell * (1 - cfg.WIN_TINT_ALPHA) + tint * cfg.WIN_TINT_ALPHA
            else:
                cell = cell * cfg.DIM_ALPHA + background * (1 - cfg.DIM_ALPHA)
            image[y0:y0 + cell_size, x0:x0 + cell_size] = cell.astype(np.uint8)

    def cell_at(self, x: float, y: float, width: Optional[int] = None,
                height: Optional[int] = None) -> Optional[int]:
        """
        Convert a click position to a cell index.

        Args:
            x, y: Click position in pixels.
            width, height: Displayed board size, if it was scaled.

        Returns:
            Cell index (0-8), or None if the click is outside the board.
        """
        width = width or self.size
        height = height or self.size
        if not (0 <= x < width and 0 <= y < height):
            return None
        col = int(x * self.config.BOARD_SIZE // width)
        row = int(y * self.config.BOARD_SIZE // height)
        return row * self.config.BOARD_SIZE + col

    @staticmethod
    def to_rgb(image: np.ndarray) -> np.ndarray:
        """Convert a rendered (BGR) board to RGB for PIL."""
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

    def save(self, image: np.ndarray, path: Optional[str] = None) -> Optional[str]:
        """
        Save a rendered board as an image file.

        Args:
            image: Rendered board.
            path: Output file. Defaults to a timestamped PNG in SNAPSHOT_DIR.

        Returns:
            The path written, or None if OpenCV could not write it.
        """
        if path is None:
            path = str(Path(self.config.SNAPSHOT_DIR) / f"board_{int(time.time())}.png")

        Path(path).parent.mkdir(parents=True, exist_ok=True)
        if not cv2.imwrite(path, image):
            print(f"ERROR: Could not save board snapshot to {path}")
            return None

        print(f"Saved board snapshot to {path}")
        return path
