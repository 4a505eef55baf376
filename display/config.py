"""
Display configuration for Tic Tac Toe Classic.
All the settings for the board image, window and labels.

Setup:
    pip install opencv-python-headless numpy Pillow
"""

import cv2


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the game.
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe Classic"
    WINDOW_BG = '#1a1a2e'
    WINDOW_MIN_WIDTH = 420
    WINDOW_MIN_HEIGHT = 560

    # ==================== BOARD IMAGE ====================
    # Rendered board is square, 3x3 cells
    BOARD_SIZE = 3
    BOARD_IMAGE_SIZE = 360
    CELL_IMAGE_SIZE = BOARD_IMAGE_SIZE // BOARD_SIZE  # 120 pixels per cell

    GRID_LINE_THICKNESS = 4
    MARKER_THICKNESS = 10
    MARKER_MARGIN = CELL_IMAGE_SIZE // 5

    # OpenCV colors are BGR
    CELL_BG_COLOR = (62, 33, 22)            # '#16213e'
    GRID_COLOR = (255, 212, 0)              # '#00d4ff'
    INDEX_COLOR = (110, 90, 80)
    X_COLOR = (129, 185, 16)                # '#10b981'
    O_COLOR = (113, 113, 248)               # '#f87171'
    TIE_COLOR = (170, 170, 170)

    # Winning cells get tinted with the winner's color
    WIN_TINT_ALPHA = 0.2
    # Other cells fade toward the background when a round is won
    DIM_ALPHA = 0.6

    SHOW_CELL_INDEX = True
    FONT = cv2.FONT_HERSHEY_SIMPLEX

    # ==================== TK COLORS ====================
    X_TEXT_COLOR = '#10b981'
    O_TEXT_COLOR = '#f87171'
    NEUTRAL_TEXT_COLOR = '#cbd5e1'
    TITLE_TEXT_COLOR = '#00d4ff'

    # ==================== LABELS ====================
    PLAYER_LABELS = {"X": "Player X", "O": "Player O"}
    # Each player places its own piece, as in the chess-piece board
    PIECE_NAMES = {"X": "knight", "O": "queen"}
    TURN_FORMAT = "{player}'s turn"
    WIN_FORMAT = "{symbol} wins!"
    TIE_MESSAGE = "It's a tie!"
    SCORE_FORMAT = "X: {x}  O: {o}"
    PLACED_FORMAT = "{player} placed a {piece}"

    # ==================== OUTPUT ====================
    SNAPSHOT_DIR = "snapshots"
