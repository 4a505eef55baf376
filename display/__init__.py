"""
Display module for Tic Tac Toe Classic.
Draws the board and maps clicks back to cells.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
