"""
Display module for the TicTacToe minigame.
Draws the board for the window and for saved snapshots.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
