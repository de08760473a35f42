"""
Display configuration for the TicTacToe minigame.
All the settings for drawing the board and saving snapshots.

Headless machines (no display, snapshots only):
    pip install opencv-python-headless numpy pillow
"""

import cv2


class DisplayConfig:
    """
    Configuration class for display settings.
    Colors are BGR, as OpenCV expects them.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Output size for the rendered board image (pixels)
    BOARD_OUTPUT_SIZE = 450
    CELL_OUTPUT_SIZE = BOARD_OUTPUT_SIZE // BOARD_SIZE  # 150 pixels per cell

    # ==================== COLORS ====================
    BACKGROUND_COLOR = (62, 33, 22)      # Dark navy
    GRID_COLOR = (200, 200, 200)
    X_COLOR = (255, 212, 0)              # Cyan-ish blue for the human
    O_COLOR = (113, 107, 255)            # Red for the AI
    WIN_COLOR = (0, 215, 255)            # Gold
    LABEL_COLOR = (120, 120, 120)

    # ==================== STROKES ====================
    GRID_THICKNESS = 3
    MARK_THICKNESS = 10
    WIN_THICKNESS = 12
    MARK_MARGIN = CELL_OUTPUT_SIZE // 5  # Gap between a mark and the cell border

    # ==================== LABELS ====================
    SHOW_CELL_LABELS = True
    LABEL_FONT = cv2.FONT_HERSHEY_SIMPLEX
    LABEL_SCALE = 0.5

    # ==================== SNAPSHOTS ====================
    SNAPSHOT_DIR = "snapshots"
    SNAPSHOT_PREFIX = "tictactoe"
