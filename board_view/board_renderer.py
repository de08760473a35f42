"""
Board renderer for the TicTacToe minigame.
Draws the board, the marks and the winning line into an image.
"""

import logging
import time
from pathlib import Path
from typing import Optional, Tuple, Union

import cv2
import numpy as np
from PIL import Image

from tictactoe.game_state import Cell, GameState
from .config import DisplayConfig

logger = logging.getLogger(__name__)


class BoardRenderer:
    """
    Renders a GameState as a BGR image.

    The image is square, BOARD_OUTPUT_SIZE pixels wide, with the cells laid
    out row-major like the board itself (cell 0 top-left, cell 8 bottom-right).
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration.
        """
        self.config = config or DisplayConfig()

    def cell_center(self, cell: int) -> Tuple[int, int]:
        """Pixel (x, y) of the middle of `cell`."""
        row, col = divmod(cell, self.config.BOARD_SIZE)
        size = self.config.CELL_OUTPUT_SIZE
        return col * size + size // 2, row * size + size // 2

    def render(self, state: GameState) -> np.ndarray:
        """
        Draw the board.

        Args:
            state: The game to draw.

        Returns:
            BGR image of shape (size, size, 3).
        """
        size = self.config.BOARD_OUTPUT_SIZE
        image = np.zeros((size, size, 3), dtype=np.uint8)
        image[:] = self.config.BACKGROUND_COLOR

        self._draw_grid(image)

        for cell, mark in enumerate(state.board):
            if mark == Cell.X:
                self._draw_x(image, cell)
            elif mark == Cell.O:
                self._draw_o(image, cell)
            elif self.config.SHOW_CELL_LABELS:
                self._draw_label(image, cell)

        if state.winning_line is not None:
            start = self.cell_center(state.winning_line[0])
            end = self.cell_center(state.winning_line[-1])
            cv2.line(image, start, end, self.config.WIN_COLOR, self.config.WIN_THICKNESS)

        return image

    def _draw_grid(self, image: np.ndarray):
        size = self.config.BOARD_OUTPUT_SIZE
        cell_size = self.config.CELL_OUTPUT_SIZE
        for i in range(1, self.config.BOARD_SIZE):
            # Vertical lines
            cv2.line(image, (i * cell_size, 0), (i * cell_size, size),
                     self.config.GRID_COLOR, self.config.GRID_THICKNESS)
            # Horizontal lines
            cv2.line(image, (0, i * cell_size), (size, i * cell_size),
                     self.config.GRID_COLOR, self.config.GRID_THICKNESS)

    def _draw_x(self, image: np.ndarray, cell: int):
        cx, cy = self.cell_center(cell)
        r = self.config.CELL_OUTPUT_SIZE // 2 - self.config.MARK_MARGIN
        color = self.config.X_COLOR
        thickness = self.config.MARK_THICKNESS
        cv2.line(image, (cx - r, cy - r), (cx + r, cy + r), color, thickness)
        cv2.line(image, (cx + r, cy - r), (cx - r, cy + r), color, thickness)

    def _draw_o(self, image: np.ndarray, cell: int):
        r = self.config.CELL_OUTPUT_SIZE // 2 - self.config.MARK_MARGIN
        cv2.circle(image, self.cell_center(cell), r, self.config.O_COLOR,
                   self.config.MARK_THICKNESS)

    def _draw_label(self, image: np.ndarray, cell: int):
        row, col = divmod(cell, self.config.BOARD_SIZE)
        size = self.config.CELL_OUTPUT_SIZE
        cv2.putText(image, str(cell), (col * size + 8, row * size + 22),
                    self.config.LABEL_FONT, self.config.LABEL_SCALE,
                    self.config.LABEL_COLOR, 1)

    def cell_at(self, x: float, y: float, width: Optional[int] = None,
                height: Optional[int] = None) -> Optional[int]:
        """
        Map a click to a cell.

        Args:
            x, y: Click position in pixels.
            width, height: Size of the surface the board is shown on
                (defaults to the rendered image size).

        Returns:
            Cell index (0-8), or None if the click is outside the board.
        """
        width = width or self.config.BOARD_OUTPUT_SIZE
        height = height or self.config.BOARD_OUTPUT_SIZE
        if not (0 <= x < width and 0 <= y < height):
            return None

        n = self.config.BOARD_SIZE
        col = int(x * n // width)
        row = int(y * n // height)
        return row * n + col

    def save(self, state: GameState, path: Union[str, Path, None] = None) -> Path:
        """
        Write the rendered board to a PNG file.

        Args:
            state: The game to draw.
            path: Target file; a timestamped file in SNAPSHOT_DIR if omitted.

        Returns:
            The path written.
        """
        if path is None:
            path = Path(self.config.SNAPSHOT_DIR) / f"{self.config.SNAPSHOT_PREFIX}_{int(time.time())}.png"
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        if not cv2.imwrite(str(path), self.render(state)):
            raise OSError(f"Could not write snapshot to {path}")

        logger.info("Saved board snapshot: %s", path)
        return path

    @staticmethod
    def to_pil(image: np.ndarray, size: Optional[Tuple[int, int]] = None) -> Image.Image:
        """
        Convert a rendered board to an RGB Pillow image.

        Args:
            image: BGR image from render().
            size: Optional (width, height) to scale to.
        """
        if size is not None:
            image = cv2.resize(image, size, interpolation=cv2.INTER_AREA)
        image_rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        return Image.fromarray(image_rgb)

    @classmethod
    def to_photo(cls, image: np.ndarray, size: Optional[Tuple[int, int]] = None):
        """Convert a rendered board to a Tk PhotoImage (needs a Tk root window)."""
        # Imported here so snapshots work without Tk installed
        from PIL import ImageTk

        return ImageTk.PhotoImage(cls.to_pil(image, size))
