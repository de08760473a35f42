"""
AI player for the TicTacToe minigame.
Picks moves with a fixed rule list: win, block, center, corner, edge.
"""

import logging
from typing import Optional, Sequence

from .config import GameConfig
from .game_state import Cell
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class AIPlayer:
    """
    An AI that plays TicTacToe with a one-ply heuristic.

    Rules, first match wins:
    1. Win now if a move completes a line
    2. Block a line the opponent could complete
    3. Take the center
    4. Take the first free corner (0, 2, 6, 8)
    5. Take the first free edge (1, 3, 5, 7)

    There is no randomness: the same board always gives the same move.
    """

    def __init__(self, mark: Cell = Cell.O, config: Optional[GameConfig] = None):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: O)
            config: Cell orders to fall back on.
        """
        if mark == Cell.EMPTY:
            raise ValueError("AI must play X or O")
        self.mark = mark
        self.opponent = Cell.X if mark == Cell.O else Cell.O
        self.config = config or GameConfig()
        self.win_checker = WinChecker()

        # Which rule picked the last move (for the status display)
        self.last_reason: Optional[str] = None

    def choose_move(self, board: Sequence[Cell]) -> int:
        """
        Choose the cell to play.

        Args:
            board: The 9 cells.

        Returns:
            Cell index (0-8).
        """
        move = self._find_completing_move(board, self.mark)
        if move is not None:
            return self._pick(move, "win")

        move = self._find_completing_move(board, self.opponent)
        if move is not None:
            return self._pick(move, "block")

        if board[self.config.CENTER] == Cell.EMPTY:
            return self._pick(self.config.CENTER, "center")

        for cell in self.config.CORNER_ORDER:
            if board[cell] == Cell.EMPTY:
                return self._pick(cell, "corner")

        for cell in self.config.EDGE_ORDER:
            if board[cell] == Cell.EMPTY:
                return self._pick(cell, "edge")

        # Full board; the engine never asks for a move here
        logger.warning("No empty cell left, falling back to cell %d", self.config.FALLBACK_CELL)
        return self._pick(self.config.FALLBACK_CELL, "fallback")

    def _find_completing_move(self, board: Sequence[Cell], mark: Cell) -> Optional[int]:
        """First empty cell (lowest index) that completes a line for `mark`."""
        for cell in range(len(board)):
            if self.win_checker.completes_line(board, cell, mark):
                return cell
        return None

    def _pick(self, cell: int, reason: str) -> int:
        self.last_reason = reason
        logger.debug("AI picks cell %d (%s)", cell, reason)
        return cell

    def get_move_suggestion(self, board: Sequence[Cell]) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: The 9 cells.

        Returns:
            A string describing the suggested move.
        """
        if Cell.EMPTY not in board:
            return "No moves available!"

        cell = self.choose_move(board)
        row, col = divmod(cell, 3)

        return f"Place {self.mark.value} at cell {cell} (row {row}, col {col}) [{self.last_reason}]"
