"""
Win checker for the TicTacToe minigame.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Sequence, Tuple
from .game_state import Cell, GameState, GameStatus


Line = Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally).

    Every method is a pure read of the board.
    """

    # All possible winning lines, scanned in this order
    WINNING_LINES: List[Line] = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def check_winner(self, board: Sequence[Cell]) -> Optional[Cell]:
        """
        Check if there's a winner.

        Args:
            board: The 9 cells.

        Returns:
            The mark of the first complete line, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Sequence[Cell]) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Args:
            board: The 9 cells.

        Returns:
            The first complete line as a tuple of cell indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line):
                return line
        return None

    def _check_line(self, board: Sequence[Cell], line: Line) -> bool:
        """True if all 3 cells of `line` hold the same non-empty mark."""
        a, b, c = line
        return board[a] != Cell.EMPTY and board[a] == board[b] == board[c]

    def check_draw(self, board: Sequence[Cell]) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND nobody has won.
        """
        if Cell.EMPTY in board:
            return False
        return self.check_winner(board) is None

    def evaluate(self, board: Sequence[Cell]) -> GameStatus:
        """Status implied by the board alone."""
        winner = self.check_winner(board)
        if winner is not None:
            return GameStatus.won_by(winner)
        if self.check_draw(board):
            return GameStatus.DRAW
        return GameStatus.IN_PROGRESS

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        game_state.status = self.evaluate(game_state.board)
        game_state.winning_line = self.get_winning_line(game_state.board)
        return game_state

    def completes_line(self, board: Sequence[Cell], cell: int, mark: Cell) -> bool:
        """
        Would putting `mark` on the empty `cell` complete a line?
        Used by the AI for its one-ply lookahead.
        """
        if board[cell] != Cell.EMPTY:
            return False
        for line in self.WINNING_LINES:
            if cell not in line:
                continue
            if all(board[i] == mark for i in line if i != cell):
                return True
        return False
