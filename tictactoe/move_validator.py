"""
Move validator for the TicTacToe minigame.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass
from .game_state import BOARD_CELLS, Cell, GameState, Player


class RejectReason(Enum):
    """Why a move was refused."""
    OUT_OF_RANGE = "out_of_range"
    CELL_OCCUPIED = "cell_occupied"
    GAME_OVER = "game_over"
    NOT_PLAYERS_TURN = "not_players_turn"
    NOT_AI_TURN = "not_ai_turn"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[RejectReason] = None
    error_message: Optional[str] = None


def _rejected(reason: RejectReason, message: str) -> ValidationResult:
    return ValidationResult(is_valid=False, reason=reason, error_message=message)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Cell index must be 0-8
    2. Game must not be over
    3. It must be that side's turn
    4. Can only place on empty cells
    """

    def validate_human_move(self, game_state: GameState, cell) -> ValidationResult:
        """
        Validate a human move.

        Args:
            game_state: Current game state.
            cell: Cell index to mark (0-8).

        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        # bool is an int subclass but True/False are not cells
        if not isinstance(cell, int) or isinstance(cell, bool) or not 0 <= cell < BOARD_CELLS:
            return _rejected(
                RejectReason.OUT_OF_RANGE,
                f"Invalid cell {cell!r}. Must be 0-{BOARD_CELLS - 1}."
            )

        if game_state.is_game_over:
            return _rejected(RejectReason.GAME_OVER, "Game is already over!")

        if game_state.turn != Player.HUMAN:
            return _rejected(RejectReason.NOT_PLAYERS_TURN, "Wait for the AI to move.")

        if game_state.board[cell] != Cell.EMPTY:
            return _rejected(
                RejectReason.CELL_OCCUPIED,
                f"Cell {cell} is already occupied by {game_state.board[cell].value}"
            )

        return ValidationResult(is_valid=True)

    def validate_ai_turn(self, game_state: GameState) -> ValidationResult:
        """
        Check that the AI may move now.

        Args:
            game_state: Current game state.

        Returns:
            ValidationResult; NOT_AI_TURN covers both a finished game and
            the human's turn.
        """
        if game_state.is_game_over:
            return _rejected(RejectReason.NOT_AI_TURN, "Game is already over!")

        if game_state.turn != Player.AI:
            return _rejected(RejectReason.NOT_AI_TURN, "It's the human's turn.")

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the side to move.

        Args:
            game_state: Current game state.

        Returns:
            List of empty cell indices, empty once the game is over.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()
