"""
Game engine for the TicTacToe minigame.

Owns the board, status, turn and score, and is the only thing allowed to
change them. The presentation layer calls apply_move() on a click,
compute_and_apply_ai_move() once the human's move was accepted and
restart() on the restart control; it learns about changes through
add_listener().
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .ai_player import AIPlayer
from .config import GameConfig
from .game_state import Cell, GameState, GameStatus, Player, Score
from .move_validator import MoveValidator, RejectReason
from .win_checker import Line, WinChecker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a move request.

    Accepted results carry the new status and the cell that was marked;
    rejected ones carry the reason and leave the game untouched.
    """
    accepted: bool
    status: GameStatus
    cell: Optional[int] = None
    reason: Optional[RejectReason] = None
    message: Optional[str] = None

    @classmethod
    def accept(cls, status: GameStatus, cell: int) -> "MoveResult":
        return cls(accepted=True, status=status, cell=cell)

    @classmethod
    def reject(cls, status: GameStatus, reason: RejectReason,
               message: Optional[str] = None) -> "MoveResult":
        return cls(accepted=False, status=status, reason=reason, message=message)


Listener = Callable[["GameEngine"], None]


class GameEngine:
    """
    TicTacToe between a human (X, moves first) and the heuristic AI (O).

    Game flow:
    1. Human marks a cell with apply_move()
    2. If the game goes on, the AI answers with compute_and_apply_ai_move()
    3. Repeat until someone wins or the board is full
    4. restart() starts over; the score is kept
    """

    STATUS_TEXT = {
        GameStatus.WON_BY_X: "You win!",
        GameStatus.WON_BY_O: "AI wins!",
        GameStatus.DRAW: "It's a draw!",
    }

    def __init__(self, config: Optional[GameConfig] = None, state: Optional[GameState] = None):
        """
        Initialize the engine.

        Args:
            config: Game settings (AI cell orders).
            state: Position to start from; a fresh game if omitted.
        """
        self.config = config or GameConfig()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(Player.AI.mark, self.config)

        self._state = state.copy() if state is not None else GameState()
        self.win_checker.update_game_state(self._state)
        self._score = Score()
        self._listeners: List[Listener] = []

    # ==================== READ ACCESS ====================

    @property
    def state(self) -> GameState:
        """A copy of the current state; changing it has no effect on the game."""
        return self._state.copy()

    @property
    def board(self) -> Sequence[Cell]:
        return tuple(self._state.board)

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def turn(self) -> Player:
        return self._state.turn

    @property
    def score(self) -> Score:
        return Score(self._score.wins_x, self._score.wins_o)

    @property
    def winning_line(self) -> Optional[Line]:
        return self._state.winning_line

    @property
    def is_over(self) -> bool:
        return self._state.is_game_over

    @property
    def is_ai_pending(self) -> bool:
        """True while the AI owes a move; clicks must be ignored meanwhile."""
        return not self.is_over and self._state.turn == Player.AI

    def check_win(self) -> Optional[Cell]:
        """Mark of the first complete line, or None."""
        return self.win_checker.check_winner(self._state.board)

    def check_draw(self) -> bool:
        """True iff the board is full and nobody has won."""
        return self.win_checker.check_draw(self._state.board)

    def status_text(self) -> str:
        """One-line status for the player."""
        if self.is_over:
            return self.STATUS_TEXT[self.status]
        if self.turn == Player.HUMAN:
            return f"Your turn ({Player.HUMAN.mark.value})"
        return "AI is thinking..."

    # ==================== MUTATION ====================

    def apply_move(self, cell: int) -> MoveResult:
        """
        Mark `cell` with X for the human.

        Args:
            cell: Cell index (0-8).

        Returns:
            Accepted(new status, cell) or Rejected(reason).
        """
        validation = self.validator.validate_human_move(self._state, cell)
        if not validation.is_valid:
            logger.debug("Human move %r rejected: %s", cell, validation.reason.value)
            return MoveResult.reject(self.status, validation.reason, validation.error_message)

        return self._play(cell, Player.HUMAN)

    def compute_and_apply_ai_move(self) -> MoveResult:
        """
        Let the AI choose and mark a cell with O.

        Returns:
            Accepted(new status, chosen cell) or Rejected(NOT_AI_TURN).
        """
        validation = self.validator.validate_ai_turn(self._state)
        if not validation.is_valid:
            logger.debug("AI move rejected: %s", validation.error_message)
            return MoveResult.reject(self.status, validation.reason, validation.error_message)

        cell = self.ai.choose_move(self._state.board)
        return self._play(cell, Player.AI)

    def restart(self):
        """Clear the board and give the first move to the human. Score is kept."""
        self._state = GameState()
        logger.debug("Game restarted (score X %d - O %d)", self._score.wins_x, self._score.wins_o)
        self._notify()

    def _play(self, cell: int, player: Player) -> MoveResult:
        self._state.place(cell, player)
        self.win_checker.update_game_state(self._state)
        logger.debug("%s played %s at cell %d", player.value, player.mark.value, cell)

        if self._state.is_game_over:
            # Only reachable once per game: terminal states refuse further moves
            self._score.record(self._state.status)
            logger.debug("Game over: %s (score X %d - O %d)", self._state.status.value,
                        self._score.wins_x, self._score.wins_o)
        else:
            self._state.turn = player.opposite()

        self._notify()
        return MoveResult.accept(self._state.status, cell)

    # ==================== LISTENERS ====================

    def add_listener(self, listener: Listener):
        """Call `listener(engine)` after every accepted move and every restart."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self):
        for listener in list(self._listeners):
            listener(self)
