"""
TicTacToe minigame
==================
A human (X) against a heuristic AI (O) on a 3x3 board.
Handles game state, rules, and the AI opponent.
"""

from .game_state import Cell, GameState, GameStatus, Move, Player, Score
from .move_validator import MoveValidator, RejectReason, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer
from .game_engine import GameEngine, MoveResult

__version__ = "1.0.0"
