"""
Game configuration for the TicTacToe minigame.
All the settings for the AI opponent, its pacing and logging.

Environment overrides:
    TICTACTOE_AI_DELAY_MS   delay before the AI answers in the window (ms)
    LOG_LEVEL               DEBUG, INFO, WARNING, ...
"""

import os


def _env_int(name: str, default: int) -> int:
    value = (os.getenv(name) or "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== AI SETTINGS ====================
    # Fallback order once there is nothing to win or block
    CENTER = 4
    CORNER_ORDER = (0, 2, 6, 8)
    EDGE_ORDER = (1, 3, 5, 7)

    # Only used for a full board, which a running game never has
    FALLBACK_CELL = 0

    # ==================== PACING ====================
    # "AI is thinking..." pause in the window, milliseconds
    AI_DELAY_MS = _env_int("TICTACTOE_AI_DELAY_MS", 500)

    # ==================== LOGGING ====================
    LOG_LEVEL = (os.getenv("LOG_LEVEL", "INFO") or "INFO").upper()
