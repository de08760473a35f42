"""
Logging setup for the TicTacToe minigame.
"""

import logging
from typing import Optional

from tictactoe.config import GameConfig

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Send log records to stderr.

    Args:
        level: Level name; GameConfig.LOG_LEVEL (LOG_LEVEL env var) if omitted.
    """
    level = (level or GameConfig.LOG_LEVEL).upper()

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # PIL logs every plugin it loads at DEBUG
    logging.getLogger("PIL").setLevel(logging.WARNING)
