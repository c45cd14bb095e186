"""
Configuration and display constants.
"""

import logging


# ---------------------------------------------------------------------------
# Board
# ---------------------------------------------------------------------------

BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

# Cell codes stored on the int8 board
EMPTY = 0
CROSS_CODE = 1
CIRCLE_CODE = 2

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {EMPTY: " ", CROSS_CODE: "X", CIRCLE_CODE: "O"}

CELL_SEPARATOR = "|"
ROW_SEPARATOR = "-" * (BOARD_SIZE * 3 + BOARD_SIZE - 1)


# ---------------------------------------------------------------------------
# Console messages
# ---------------------------------------------------------------------------

PROMPT = "Pick a place to play"
INPUT_ERROR = f"Input error: provide a positive number (1-{NUM_CELLS})"
PLAYED_AT = "Played at position {position}"
GAME_OVER = "Game over, {winner} wins!"


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_LOG_LEVEL = "WARNING"


def _resolve_log_level(name: str) -> int:
    """Map a level name (case-insensitive) to its logging constant."""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


class Config:
    """Console configuration with sensible defaults."""

    def __init__(self, log_level: str = DEFAULT_LOG_LEVEL):
        self.log_level = log_level.upper()

        # Derive dependent values
        self.log_level_value = _resolve_log_level(log_level)


# Default configuration
DEFAULT_CONFIG = Config()
