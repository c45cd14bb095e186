"""
Games module - turn logic and win detection.
"""

from ttt.games.game_rules import WIN_LINES, all_equal, find_winner, line_owner
from ttt.games.game import Game, PositionAlreadyFullError

__all__ = [
    "Game",
    "PositionAlreadyFullError",
    "WIN_LINES",
    "all_equal",
    "find_winner",
    "line_owner",
]
