"""
ttt - two-player tic-tac-toe on a 3x3 grid.

Quick Start:
    from ttt import BoardIndex, Game

    game = Game()
    game.play_turn(BoardIndex.from_int(4))
    print(game)
    winner = game.has_winner()

Modules:
    core  - Symbol, BoardIndex and Board storage
    games - Game turn logic, win detection and rendering
    cli   - Line-based console loop
"""

from ttt.core import Board, BoardIndex, BoardIndexOutOfRangeError, Symbol
from ttt.games import Game, PositionAlreadyFullError

__version__ = "1.0.0"

__all__ = [
    "Game",
    "Board",
    "BoardIndex",
    "Symbol",
    # Errors
    "BoardIndexOutOfRangeError",
    "PositionAlreadyFullError",
]
