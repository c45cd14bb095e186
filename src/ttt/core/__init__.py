"""
Core module - symbols, the bounded cell index and board storage.
"""

from ttt.core.symbol import Symbol
from ttt.core.board import Board, BoardIndex, BoardIndexOutOfRangeError

__all__ = [
    "Symbol",
    "Board",
    "BoardIndex",
    "BoardIndexOutOfRangeError",
]
