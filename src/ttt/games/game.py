"""
Game state: the board plus whose turn it is.
"""

from __future__ import annotations

import logging
from typing import Optional

from ttt.core.board import Board, BoardIndex
from ttt.core.symbol import Symbol
from ttt.games.game_rules import find_winner
from ttt.utils.config import CELL_SEPARATOR, CELL_STRINGS, ROW_SEPARATOR

logger = logging.getLogger(__name__)


class PositionAlreadyFullError(ValueError):
    """Raised when playing on a cell that already holds a symbol."""

    def __init__(self, index: BoardIndex):
        self.index = index
        super().__init__(f"Invalid board index {index}, already full")


class Game:
    """
    Two-player tic-tac-toe.

    Starts with an empty board and CROSS to move. The turn toggles
    exactly once per successful play_turn() and never otherwise.
    """

    __slots__ = ('_board', '_turn')

    def __init__(self):
        self._board = Board()
        self._turn = Symbol.CROSS

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turn(self) -> Symbol:
        """The symbol that moves next."""
        return self._turn

    def play_turn(self, index: BoardIndex) -> None:
        """
        Place the current symbol at index and pass the turn.

        Raises:
            PositionAlreadyFullError: If index was played previously. The
                board and turn are left unchanged.
        """
        if self._board[index] is not None:
            logger.info("Rejected %s at %s: cell occupied", self._turn, index)
            raise PositionAlreadyFullError(index)

        self._board[index] = self._turn
        logger.debug("%s played at %s", self._turn, index)
        self._turn = self._turn.toggle()

    def has_winner(self) -> Optional[Symbol]:
        """Get the winner, or None if no line is complete yet."""
        return find_winner(self._board.codes())

    def __str__(self) -> str:
        rows = []
        for row in self._board.grid():
            rows.append(CELL_SEPARATOR.join(
                f" {CELL_STRINGS[int(code)]} "
                for code in row
            ))
        return f"\n{ROW_SEPARATOR}\n".join(rows)
