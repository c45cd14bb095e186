"""
Player symbols.

Values double as the int8 codes stored on the board:
    1 = cross (X)
    2 = circle (O)
"""

from __future__ import annotations

from enum import Enum

from ttt.utils.config import CELL_STRINGS, CIRCLE_CODE, CROSS_CODE, EMPTY


class Symbol(Enum):
    """One of the two symbols used for playing tic-tac-toe."""

    CROSS = CROSS_CODE
    CIRCLE = CIRCLE_CODE

    def toggle(self) -> "Symbol":
        """Return the other symbol."""
        return Symbol(3 - self.value)  # Toggle 1↔2

    @classmethod
    def from_code(cls, code: int) -> "Symbol | None":
        """Decode a board cell; 0 (empty) decodes to None."""
        if code == EMPTY:
            return None
        return cls(int(code))

    def __str__(self) -> str:
        return CELL_STRINGS[self.value]
