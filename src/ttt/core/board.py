"""
Board storage and the bounded cell index.

Uses a flat int8 array, indexed left-to-right, top-to-bottom:
    0 1 2
    3 4 5
    6 7 8

The board enforces no rules; occupancy checks live in Game.
"""

from __future__ import annotations

import functools
import operator
from typing import Iterator, Optional, Tuple

import numpy as np

from ttt.core.symbol import Symbol
from ttt.utils.config import BOARD_SIZE, EMPTY, NUM_CELLS


class BoardIndexOutOfRangeError(ValueError):
    """Raised when an integer cannot be converted to a BoardIndex."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(
            f"Invalid index: {value}. "
            f"A board index must be in the range of 0..{NUM_CELLS}."
        )


@functools.total_ordering
class BoardIndex:
    """
    Index of a cell on the 3x3 grid, guaranteed to be in range(9).

    BoardIndex(value) and from_int(value) both validate; only integers
    (including numpy integers) are accepted.
    """

    __slots__ = ('_value',)

    def __init__(self, value: int):
        value = operator.index(value)
        if not 0 <= value < NUM_CELLS:
            raise BoardIndexOutOfRangeError(value)
        self._value = value

    @classmethod
    def from_int(cls, value: int) -> "BoardIndex":
        """
        Validated conversion from an integer.

        Raises:
            BoardIndexOutOfRangeError: If value is outside range(9).
            TypeError: If value is not an integer.
        """
        return cls(value)

    @classmethod
    def _unchecked(cls, value: int) -> "BoardIndex":
        """Skip the bounds check. Only for module-level constant tables."""
        index = cls.__new__(cls)
        index._value = value
        return index

    @classmethod
    def all(cls) -> Iterator["BoardIndex"]:
        """Every index in row-major order."""
        for value in range(NUM_CELLS):
            yield cls._unchecked(value)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardIndex):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: "BoardIndex") -> bool:
        if not isinstance(other, BoardIndex):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"BoardIndex({self._value})"

    def __str__(self) -> str:
        return str(self._value)


class Board:
    """
    The 9 cells of a tic-tac-toe grid.

    Cells hold a Symbol or None. Only BoardIndex keys are accepted.
    """

    __slots__ = ('_cells',)

    def __init__(self):
        self._cells = np.zeros(NUM_CELLS, dtype=np.int8)

    @staticmethod
    def _check_key(index: object) -> int:
        if not isinstance(index, BoardIndex):
            raise TypeError(
                f"Board indices must be BoardIndex, not {type(index).__name__}"
            )
        return int(index)

    def get(self, index: BoardIndex) -> Optional[Symbol]:
        return Symbol.from_code(self._cells[self._check_key(index)])

    def set(self, index: BoardIndex, value: Optional[Symbol]) -> None:
        self._cells[self._check_key(index)] = EMPTY if value is None else value.value

    __getitem__ = get
    __setitem__ = set

    def __len__(self) -> int:
        return NUM_CELLS

    def cells(self) -> Tuple[Optional[Symbol], ...]:
        """All cells in row-major order."""
        return tuple(Symbol.from_code(code) for code in self._cells)

    def codes(self) -> np.ndarray:
        """Copy of the raw int8 cell codes (0 = empty)."""
        return self._cells.copy()

    def grid(self) -> np.ndarray:
        """Copy of the cell codes shaped as rows."""
        return self._cells.reshape(BOARD_SIZE, BOARD_SIZE).copy()
