"""
Winning lines and NumPy line checks.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from ttt.core.board import BoardIndex
from ttt.core.symbol import Symbol
from ttt.utils.config import EMPTY

_idx = BoardIndex._unchecked

# All possible winning lines, scanned in this order
WIN_LINES: Tuple[Tuple[BoardIndex, BoardIndex, BoardIndex], ...] = (
    # Rows
    (_idx(0), _idx(1), _idx(2)),
    (_idx(3), _idx(4), _idx(5)),
    (_idx(6), _idx(7), _idx(8)),
    # Columns
    (_idx(0), _idx(3), _idx(6)),
    (_idx(1), _idx(4), _idx(7)),
    (_idx(2), _idx(5), _idx(8)),
    # Diagonals
    (_idx(0), _idx(4), _idx(8)),
    (_idx(2), _idx(4), _idx(6)),
)

del _idx

# Pre-computed winning lines (indices into the flat board)
_WIN_LINES = np.array(
    [[int(i) for i in line] for line in WIN_LINES], dtype=np.int8
)


def all_equal(line: np.ndarray) -> bool:
    """
    Return True if:
    - line is nonempty
    - first value is not empty
    - all values equal the first
    """
    if line.size == 0:
        return False

    first = line[0]
    if first == EMPTY:
        return False

    return bool(np.all(line == first))


def line_owner(codes: np.ndarray, line: np.ndarray) -> Optional[Symbol]:
    """Return the symbol filling every cell of line, or None."""
    cells = codes[line]
    if all_equal(cells):
        return Symbol.from_code(cells[0])
    return None


def find_winner(codes: np.ndarray) -> Optional[Symbol]:
    """
    Scan rows, then columns, then diagonals of a flat board.

    Returns:
        The symbol on the first complete line, or None if no winner yet.
    """
    for line in _WIN_LINES:
        owner = line_owner(codes, line)
        if owner is not None:
            return owner
    return None
