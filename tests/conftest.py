"""
Shared test fixtures for ttt tests.

Design principles:
- Fresh state per test
- Clean imports at module level
- Minimal, focused fixtures
"""

from typing import Callable, Iterable, List

import pytest

from ttt.core.board import Board, BoardIndex
from ttt.games.game import Game


# =============================================================================
# Helpers
# =============================================================================

def idx(value: int) -> BoardIndex:
    """Shorthand for a validated index."""
    return BoardIndex.from_int(value)


def play_all(game: Game, moves: Iterable[int]) -> Game:
    """Apply a sequence of raw indices in order."""
    for value in moves:
        game.play_turn(idx(value))
    return game


# =============================================================================
# Board / Game Fixtures
# =============================================================================

@pytest.fixture
def board() -> Board:
    """Empty board."""
    return Board()


@pytest.fixture
def game() -> Game:
    """Fresh game, CROSS to move."""
    return Game()


@pytest.fixture
def top_row_game(game: Game) -> Game:
    """X completes the top row on the fifth move."""
    return play_all(game, [0, 3, 1, 4, 2])


# =============================================================================
# Console Fixtures
# =============================================================================

class ScriptedConsole:
    """Feeds scripted lines to the console loop and records its output."""

    def __init__(self, lines: Iterable[str]):
        self._lines = iter(lines)
        self.output: List[str] = []

    def read_line(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None

    def write(self, text: str) -> None:
        self.output.append(text)


@pytest.fixture
def console() -> Callable[[Iterable[str]], ScriptedConsole]:
    """Factory for scripted consoles."""
    return ScriptedConsole
