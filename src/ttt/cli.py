"""
Command-line interface for playing tic-tac-toe on the console.
"""

import argparse
import logging
from typing import Callable, List, Optional

from ttt.core.board import BoardIndex, BoardIndexOutOfRangeError
from ttt.core.symbol import Symbol
from ttt.games.game import Game, PositionAlreadyFullError
from ttt.utils.config import (
    DEFAULT_CONFIG,
    DEFAULT_LOG_LEVEL,
    GAME_OVER,
    INPUT_ERROR,
    PLAYED_AT,
    PROMPT,
    Config,
)

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play two-player tic-tac-toe on the console"
    )
    parser.add_argument(
        "--log-level", "-l",
        default=None,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    return parser.parse_args(argv)


def parse_position(raw: str) -> Optional[int]:
    """Parse a 1-based position. Returns None unless raw is a positive integer."""
    try:
        position = int(raw.strip())
    except ValueError:
        return None
    return position if position > 0 else None


def play(
    game: Optional[Game] = None,
    read_line: Optional[Callable[[], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> Optional[Symbol]:
    """
    Run the console loop until someone wins.

    Returns:
        The winning symbol, or None if input ran out first.
    """
    game = game or Game()
    read_line = read_line or input
    write = write or print

    while True:
        write(str(game))

        winner = game.has_winner()
        if winner is not None:
            write(GAME_OVER.format(winner=winner))
            return winner

        write(PROMPT)
        try:
            raw = read_line()
        except EOFError:
            logger.info("Input closed before the game finished")
            return None

        position = parse_position(raw)
        if position is None:
            logger.debug("Unparseable input: %r", raw)
            write(INPUT_ERROR)
            continue

        try:
            index = BoardIndex.from_int(position - 1)
        except BoardIndexOutOfRangeError as e:
            write(str(e))
            continue

        try:
            game.play_turn(index)
        except PositionAlreadyFullError as e:
            write(str(e))
            continue

        write(PLAYED_AT.format(position=position))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = DEFAULT_CONFIG
    if args.log_level is not None:
        try:
            config = Config(log_level=args.log_level)
        except ValueError as e:
            print(e)
            return 2

    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        play()
    except KeyboardInterrupt:
        print("\nInterrupted - exiting...")
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
