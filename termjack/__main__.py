"""
Play Blackjack in the terminal.

    python -m termjack [--seed N] [--log-level LEVEL] [--log-file PATH]

Space or Enter continues, the arrow keys move through the menu, Escape or Q
quits.
"""

import argparse
import curses
import locale
import logging
import random
import sys
from typing import Optional, Sequence

from termjack.blackjack.game import Game
from termjack.common.deck import DeckExhaustedError
from termjack.ui.io_interface import play
from termjack.events import EventBus
from termjack.ui.terminal import CursesIOInterface

logger = logging.getLogger("termjack")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="termjack", description="Play Blackjack against the dealer."
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        default=None,
        help="seed for the shuffle, for a reproducible session (default: random)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="write logs to this file; without it logs are discarded",
    )
    return parser.parse_args(argv)


def configure_logging(level: str, log_file: Optional[str]) -> None:
    """Send logs to a file when asked to. The screen belongs to curses."""
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(handler)
    logger.setLevel(level)


def log_event(event):
    event_type, data = event
    logger.debug("Event %s: %s", event_type, data)


def run(screen, game: Game) -> int:
    return play(game, CursesIOInterface(screen))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level, args.log_file)
    locale.setlocale(locale.LC_ALL, "")

    EventBus.get_instance().on_any(log_event)
    game = Game(rng=random.Random(args.seed))
    logger.info("Session started (seed=%s)", args.seed)

    try:
        handled = curses.wrapper(run, game)
    except KeyboardInterrupt:
        logger.info("Session interrupted")
        return 0
    except curses.error as e:
        logger.critical("Terminal error: %s", e, exc_info=True)
        print(f"termjack: terminal error: {e}", file=sys.stderr)
        return 1
    except DeckExhaustedError as e:
        logger.critical("Game state corrupted: %s", e, exc_info=True)
        print(f"termjack: internal error: {e}", file=sys.stderr)
        return 1

    logger.info("Session ended after %d inputs", handled)
    return 0


if __name__ == "__main__":
    sys.exit(main())
