"""
Curses front end: draws frames from `termjack.ui.render` and turns key
presses into game inputs.

The screen itself is acquired and released by `curses.wrapper` in the entry
point, which puts the terminal back the way it was on every exit path.
"""

from __future__ import annotations

import curses
import logging
from typing import TYPE_CHECKING, Dict, Optional

from termjack.blackjack.state import Input
from termjack.ui.io_interface import IOInterface, QuitRequested
from termjack.ui.render import Style, build_frame

if TYPE_CHECKING:
    from termjack.blackjack.game import Game

logger = logging.getLogger(__name__)

ESCAPE = 27
CTRL_C = 3

QUIT_KEYS = {ESCAPE, CTRL_C, ord("q"), ord("Q")}
CONTINUE_KEYS = {ord(" "), ord("\n"), ord("\r"), curses.KEY_ENTER}
ARROW_KEYS = {curses.KEY_UP: Input.UP, curses.KEY_DOWN: Input.DOWN}

# Style -> (foreground colour, extra attributes)
STYLE_COLOURS = {
    Style.TITLE: (curses.COLOR_WHITE, curses.A_BOLD),
    Style.HEADING: (curses.COLOR_CYAN, 0),
    Style.POINTS: (curses.COLOR_BLUE, 0),
    Style.HIGHLIGHT: (curses.COLOR_CYAN, curses.A_BOLD),
    Style.RED_CARD: (curses.COLOR_RED, 0),
    Style.WHITE_CARD: (curses.COLOR_WHITE, 0),
    Style.WIN: (curses.COLOR_GREEN, 0),
    Style.LOSE: (curses.COLOR_RED, 0),
    Style.TIE: (curses.COLOR_YELLOW, 0),
}


def translate_key(key: int) -> Optional[Input]:
    """
    Map a key code from `getch` to a game input.

    Returns:
        The input for the key, or None if the key means nothing to the game.

    Raises:
        QuitRequested: For Escape, q, Q and Ctrl-C.
    """
    if key in QUIT_KEYS:
        raise QuitRequested(f"quit key {key}")
    if key in CONTINUE_KEYS:
        return Input.CONTINUE
    return ARROW_KEYS.get(key)


class CursesIOInterface(IOInterface):
    """
    An IO interface drawing on a curses window.

    Keys are read in raw mode, so Ctrl-C arrives as a key press and is treated
    like any other quit key.
    """

    def __init__(self, screen):
        self.screen = screen
        self._attributes: Dict[Style, int] = {}

        curses.raw()
        curses.curs_set(0)
        curses.set_escdelay(25)
        self.screen.keypad(True)
        self._init_colours()

    def _init_colours(self) -> None:
        if not curses.has_colors():
            logger.info("Terminal has no colour support, drawing without colours")
            return
        curses.start_color()
        curses.use_default_colors()
        for pair_number, (style, (colour, extra)) in enumerate(
            STYLE_COLOURS.items(), start=1
        ):
            curses.init_pair(pair_number, colour, -1)
            self._attributes[style] = curses.color_pair(pair_number) | extra

    def render(self, game: Game) -> None:
        self.screen.erase()
        for row, line in enumerate(build_frame(game)):
            column = 0
            for text, style in line:
                self.screen.addstr(row, column, text, self._attributes.get(style, 0))
                column += len(text)
        self.screen.refresh()

    def read_input(self) -> Input:
        while True:
            user_input = translate_key(self.screen.getch())
            if user_input is not None:
                return user_input
