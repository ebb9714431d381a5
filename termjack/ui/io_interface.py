"""
This module contains the IOInterface abstract base class, its test
implementation and the session loop that drives a game through one.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, List

from termjack.blackjack.state import Input
from termjack.ui.render import frame_text

if TYPE_CHECKING:
    from termjack.blackjack.game import Game

logger = logging.getLogger(__name__)


class QuitRequested(Exception):
    """Raised by an IO interface when the player asks to leave."""

    pass


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the two operations a session needs: showing the game
    and getting the next input from the player.
    """

    @abstractmethod
    def render(self, game: Game) -> None:
        """Show the current state of the game."""
        pass

    @abstractmethod
    def read_input(self) -> Input:
        """
        Block until the player produces an input.

        Raises:
            QuitRequested: If the player asked to quit.
        """
        pass


class TestIOInterface(IOInterface):
    """
    A test IO interface. Replays scripted inputs and keeps a plain-text copy
    of every frame it was asked to render. Asks to quit once the script runs
    out.
    """

    __test__ = False

    def __init__(self, inputs: Iterable[Input] = ()):
        self.inputs: List[Input] = list(inputs)
        self.frames: List[str] = []

    def add_input(self, user_input: Input) -> None:
        """Add an input to the queue."""
        self.inputs.append(user_input)

    def render(self, game: Game) -> None:
        self.frames.append(frame_text(game))

    def read_input(self) -> Input:
        if self.inputs:
            return self.inputs.pop(0)
        raise QuitRequested("No more inputs left in TestIOInterface queue.")


def play(game: Game, io_interface: IOInterface) -> int:
    """
    Run a session: render, then apply inputs one at a time until the player quits.

    Args:
        game: The game to drive.
        io_interface: Where frames go and inputs come from.

    Returns:
        The number of inputs applied.
    """
    handled = 0
    io_interface.render(game)
    while True:
        try:
            user_input = io_interface.read_input()
        except QuitRequested:
            logger.info("Player quit after %d inputs", handled)
            return handled
        game.update(user_input)
        handled += 1
        io_interface.render(game)
