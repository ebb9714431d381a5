"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures and configuration shared by every test.
"""

import random

import pytest

from termjack.blackjack.game import Game
from termjack.common.card import Card, Rank, Suit, pack
from termjack.events import EventBus

SUIT_LETTERS = {"C": Suit.CLUBS, "D": Suit.DIAMONDS, "S": Suit.SPADES, "H": Suit.HEARTS}


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


class NoShuffleRandom(random.Random):
    """A random source whose shuffle leaves the cards where they are."""

    def shuffle(self, x):
        pass


def card(code: str) -> Card:
    """Build a card from a short code such as "AS", "10H" or "QD"."""
    return Card(SUIT_LETTERS[code[-1]], Rank(code[:-1]))


def stack_deck(game: Game, *codes: str) -> None:
    """
    Arrange the game's deck so the given cards come off the top in order.

    The rest of the pack stays underneath, so the deck still holds all 52 cards.
    """
    top = [card(code) for code in codes]
    rest = [c for c in pack() if c not in top]
    game.deck.cards = rest + list(reversed(top))


@pytest.fixture
def stacked_game():
    """Factory for a game whose deals follow the given card codes."""

    def _make(*codes: str) -> Game:
        game = Game(rng=NoShuffleRandom())
        stack_deck(game, *codes)
        return game

    return _make


@pytest.fixture
def make_card():
    return card
