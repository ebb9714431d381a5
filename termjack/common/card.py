"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard pack of playing
cards: Clubs, Diamonds, Spades and Hearts.

- `Rank`: An enum representing the thirteen ranks of a standard pack of playing
cards: Ace, Two through Ten, Jack, Queen and King. Ranks carry no points here;
scoring lives with the game that uses them.

- `Card`: An immutable (suit, rank) pair, equal and hashable by value.

- `pack()`: The canonical 52-card sequence.
"""

from dataclasses import dataclass
from enum import Enum, unique
from typing import List


@unique
class Suit(Enum):
    """
    Enum for suits in a card pack.
    """

    CLUBS = "♣"
    DIAMONDS = "♦"
    SPADES = "♠"
    HEARTS = "♥"

    @property
    def is_red(self) -> bool:
        return self in (Suit.DIAMONDS, Suit.HEARTS)

    def __str__(self) -> str:
        return self.value


@unique
class Rank(Enum):
    """
    Enum for ranks in a card pack.
    """

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @property
    def rank_str(self) -> str:
        """A string representation of the rank."""
        return self.value

    def __str__(self) -> str:
        return self.rank_str


@dataclass(frozen=True)
class Card:
    """
    Class representing a playing card.

    >>> card = Card(Suit.HEARTS, Rank.TWO)
    >>> print(card)
    2 of ♥
    >>> card == Card(Suit.HEARTS, Rank.TWO)
    True
    """

    suit: Suit
    rank: Rank

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Invalid suit: {self.suit}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid rank: {self.rank}")

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the card.

        :return: A string representation of the card.
        """
        return f"Card(Suit.{self.suit.name}, Rank.{self.rank.name})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the card.

        :return: A string representation of the card.
        """
        return f"{self.rank.rank_str} of {self.suit}"


def pack() -> List[Card]:
    """
    Build the 52-card pack, every rank of each suit in turn.

    >>> cards = pack()
    >>> len(cards)
    52
    >>> cards[0]
    Card(Suit.CLUBS, Rank.ACE)
    """
    return [Card(suit, rank) for suit in Suit for rank in Rank]
