"""
This module contains classes to represent a hand of cards in a card game.

It includes an abstract base class `AbstractHand`, and a concrete implementation `Hand`.
Each hand keeps its cards in the order they were dealt.

Classes:

AbstractHand: An abstract base class for a hand of cards.
Hand: A concrete implementation of a hand of cards.
"""
from abc import ABC
from typing import List

from termjack.common.card import Card


class AbstractHand(ABC):
    """
    An abstract base class for a hand of cards.

    This class provides a basic structure for a hand of cards, including methods to add and clear cards.
    Subclasses should override the __repr__ and __str__ methods to provide a string representation of the hand.
    """

    def __init__(self):
        self._cards: List[Card] = []

    @property
    def cards(self) -> List[Card]:
        """Returns a copy of the cards in the hand, in dealt order."""
        return list(self._cards)

    def add_card(self, card: Card) -> None:
        """
        Adds a card to the hand.

        Args:
            card: The card to add.
        """
        self._cards.append(card)

    def clear(self) -> List[Card]:
        """
        Empties the hand.

        Returns:
            The cards that were held, in the order they were dealt.
        """
        cards, self._cards = self._cards, []
        return cards

    def __len__(self) -> int:
        return len(self._cards)


class Hand(AbstractHand):
    """
    A concrete implementation of a hand of cards.

    This class provides a string representation of a hand of cards for both debugging and display purposes.
    """

    def __repr__(self) -> str:
        """
        Returns a string representation of the hand for debugging.

        Returns:
            A string in the form "Hand([Card(...), ...])".
        """
        return f"{type(self).__name__}({self.cards!r})"

    def __str__(self) -> str:
        """
        Returns a string representation of the hand for display.

        Returns:
            The cards separated by spaces, in dealt order.
        """
        return " ".join(str(card) for card in self.cards)
