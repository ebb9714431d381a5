"""
This module contains the Deck class, which represents the draw pile.

>>> deck = Deck()
>>> deck.size
52
>>> deck.deal()
Card(Suit.HEARTS, Rank.KING)
>>> deck.size
51
"""

import random
from typing import Iterable, List, Optional, Union

from termjack.common.card import Card, pack


class DeckExhaustedError(RuntimeError):
    """Raised when a card is drawn from an empty deck."""

    pass


class Deck:
    """
    A class representing a deck of cards. Cards are dealt from the end of the list.
    """

    def __init__(self, cards: Union[List[Card], None] = None):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If not provided, the full pack is used in pack order.
        """
        if cards is None:
            self.cards: List[Card] = pack()
        else:
            self.cards = cards.copy()

    def shuffle(self, rng: Optional[random.Random] = None):
        """
        Shuffle the cards in the deck.

        :param rng: Random source to shuffle with, the module-level one if omitted.
        """
        (rng or random).shuffle(self.cards)
        return self

    def deal(self) -> Card:
        """
        Pop the top card from the deck.

        :return: The dealt card.
        :raises DeckExhaustedError: If the deck is empty.
        """
        if not self.cards:
            raise DeckExhaustedError("Cannot deal from an empty deck.")
        return self.cards.pop()

    def return_cards(self, cards: Iterable[Card]) -> None:
        """
        Put cards back on top of the deck, ahead of the next shuffle.

        :param cards: The cards to return, in order.
        """
        self.cards.extend(cards)

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.

        :return: The size of the deck.
        """
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self.cards)} cards"
