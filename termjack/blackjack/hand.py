"""
BlackjackHand implementation with a running point total.
"""

from typing import List

from termjack.blackjack.constants import ACE_HIGH, ACE_LOW, BUST_LIMIT, get_points
from termjack.common.card import Card, Rank
from termjack.common.hand import Hand


class BlackjackHand(Hand):
    """
    A hand in the game of Blackjack.

    The total is kept up to date as cards arrive. An Ace is worth 11 unless
    that would take the total of the cards already held past 21, in which
    case it is worth 1. Aces already counted are never revalued, so the
    result depends on the order the cards were dealt:

    >>> from termjack.common.card import Suit
    >>> hand = BlackjackHand()
    >>> for rank in (Rank.ACE, Rank.FIVE, Rank.KING):
    ...     hand.add_card(Card(Suit.SPADES, rank))
    >>> hand.points
    26
    """

    def __init__(self):
        super().__init__()
        self._points = 0

    def add_card(self, card: Card) -> None:
        """Add a card and fold its value into the total."""
        super().add_card(card)
        if card.rank == Rank.ACE:
            self._points += ACE_LOW if self._points + ACE_HIGH > BUST_LIMIT else ACE_HIGH
        else:
            self._points += get_points(card.rank)

    def clear(self) -> List[Card]:
        """Empty the hand and reset the total."""
        cards = super().clear()
        self._points = 0
        return cards

    @property
    def points(self) -> int:
        """The current total."""
        return self._points

    @property
    def is_bust(self) -> bool:
        return self._points > BUST_LIMIT
