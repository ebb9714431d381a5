"""Blackjack-specific constants and value mappings."""

from termjack.common.card import Rank

BUST_LIMIT = 21
DEALER_STANDS_ON = 17

ACE_HIGH = 11
ACE_LOW = 1

# Ace is scored high here and demoted by the hand when it would bust
BLACKJACK_POINTS = {
    Rank.ACE: ACE_HIGH,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
}


def get_points(rank: Rank) -> int:
    """Get the base blackjack value for a given rank."""
    return BLACKJACK_POINTS[rank]
