from termjack.common.card import Card, Suit, Rank
from termjack.common.hand import Hand


def test_hand_initialization():
    hand = Hand()
    assert hand.cards == []
    assert len(hand) == 0


def test_add_card_keeps_dealt_order():
    hand = Hand()
    first = Card(Suit.HEARTS, Rank.EIGHT)
    second = Card(Suit.CLUBS, Rank.TWO)
    hand.add_card(first)
    hand.add_card(second)
    assert hand.cards == [first, second]


def test_clear_returns_cards():
    hand = Hand()
    card = Card(Suit.HEARTS, Rank.EIGHT)
    hand.add_card(card)
    assert hand.clear() == [card]
    assert hand.cards == []


def test_hand_str_and_repr():
    hand = Hand()
    hand.add_card(Card(Suit.HEARTS, Rank.EIGHT))
    hand.add_card(Card(Suit.SPADES, Rank.KING))
    assert str(hand) == "8 of ♥ K of ♠"
    assert repr(hand) == "Hand([Card(Suit.HEARTS, Rank.EIGHT), Card(Suit.SPADES, Rank.KING)])"


def test_cards_cannot_be_added_behind_the_hands_back():
    hand = Hand()
    hand.add_card(Card(Suit.HEARTS, Rank.EIGHT))
    hand.cards.append(Card(Suit.CLUBS, Rank.TWO))
    assert hand.cards == [Card(Suit.HEARTS, Rank.EIGHT)]
    assert len(hand) == 1
