import pytest

from termjack.blackjack.constants import get_points
from termjack.blackjack.hand import BlackjackHand
from termjack.common.card import Card, Rank, Suit


def make_hand(*ranks):
    hand = BlackjackHand()
    for suit, rank in zip(list(Suit) * 4, ranks):
        hand.add_card(Card(suit, rank))
    return hand


@pytest.mark.parametrize(
    "rank, points",
    [
        (Rank.ACE, 11),
        (Rank.TWO, 2),
        (Rank.NINE, 9),
        (Rank.TEN, 10),
        (Rank.JACK, 10),
        (Rank.QUEEN, 10),
        (Rank.KING, 10),
    ],
)
def test_rank_points(rank, points):
    assert get_points(rank) == points


def test_new_hand_is_empty():
    hand = BlackjackHand()
    assert hand.cards == []
    assert hand.points == 0
    assert not hand.is_bust


def test_single_ace_counts_eleven():
    assert make_hand(Rank.ACE).points == 11


def test_second_ace_counts_one():
    assert make_hand(Rank.ACE, Rank.ACE).points == 12


def test_king_then_ace_is_twenty_one():
    assert make_hand(Rank.KING, Rank.ACE).points == 21


def test_ace_then_king_is_twenty_one():
    assert make_hand(Rank.ACE, Rank.KING).points == 21


def test_ace_demoted_when_it_would_bust():
    assert make_hand(Rank.FIVE, Rank.SIX, Rank.ACE).points == 12


def test_earlier_ace_is_not_revalued():
    # The first Ace stays at 11 even though the King then busts the hand
    hand = make_hand(Rank.ACE, Rank.FIVE, Rank.KING)
    assert hand.points == 26
    assert hand.is_bust


def test_face_cards_count_ten():
    assert make_hand(Rank.JACK, Rank.QUEEN).points == 20


def test_bust_is_allowed():
    hand = make_hand(Rank.KING, Rank.QUEEN, Rank.TWO)
    assert hand.points == 22
    assert hand.is_bust


def test_twenty_one_is_not_bust():
    hand = make_hand(Rank.KING, Rank.NINE, Rank.TWO)
    assert hand.points == 21
    assert not hand.is_bust


def test_clear_resets_points():
    hand = make_hand(Rank.KING, Rank.ACE)
    cards = hand.clear()
    assert [card.rank for card in cards] == [Rank.KING, Rank.ACE]
    assert hand.points == 0
    assert hand.cards == []


def test_str_lists_cards_in_dealt_order():
    hand = BlackjackHand()
    hand.add_card(Card(Suit.HEARTS, Rank.ACE))
    hand.add_card(Card(Suit.CLUBS, Rank.TEN))
    assert str(hand) == "A of ♥ 10 of ♣"


def test_points_follow_add_card_only():
    hand = make_hand(Rank.KING)
    hand.cards.append(Card(Suit.CLUBS, Rank.NINE))
    assert hand.points == 10
    assert len(hand.cards) == 1
