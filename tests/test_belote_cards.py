import pytest

from casinotable.belote_cards import (
    Suit,
    card_strength,
    find_belote_pair,
    is_belote_card,
    rank_of,
    required_suit,
    suit_of,
    trick_points,
    trick_winner,
)


def card(suit, rank):
    return (int(suit) << 4) | rank


ACE, SEVEN, EIGHT, NINE, TEN, JACK, QUEEN, KING = 0, 6, 7, 8, 9, 10, 11, 12
BELOTE_RANKS = (ACE, SEVEN, EIGHT, NINE, TEN, JACK, QUEEN, KING)


def test_suit_and_rank_round_trip():
    for suit in Suit:
        for rank in range(13):
            c = card(suit, rank)
            assert suit_of(c) is suit
            assert rank_of(c) == rank


@pytest.mark.parametrize("bad", [-1, 0x0D, 0x40, 255])
def test_invalid_cards_rejected(bad):
    with pytest.raises(ValueError):
        suit_of(bad)


def test_belote_deck_has_32_cards():
    deck = [card(s, r) for s in Suit for r in range(13)]
    belote = [c for c in deck if is_belote_card(c)]
    assert len(belote) == 32
    assert all(rank_of(c) in BELOTE_RANKS for c in belote)
    assert not is_belote_card(card(Suit.HEART, 1))


def test_trump_jack_and_nine_points():
    assert card_strength(card(Suit.SPADE, JACK), Suit.SPADE, Suit.HEART) & 0x3F == 20
    assert card_strength(card(Suit.SPADE, NINE), Suit.SPADE, Suit.HEART) & 0x3F == 14


def test_all_points_add_up_to_152():
    trump = Suit.DIAMOND
    total = 0
    for suit in Suit:
        cards = [card(suit, r) for r in BELOTE_RANKS]
        total += trick_points(cards[:4], trump, suit)
        total += trick_points(cards[4:], trump, suit)
    assert total == 152


def test_trump_beats_leading_ace():
    cards = [
        card(Suit.HEART, ACE),
        card(Suit.HEART, TEN),
        card(Suit.CLOVER, SEVEN),
        card(Suit.HEART, KING),
    ]
    assert trick_winner(cards, Suit.CLOVER, Suit.HEART) == 2


def test_leading_suit_beats_offsuit_ace():
    cards = [
        card(Suit.SPADE, SEVEN),
        card(Suit.HEART, ACE),
        card(Suit.DIAMOND, ACE),
        card(Suit.SPADE, EIGHT),
    ]
    assert trick_winner(cards, Suit.CLOVER, Suit.SPADE) in (0, 3)
    assert trick_winner(cards, Suit.CLOVER, Suit.SPADE) == 0


def test_trump_order_jack_over_nine_over_ace():
    trump = Suit.HEART
    cards = [card(trump, ACE), card(trump, NINE), card(trump, JACK), card(trump, TEN)]
    assert trick_winner(cards, trump, trump) == 2
    strengths = [card_strength(c, trump, trump) for c in cards]
    assert strengths[2] > strengths[1] > strengths[0] > strengths[3]


def test_plain_order_ace_ten_king_queen_jack():
    order = [ACE, TEN, KING, QUEEN, JACK]
    strengths = [card_strength(card(Suit.SPADE, r), Suit.HEART, Suit.SPADE) for r in order]
    assert strengths == sorted(strengths, reverse=True)
    assert len(set(strengths)) == len(strengths)


def test_empty_trick_raises():
    with pytest.raises(ValueError):
        trick_winner([], Suit.HEART, Suit.HEART)


def test_required_suit_rules():
    hand = [card(Suit.HEART, ACE), card(Suit.SPADE, SEVEN), card(Suit.CLOVER, KING)]
    assert required_suit(hand, Suit.HEART, Suit.SPADE, True) is None
    assert required_suit(hand, Suit.HEART, Suit.SPADE, False) is Suit.HEART
    assert required_suit(hand, Suit.DIAMOND, Suit.SPADE, False) is Suit.SPADE
    assert required_suit(hand, Suit.DIAMOND, Suit.DIAMOND, False) is None


def test_find_belote_pair():
    hands = [
        [card(Suit.HEART, QUEEN), card(Suit.CLOVER, KING)],
        [card(Suit.CLOVER, SEVEN), card(Suit.HEART, KING)],
        [card(Suit.SPADE, QUEEN), card(Suit.SPADE, ACE), card(Suit.SPADE, KING)],
        [card(Suit.DIAMOND, ACE)],
    ]
    assert find_belote_pair(hands, Suit.SPADE) == (
        2,
        (card(Suit.SPADE, QUEEN), card(Suit.SPADE, KING)),
    )
    assert find_belote_pair(hands, Suit.HEART) is None
    assert find_belote_pair(hands, Suit.CLOVER) is None