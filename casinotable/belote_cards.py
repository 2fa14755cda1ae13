"""Belote card rules: suits, card strength in a trick, points and the belote pair."""

from enum import IntEnum

__all__ = [
    "Suit",
    "suit_of",
    "rank_of",
    "is_belote_card",
    "card_strength",
    "trick_winner",
    "trick_points",
    "required_suit",
    "find_belote_pair",
]

RANKS = 13
HAND_SIZE = 8

ACE = 0
SEVEN = 6
NINE = 8
TEN = 9
JACK = 10
QUEEN = 11
KING = 12

_TRUMP_FLAG = 0xC0
_LEADING_FLAG = 0x40
_POINTS_MASK = 0x3F

# Points (and in-suit strength) of each rank, ace at 0.
_PLAIN_VALUES = {ACE: 11, TEN: 10, JACK: 2, QUEEN: 3, KING: 4}
_TRUMP_VALUES = {JACK: 20, NINE: 14, ACE: 11, TEN: 10, QUEEN: 3, KING: 4}


class Suit(IntEnum):
    """Card suits in the order of their encoding."""

    CLOVER = 0
    HEART = 1
    SPADE = 2
    DIAMOND = 3


def _check_card(card):
    if not isinstance(card, int) or card < 0 or card >> 4 >= len(Suit) or card & 0x0F >= RANKS:
        raise ValueError(f"not a card: {card!r}")


def suit_of(card):
    """Suit of a card encoded as suit << 4 | rank."""
    _check_card(card)
    return Suit(card >> 4)


def rank_of(card):
    """Rank of a card (0 is the ace, 12 the king)."""
    _check_card(card)
    return card & 0x0F


def is_belote_card(card):
    """Whether a card belongs to the 32-card belote deck (ace, seven to king)."""
    rank = rank_of(card)
    return rank == ACE or rank >= SEVEN


def card_strength(card, trump, leading):
    """Strength of a card in a trick; the low six bits hold its points.

    Trumps carry the highest flag, then cards of the leading suit, then the
    rest, so comparing strengths decides a trick.
    """
    suit = suit_of(card)
    rank = rank_of(card)
    trump = Suit(trump)
    leading = Suit(leading)
    if suit == trump:
        return _TRUMP_FLAG | _TRUMP_VALUES.get(rank, 0)
    flag = _LEADING_FLAG if suit == leading else 0
    return flag | _PLAIN_VALUES.get(rank, 0)


def trick_winner(cards, trump, leading):
    """Index of the card that takes the trick; on a tie the earliest wins."""
    strengths = [card_strength(card, trump, leading) for card in cards]
    if not strengths:
        raise ValueError("a trick needs at least one card")
    return max(range(len(strengths)), key=strengths.__getitem__)


def trick_points(cards, trump, leading):
    """Points the cards of a trick are worth to whoever takes it."""
    return sum(card_strength(card, trump, leading) & _POINTS_MASK for card in cards)


def required_suit(hand, leading, trump, is_leader):
    """Suit the player must play, or None when any card is allowed.

    The leader plays freely; others must follow the leading suit, failing
    that play a trump, and only then may play anything.
    """
    if is_leader:
        return None
    leading = Suit(leading)
    trump = Suit(trump)
    suits = {suit_of(card) for card in hand}
    if leading in suits:
        return leading
    if trump in suits:
        return trump
    return None


def find_belote_pair(hands, trump):
    """Seat holding queen and king of trumps, with those two cards.

    Returns (seat, (first, second)) in hand order, or None if nobody holds both.
    """
    trump = Suit(trump)
    for seat, hand in enumerate(hands):
        found = [
            card
            for card in list(hand)[:HAND_SIZE]
            if card >> 4 == trump and card & 0x0F >= QUEEN
        ]
        if len(found) >= 2:
            return seat, (found[0], found[1])
    return None