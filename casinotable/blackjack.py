"""Blackjack: card scoring, the round's flow and its settlement."""

import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum

__all__ = [
    "Outcome",
    "Hand",
    "BlackjackRound",
    "make_deck",
    "add_card",
    "message_for",
]

BLACKJACK_TOTAL = 21
DEALER_STANDS_ON = 17
SUITS = 4
RANKS = 13


class Outcome(IntEnum):
    """How a round ended; the values are the message numbers."""

    BLACKJACK = 0
    PUSH = 1
    DEALER_BUSTS = 2
    PLAYER_BUSTS = 3
    PLAYER_WINS = 4
    HOUSE_WINS = 5

    @property
    def player_won(self):
        return self in (Outcome.BLACKJACK, Outcome.DEALER_BUSTS, Outcome.PLAYER_WINS)


_MESSAGES = {
    Outcome.BLACKJACK: "BLACKJACK",
    Outcome.PUSH: "PUSH",
    Outcome.DEALER_BUSTS: "DEALER BUSTS",
    Outcome.PLAYER_BUSTS: "PLAYER BUSTS",
    Outcome.PLAYER_WINS: "PLAYER WINS",
    Outcome.HOUSE_WINS: "HOUSE WINS",
}


def message_for(outcome):
    """The banner text shown for an outcome."""
    return _MESSAGES[Outcome(outcome)]


def make_deck():
    """All 52 cards, each encoded as suit << 4 | rank (rank 0 is the ace)."""
    return [(suit << 4) | rank for suit in range(SUITS) for rank in range(RANKS)]


def add_card(score, card):
    """Add a card to a (total, soft) score and return the new score.

    An ace counts eleven while that keeps the total at 21 or less, making the
    hand soft; a soft hand that would pass 21 drops the ace back to one.
    """
    total, soft = score
    rank = card & 0x0F
    if rank >= RANKS or card >> 4 >= SUITS or card < 0:
        raise ValueError(f"not a card: {card!r}")
    if rank == 0:
        if total <= 10:
            total += 11
            soft = True
        else:
            total += 1
    elif rank > 8:
        total += 10
    else:
        total += rank + 1
    if total > BLACKJACK_TOTAL and soft:
        total -= 10
        soft = False
    return total, soft


@dataclass
class Hand:
    """Cards held by one side and their running score."""

    cards: list = field(default_factory=list)
    total: int = 0
    soft: bool = False

    def add(self, card):
        """Take a card and return the new total."""
        self.total, self.soft = add_card((self.total, self.soft), card)
        self.cards.append(card)
        return self.total

    @property
    def busted(self):
        return self.total > BLACKJACK_TOTAL


class _Phase(Enum):
    DEALING = "dealing"
    PLAYER = "player"
    DEALER = "dealer"
    DONE = "done"


class BlackjackRound:
    """One hand of blackjack between the player and the dealer."""

    def __init__(self, deck=None, rng=None):
        if deck is None:
            deck = make_deck()
            (rng or random).shuffle(deck)
        self._deck = iter(list(deck))
        self.player = Hand()
        self.dealer = Hand()
        self.hidden_card = None
        self.outcome = None
        self._phase = _Phase.DEALING

    @property
    def finished(self):
        return self._phase is _Phase.DONE

    def _draw(self):
        try:
            return next(self._deck)
        except StopIteration:
            raise RuntimeError("deck exhausted") from None

    def _require(self, phase):
        if self._phase is not phase:
            raise RuntimeError(f"not allowed while {self._phase.value}")

    def _finish(self, outcome):
        self.outcome = outcome
        self._phase = _Phase.DONE
        return outcome

    def deal(self):
        """Deal player, dealer (face down), player, dealer; return any outcome."""
        self._require(_Phase.DEALING)
        self.player.add(self._draw())
        self.hidden_card = self._draw()
        self.dealer.add(self.hidden_card)
        self.player.add(self._draw())
        self.dealer.add(self._draw())
        if self.player.total == BLACKJACK_TOTAL:
            if self.player.total == self.dealer.total:
                return self._finish(Outcome.PUSH)
            return self._finish(Outcome.BLACKJACK)
        self._phase = _Phase.PLAYER
        return None

    def hit(self):
        """Give the player another card and return it."""
        self._require(_Phase.PLAYER)
        card = self._draw()
        self.player.add(card)
        if self.player.busted:
            self._finish(Outcome.PLAYER_BUSTS)
        elif self.player.total == BLACKJACK_TOTAL:
            self._phase = _Phase.DEALER
        return card

    def stand(self):
        """End the player's turn."""
        self._require(_Phase.PLAYER)
        self._phase = _Phase.DEALER

    def dealer_play(self):
        """Dealer draws to 17 or more, then the hands are compared."""
        self._require(_Phase.DEALER)
        while self.dealer.total < DEALER_STANDS_ON:
            self.dealer.add(self._draw())
        if self.dealer.busted:
            return self._finish(Outcome.DEALER_BUSTS)
        if self.player.total > self.dealer.total:
            return self._finish(Outcome.PLAYER_WINS)
        if self.player.total == self.dealer.total:
            return self._finish(Outcome.PUSH)
        return self._finish(Outcome.HOUSE_WINS)

    def settle(self, bet):
        """Amount paid back to the player; on a push the stake stays in play."""
        if bet < 0:
            raise ValueError("bet must not be negative")
        if self.outcome is None:
            raise RuntimeError("round is not finished")
        if self.outcome is Outcome.BLACKJACK:
            return (bet << 1) + (bet >> 1)
        if self.outcome in (Outcome.DEALER_BUSTS, Outcome.PLAYER_WINS):
            return bet << 1
        return 0