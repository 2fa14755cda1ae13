"""The belote table: seating, dealing, tricks and the scoring of a deal."""

from dataclasses import dataclass

from casinotable.belote_cards import (
    Suit,
    find_belote_pair,
    is_belote_card,
    required_suit,
    suit_of,
    trick_points,
    trick_winner,
)

__all__ = ["Team", "BeloteGame", "fill_cpu_seats"]

SEATS = 4
FIRST_DEAL = 5
HAND_SIZE = 8
DECK_SIZE = 32
WINNING_TOTAL = 502
FAILED_CONTRACT_POINTS = 152
LAST_TRICK_BONUS = 10
CAPOT_BONUS = 90
BELOTE_BONUS = 20
MARGIN = 82
CPU_OFFSET = 3
_JOYPAD_PLAYERS = (2, 3, 4)


def fill_cpu_seats(seats):
    """Give every joypad player 2-4 not seated a computer stand-in.

    Seats hold 0 when empty, 1-4 for a joypad player; a missing player n is
    replaced by n + 3 in the last empty seat. Returns a new list.
    """
    seats = list(seats)
    if len(seats) != SEATS:
        raise ValueError(f"a belote table has {SEATS} seats")
    for player in _JOYPAD_PLAYERS:
        if player in seats:
            continue
        empty = [seat for seat, occupant in enumerate(seats) if not occupant]
        if not empty:
            raise ValueError("no free seat for a computer player")
        seats[empty[-1]] = player + CPU_OFFSET
    return seats


@dataclass
class Team:
    """Points and per-deal state of one pair of partners."""

    current_points: int = 0
    total_points: int = 0
    trump: bool = False
    tricks_won: int = 0
    last_trick: bool = False
    bonus: int = 0
    last_trick_bonus: int = 0
    capot_bonus: int = 0

    def reset_deal(self):
        """Forget everything of the deal just played, keeping the total."""
        self.current_points = 0
        self.trump = False
        self.tricks_won = 0
        self.last_trick = False
        self.bonus = 0
        self.last_trick_bonus = 0
        self.capot_bonus = 0


class BeloteGame:
    """Four seats, two teams (seats 0 and 2 against 1 and 3) and the deal in play."""

    def __init__(self):
        self.reset()

    def reset(self):
        """Start a new game from nothing."""
        self.teams = (Team(), Team())
        self.hands = [[] for _ in range(SEATS)]
        self.first_to_bid = SEATS - 1
        self.trump = None
        self.trump_card = None
        self.leader = 0
        self.current = 0
        self.trick = [None] * SEATS
        self.leading = None
        self.margin = MARGIN
        self.belote_cards = ()
        self.belote_announced = 0
        self.announcement = None
        self._deck = iter(())

    @property
    def totals(self):
        return tuple(team.total_points for team in self.teams)

    @property
    def deal_over(self):
        return not any(self.hands)

    def _draw(self):
        try:
            return next(self._deck)
        except StopIteration:
            raise RuntimeError("deck exhausted") from None

    def deal_first(self, deck):
        """Turn up a card and deal five to each seat; return the turned card.

        Only the 32 belote cards of the deck are used. The bidding starts one
        seat further than in the previous deal.
        """
        cards = [card for card in deck if is_belote_card(card)]
        if len(cards) < DECK_SIZE:
            raise ValueError(f"a belote deal needs {DECK_SIZE} cards")
        self._deck = iter(cards)
        self.hands = [[] for _ in range(SEATS)]
        self.trick = [None] * SEATS
        self.leading = None
        self.trump = None
        self.belote_cards = ()
        self.belote_announced = 0
        self.announcement = None
        self.first_to_bid = (self.first_to_bid + 1) % SEATS
        self.trump_card = self._draw()
        for n in range(SEATS * FIRST_DEAL):
            self.hands[(self.first_to_bid + n) % SEATS].append(self._draw())
        self.current = self.first_to_bid
        return self.trump_card

    def deal_rest(self, taker, trump_card):
        """The taker gets the turned card and the deal is completed to eight each.

        The trump is the turned card's suit unless one was named beforehand
        by setting ``trump``. The taker leads the first trick. Returns the trump.
        """
        if not 0 <= taker < SEATS:
            raise ValueError(f"no seat {taker!r}")
        if any(len(hand) != FIRST_DEAL for hand in self.hands):
            raise RuntimeError("the first five cards have not been dealt")
        if self.trump is None:
            self.trump = suit_of(trump_card)
        else:
            suit_of(trump_card)
            self.trump = Suit(self.trump)
        self.trump_card = trump_card
        self.hands[taker].append(trump_card)
        self.teams[taker % 2].trump = True
        for n in range(1, 3 * SEATS):
            self.hands[(taker + n) % SEATS].append(self._draw())
        self.leader = self.current = taker
        self.trick = [None] * SEATS
        self.leading = None
        for team in self.teams:
            team.bonus = 0
        self.belote_cards = ()
        self.belote_announced = 0
        pair = find_belote_pair(self.hands, self.trump)
        if pair is not None:
            seat, cards = pair
            self.teams[seat % 2].bonus = BELOTE_BONUS
            self.belote_cards = cards
        return self.trump

    def play_card(self, seat, index):
        """Play the card at ``index`` of the seat's hand into the trick; return it."""
        if self.trump is None:
            raise RuntimeError("no trump has been chosen")
        if seat != self.current:
            raise ValueError(f"seat {seat!r} is not to play")
        if self.trick[seat] is not None:
            raise RuntimeError("the trick is complete")
        hand = self.hands[seat]
        if not 0 <= index < len(hand):
            raise ValueError(f"no card at {index!r}")
        card = hand[index]
        is_leader = seat == self.leader
        needed = required_suit(hand, self.leading, self.trump, is_leader)
        if needed is not None and suit_of(card) != needed:
            raise ValueError(f"must play {needed.name.lower()}")
        hand.pop(index)
        if is_leader:
            self.leading = suit_of(card)
        self.trick[seat] = card
        self.announcement = None
        if card in self.belote_cards:
            self.belote_announced += 1
            self.announcement = "Belote" if self.belote_announced == 1 else "Rebelote"
        self.current = (seat + 1) % SEATS
        return card

    def finish_trick(self):
        """Score the complete trick; the winning seat leads next and is returned."""
        if any(card is None for card in self.trick):
            raise RuntimeError("the trick is not complete")
        winner = trick_winner(self.trick, self.trump, self.leading)
        team = self.teams[winner % 2]
        team.current_points += trick_points(self.trick, self.trump, self.leading)
        team.tricks_won += 1
        if self.deal_over and team.trump:
            team.last_trick = True
        self.trick = [None] * SEATS
        self.leading = None
        self.leader = self.current = winner
        return winner

    def end_deal(self):
        """Add the deal's points to the totals and return the totals.

        A taking team below the margin scores nothing and the other team
        takes 152 plus its own bonuses.
        """
        if not self.deal_over:
            raise RuntimeError("the deal is not over")
        for team in self.teams:
            if team.last_trick:
                team.current_points += LAST_TRICK_BONUS
                team.last_trick_bonus = LAST_TRICK_BONUS
            if team.tricks_won == HAND_SIZE:
                team.current_points += CAPOT_BONUS
                team.capot_bonus = CAPOT_BONUS
        failed = next(
            (index for index, team in enumerate(self.teams)
             if team.trump and team.current_points < self.margin),
            None,
        )
        if failed is not None:
            other = self.teams[1 - failed]
            other.total_points += (
                FAILED_CONTRACT_POINTS + other.last_trick_bonus + other.capot_bonus + other.bonus
            )
        else:
            for team in self.teams:
                team.total_points += team.current_points + team.bonus
        for team in self.teams:
            team.reset_deal()
        return self.totals

    def winner(self):
        """Winning team (0 or 1) once a total reaches 502, else None."""
        first, second = self.totals
        if first < WINNING_TOTAL and second < WINNING_TOTAL:
            return None
        return 0 if first > second else 1