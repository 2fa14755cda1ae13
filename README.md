# casinotable

The rules and game state behind a small card casino, with no display code.

## What is in it

- **Blackjack** (`casinotable.blackjack`): `make_deck()` builds the 52 cards,
  `add_card()` scores a card into a `(total, soft)` pair with aces counting 11
  or 1, and `Hand` keeps a side's cards and score. `BlackjackRound` runs one
  hand: `deal()`, `hit()`, `stand()`, `dealer_play()` (the dealer draws until
  17 or more) and `settle(bet)`, which returns the amount paid back: two and a
  half times the bet for a blackjack, twice the bet for a win, nothing
  otherwise. `Outcome` names the six ways a round ends and `message_for()`
  gives the banner text for each.
- **Belote cards** (`casinotable.belote_cards`): cards are whole numbers whose
  high nibble is the `Suit` and low nibble the rank (0 is the ace).
  `is_belote_card()` picks out the 32-card deck, `card_strength()`,
  `trick_winner()` and `trick_points()` decide and score a trick under a
  trump, `required_suit()` says what a player must follow with, and
  `find_belote_pair()` finds the seat holding queen and king of trumps.
- **Belote table** (`casinotable.belote_game`): `BeloteGame` seats two teams
  (seats 0 and 2 against 1 and 3), deals five cards and a turned card with
  `deal_first()`, completes the deal with `deal_rest()`, takes cards with
  `play_card()` (refusing ones that break the follow rules), scores tricks with
  `finish_trick()` and deals with `end_deal()`, and reports a `winner()` once a
  team reaches 502. `Team` holds each side's points and `fill_cpu_seats()`
  fills empty seats with computer stand-ins.
- **End menu** (`casinotable.end_screen`): `EndMenu` moves between the
  `EndChoice` entries and `select()` returns an `EndAction` with the cash left.
- **Fades** (`casinotable.fade`): `fade_in_levels()` and `fade_out_levels()`
  give the brightness for each frame of a fade.
- **Joypad** (`casinotable.joypad`): `Button` bits, `read_direction()` to
  reduce a pad state to one `Direction`, and `RepeatScanner` for key repeat.
- **Sound names** (`casinotable.sounds`): `SoundEffect` and `Music` with
  `effect_name()` and `music_name()`.

## What it does not do

There is no screen, sound output or command to run; the package is a library
of rules and state. `BeloteGame` has no computer player of its own: the caller
chooses who takes, which trump is named and which card each seat plays. There
is no betting table or chip handling beyond the cash arithmetic of
`EndMenu.select()` and `BlackjackRound.settle()`, and no achievement tracking
or saved progress.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from casinotable.blackjack import BlackjackRound, make_deck, message_for

game = BlackjackRound(make_deck())
game.deal()
game.stand()
game.dealer_play()
payout = game.settle(10)
print(message_for(game.outcome), payout)
```

```python
from casinotable.belote_cards import Suit, trick_winner

winner = trick_winner([0x0B, 0x0C, 0x10, 0x08], trump=Suit.HEART, leading=Suit.CLOVER)
```