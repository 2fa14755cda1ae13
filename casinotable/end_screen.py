"""The menu shown after a game: same bet, new bet or back to the title."""

from dataclasses import dataclass
from enum import Enum, IntEnum

__all__ = ["EndChoice", "EndAction", "EndMenu"]

GAME_SOLITAIRE = 0
GAME_BELOTE = 2
BELOTE_ENTRY = 100


class EndChoice(IntEnum):
    """Entries of the end menu, left to right."""

    SAME_BET = 0
    NEW_BET = 1
    TITLE = 2


class EndAction(Enum):
    """What the end menu asks the game to do next."""

    NONE = "none"
    REPLAY = "replay"
    BETTING_SCREEN = "betting_screen"
    MULTIPLAYER_SCREEN = "multiplayer_screen"
    TITLE = "title"


_SELECTOR_X = {
    EndChoice.SAME_BET: (75, 116),
    EndChoice.NEW_BET: (135, 176),
    EndChoice.TITLE: (194, 237),
}


@dataclass
class EndMenu:
    """Cursor over the end menu and its selection rules."""

    choice: EndChoice = EndChoice.SAME_BET

    @property
    def selector_x(self):
        """Left and right x of the selector frame."""
        return _SELECTOR_X[self.choice]

    def move_right(self):
        self.choice = EndChoice((self.choice + 1) % len(EndChoice))
        return self.choice

    def move_left(self):
        self.choice = EndChoice((self.choice - 1) % len(EndChoice))
        return self.choice

    def select(self, cash, bet, game):
        """Act on the current entry; return (action, cash left)."""
        if self.choice is EndChoice.SAME_BET:
            if cash >= bet:
                self.choice = EndChoice.SAME_BET
                return EndAction.REPLAY, cash - bet
        elif self.choice is EndChoice.NEW_BET:
            if cash > 0 or game == GAME_SOLITAIRE:
                if game != GAME_BELOTE:
                    self.choice = EndChoice.SAME_BET
                    return EndAction.BETTING_SCREEN, cash
                if cash >= BELOTE_ENTRY:
                    return EndAction.MULTIPLAYER_SCREEN, cash
        else:
            self.choice = EndChoice.SAME_BET
            return EndAction.TITLE, cash
        return EndAction.NONE, cash