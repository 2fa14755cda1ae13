"""Card casino game rules: blackjack, belote, the end menu, fades, joypad input and sounds."""

__version__ = "0.1.0"
__all__ = [
    "belote_cards",
    "belote_game",
    "blackjack",
    "end_screen",
    "fade",
    "joypad",
    "sounds",
]