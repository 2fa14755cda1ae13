"""Sound effect and music identifiers with their display names."""

from enum import IntEnum

__all__ = ["SoundEffect", "Music", "effect_name", "music_name"]


class SoundEffect(IntEnum):
    """Sound effects known to the sound driver."""

    VICTORY_SFX = 0
    FAILURE_SFX = 1
    MOVE_CURSOR = 2
    SELECT_CONFIRM = 3
    CANCEL_GO_BACK = 4
    CARD_DEALING = 5
    TURN_OVER_NEW_CARD_1 = 6
    TURN_OVER_NEW_CARD_2 = 7
    FOLD_CARDS = 8
    CHIPS_SMALL = 9
    CHIPS_MEDIUM = 10
    CHIPS_LARGE = 11


class Music(IntEnum):
    """Music tracks known to the sound driver."""

    GAMEPLAY_5 = 0
    GAMEPLAY_1_POKER_THEME_2 = 1
    GAMEPLAY_2 = 2
    GAMEPLAY_3 = 3
    GAMEPLAY_4 = 4
    MAIN_MENU = 5
    VICTORY = 6


_EFFECT_NAMES = {
    SoundEffect.VICTORY_SFX: "VICTORY SFX",
    SoundEffect.FAILURE_SFX: "FAILURE SFX",
    SoundEffect.MOVE_CURSOR: "MOVE CURSOR",
    SoundEffect.SELECT_CONFIRM: "SELECT\\CONFIRM",
    SoundEffect.CANCEL_GO_BACK: "CANCEL\\GO BACK",
    SoundEffect.CARD_DEALING: "CARD DEALING",
    SoundEffect.TURN_OVER_NEW_CARD_1: "TURN OVER NEW CARD 1",
    SoundEffect.TURN_OVER_NEW_CARD_2: "TURN OVER NEW CARD 2",
    SoundEffect.FOLD_CARDS: "FOLD CARDS",
    SoundEffect.CHIPS_SMALL: "CHIPS SMALL",
    SoundEffect.CHIPS_MEDIUM: "CHIPS MEDIUM",
    SoundEffect.CHIPS_LARGE: "CHIPS LARGE",
}

_MUSIC_NAMES = {
    Music.GAMEPLAY_5: "GAMEPLAY 5",
    Music.GAMEPLAY_1_POKER_THEME_2: "GAMEPLAY 1 (POKER THEME 2)",
    Music.GAMEPLAY_2: "GAMEPLAY 2",
    Music.GAMEPLAY_3: "GAMEPLAY 3",
    Music.GAMEPLAY_4: "GAMEPLAY 4",
    Music.MAIN_MENU: "MAIN MENU",
    Music.VICTORY: "VICTORY",
}


def effect_name(effect):
    """Return the display name of a sound effect; ValueError if unknown."""
    return _EFFECT_NAMES[SoundEffect(effect)]


def music_name(music):
    """Return the display name of a music track; ValueError if unknown."""
    return _MUSIC_NAMES[Music(music)]