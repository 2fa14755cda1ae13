import pytest

from casinotable.sounds import Music, SoundEffect, effect_name, music_name


def test_effect_names_from_table():
    assert effect_name(SoundEffect.VICTORY_SFX) == "VICTORY SFX"
    assert effect_name(2) == "MOVE CURSOR"
    assert effect_name(SoundEffect.CHIPS_LARGE) == "CHIPS LARGE"


def test_music_names_from_table():
    assert music_name(Music.GAMEPLAY_1_POKER_THEME_2) == "GAMEPLAY 1 (POKER THEME 2)"
    assert music_name(5) == "MAIN MENU"
    assert music_name(Music.VICTORY) == "VICTORY"


def test_every_effect_has_a_distinct_name():
    names = [effect_name(effect) for effect in SoundEffect]
    assert len(set(names)) == len(list(SoundEffect))
    assert all(names)


def test_every_track_has_a_distinct_name():
    names = [music_name(track) for track in Music]
    assert len(set(names)) == len(list(Music))


@pytest.mark.parametrize("bad", [-1, 12, 100])
def test_unknown_effect_raises(bad):
    with pytest.raises(ValueError):
        effect_name(bad)


@pytest.mark.parametrize("bad", [-1, 7])
def test_unknown_music_raises(bad):
    with pytest.raises(ValueError):
        music_name(bad)