"""Brightness steps for fading the screen in and out."""

__all__ = ["fade_in_levels", "fade_out_levels", "FADE_FRAMES", "FULL_BRIGHTNESS"]

FADE_FRAMES = 31
FULL_BRIGHTNESS = 15
_FRAMES_PER_STEP = FADE_FRAMES // FULL_BRIGHTNESS


def fade_in_levels():
    """Brightness for each frame of a fade from black to full."""
    return [frame // _FRAMES_PER_STEP for frame in range(FADE_FRAMES)]


def fade_out_levels():
    """Brightness for each frame of a fade from full to black."""
    return [FULL_BRIGHTNESS - level for level in fade_in_levels()]