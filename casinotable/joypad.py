"""Controller buttons and the direction reader with key repeat."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag

__all__ = ["Button", "Direction", "RepeatScanner", "read_direction"]

REPEAT_TIMEOUT = 5


class Button(IntFlag):
    """Controller button bits."""

    R = 0x10
    L = 0x20
    X = 0x40
    A = 0x80
    RIGHT = 0x100
    LEFT = 0x200
    DOWN = 0x400
    UP = 0x800
    START = 0x1000
    SELECT = 0x2000
    Y = 0x4000
    B = 0x8000


class Direction(IntEnum):
    """The single input a menu reacts to."""

    NONE = 0
    LEFT = 1
    RIGHT = 2
    DOWN = 3
    UP = 4
    B = 5


_PRIORITY = (
    (Button.LEFT, Direction.LEFT),
    (Button.RIGHT, Direction.RIGHT),
    (Button.DOWN, Direction.DOWN),
    (Button.UP, Direction.UP),
    (Button.B, Direction.B),
)


def read_direction(state):
    """Reduce a pad state to one direction, left taking precedence."""
    state = int(state)
    return next(
        (direction for button, direction in _PRIORITY if state & button),
        Direction.NONE,
    )


@dataclass
class RepeatScanner:
    """Reports a held direction once, then again after a timeout of frames."""

    last: Direction = Direction.NONE
    press_point: int = 0
    timeout: int = REPEAT_TIMEOUT

    def scan(self, state, clock):
        """Return the direction to act on for this frame, or NONE."""
        current = read_direction(state)
        elapsed = (clock - self.press_point) & 0xFF
        if current != self.last or elapsed >= self.timeout:
            if current:
                self.press_point = clock & 0xFF
            self.last = current
            return current
        return Direction.NONE