import pytest

from casinotable.joypad import Button, Direction, RepeatScanner, read_direction


@pytest.mark.parametrize(
    "button, expected",
    [
        (Button.LEFT, Direction.LEFT),
        (Button.RIGHT, Direction.RIGHT),
        (Button.DOWN, Direction.DOWN),
        (Button.UP, Direction.UP),
        (Button.B, Direction.B),
    ],
)
def test_single_button(button, expected):
    assert read_direction(button) == expected


def test_raw_bits_match_buttons():
    assert read_direction(0x100) == Direction.RIGHT
    assert read_direction(0x8000) == Direction.B


def test_priority_left_first():
    assert read_direction(Button.LEFT | Button.RIGHT | Button.B) == Direction.LEFT
    assert read_direction(Button.UP | Button.DOWN) == Direction.DOWN


def test_unmapped_buttons_are_none():
    assert read_direction(0) == Direction.NONE
    assert read_direction(Button.START | Button.A) == Direction.NONE


def test_held_button_repeats_after_timeout():
    scanner = RepeatScanner()
    assert scanner.scan(Button.RIGHT, 10) == Direction.RIGHT
    assert scanner.scan(Button.RIGHT, 11) == Direction.NONE
    assert scanner.scan(Button.RIGHT, 10 + scanner.timeout - 1) == Direction.NONE
    assert scanner.scan(Button.RIGHT, 10 + scanner.timeout) == Direction.RIGHT


def test_change_of_direction_reports_immediately():
    scanner = RepeatScanner()
    assert scanner.scan(Button.RIGHT, 10) == Direction.RIGHT
    assert scanner.scan(Button.LEFT, 11) == Direction.LEFT


def test_release_and_press_again():
    scanner = RepeatScanner()
    assert scanner.scan(Button.UP, 10) == Direction.UP
    assert scanner.scan(0, 11) == Direction.NONE
    assert scanner.last == Direction.NONE
    assert scanner.scan(Button.UP, 12) == Direction.UP


def test_clock_wraps_around():
    scanner = RepeatScanner()
    assert scanner.scan(Button.DOWN, 253) == Direction.DOWN
    wrapped = (253 + scanner.timeout) & 0xFF
    assert scanner.scan(Button.DOWN, wrapped) == Direction.DOWN
    assert scanner.press_point == wrapped