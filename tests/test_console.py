import io
from unittest import mock

import pytest

from nonogram.console import Key, clear_screen, decode_key, read_key


@pytest.mark.parametrize(
    "second, expected",
    [("H", Key.UP), ("P", Key.DOWN), ("K", Key.LEFT), ("M", Key.RIGHT), ("Q", Key.OTHER)],
)
def test_decode_scan_codes(second, expected):
    assert decode_key("\xe0", second) is expected
    assert decode_key("\x00", second) is expected


@pytest.mark.parametrize(
    "second, expected",
    [("[A", Key.UP), ("[B", Key.DOWN), ("[C", Key.RIGHT), ("[D", Key.LEFT), ("OA", Key.UP)],
)
def test_decode_escape_sequences(second, expected):
    assert decode_key("\x1b", second) is expected


def test_lone_escape_is_escape():
    assert decode_key("\x1b") is Key.ESCAPE
    assert decode_key("\x1b", "") is Key.ESCAPE


@pytest.mark.parametrize(
    "char, expected",
    [("z", Key.SELECT), ("x", Key.CROSS), ("i", Key.RESET), ("h", Key.HINT), ("q", Key.SAVE)],
)
def test_decode_letters(char, expected):
    assert decode_key(char) is expected


def test_letters_are_case_sensitive_and_unknown_is_other():
    assert decode_key("Z") is Key.OTHER
    assert decode_key("?") is Key.OTHER


def test_read_key_from_piped_input():
    with mock.patch("sys.stdin", io.StringIO("z")):
        assert read_key() is Key.SELECT


def test_read_key_arrow_from_piped_input():
    with mock.patch("sys.stdin", io.StringIO("\x1b[B")):
        assert read_key() is Key.DOWN


def test_read_key_at_end_of_input_raises():
    with mock.patch("sys.stdin", io.StringIO("")):
        with pytest.raises(EOFError):
            read_key()


def test_clear_screen_writes_erase_sequence():
    stream = io.StringIO()
    clear_screen(stream)
    assert stream.getvalue() == "\x1b[2J\x1b[H"