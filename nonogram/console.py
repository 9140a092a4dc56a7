"""Keyboard input and screen control for the terminal game."""

from __future__ import annotations

import os
import sys
from enum import Enum, auto
from typing import TextIO


class Key(Enum):
    """Keys the game reacts to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ESCAPE = auto()
    SELECT = auto()  # "z": choose a menu entry or fill a cell
    CROSS = auto()  # "x": mark a cell as empty
    RESET = auto()  # "i": start over
    HINT = auto()  # "h"
    SAVE = auto()  # "q"
    OTHER = auto()


_ESC = "\x1b"
_SCAN_PREFIXES = ("\x00", "\xe0")

_SCAN_CODES = {"H": Key.UP, "P": Key.DOWN, "K": Key.LEFT, "M": Key.RIGHT}

_ESCAPE_SEQUENCES = {
    "[A": Key.UP,
    "[B": Key.DOWN,
    "[C": Key.RIGHT,
    "[D": Key.LEFT,
    "OA": Key.UP,
    "OB": Key.DOWN,
    "OC": Key.RIGHT,
    "OD": Key.LEFT,
}

_LETTERS = {
    "z": Key.SELECT,
    "x": Key.CROSS,
    "i": Key.RESET,
    "h": Key.HINT,
    "q": Key.SAVE,
}


def decode_key(first: str, second: str | None = None) -> Key:
    """Translate a key press into a :class:`Key`.

    ``first`` is the first character read; ``second`` holds what followed a
    console scan-code prefix or an escape character, if anything did.
    """
    if first in _SCAN_PREFIXES:
        return _SCAN_CODES.get(second or "", Key.OTHER)
    if first == _ESC:
        if not second:
            return Key.ESCAPE
        return _ESCAPE_SEQUENCES.get(second, Key.OTHER)
    return _LETTERS.get(first, Key.OTHER)


def read_key() -> Key:
    """Wait for one key press on standard input and decode it."""
    stream = sys.stdin
    if not stream.isatty():
        first = stream.read(1)
        if not first:
            raise EOFError("no more input")
        second = None
        if first == _ESC:
            second = stream.read(2) or None
        elif first in _SCAN_PREFIXES:
            second = stream.read(1) or None
        return decode_key(first, second)
    if sys.platform == "win32":
        import msvcrt

        first = msvcrt.getwch()
        second = msvcrt.getwch() if first in _SCAN_PREFIXES else None
        return decode_key(first, second)
    return _read_terminal(stream.fileno())


def _read_terminal(fd: int) -> Key:
    import termios
    import tty

    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        data = os.read(fd, 8)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    if not data:
        raise EOFError("no more input")
    text = data.decode(errors="ignore")
    if not text:
        return Key.OTHER
    return decode_key(text[0], text[1:] or None)


def clear_screen(stream: TextIO | None = None) -> None:
    """Erase the terminal and put the cursor in the top left corner."""
    stream = stream if stream is not None else sys.stdout
    stream.write("\x1b[2J\x1b[H")
    stream.flush()