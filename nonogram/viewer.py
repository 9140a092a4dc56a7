"""Terminal rendering of a board together with its clues."""

from __future__ import annotations

import sys
from typing import TextIO

from nonogram.drawing import Cell, Drawing

_BLACK = "\x1b[30m"
_GRAY = "\x1b[90m"
_YELLOW = "\x1b[33m"
_WHITE = "\x1b[37m"
_GREEN = "\x1b[92m"
_RED = "\x1b[91m"
_RESET = "\x1b[0m"
_HOME = "\x1b[H"

_SOLID = "■"
_HOLLOW = "□"
_HIDDEN = _BLACK + _SOLID

_CELL_STYLE = {
    Cell.EMPTY: (_WHITE, _HOLLOW),
    Cell.FILLED: (_GREEN, _SOLID),
    Cell.CROSSED: (_RED, _SOLID),
}


def _column_number(value: int) -> str:
    return str(value) if value >= 10 else f"{value} "


def _row_number(value: int) -> str:
    return str(value) if value >= 10 else f" {value}"


def render(drawing: Drawing) -> str:
    """Return the board with its clues as coloured terminal text.

    Every clue and cell takes two columns, so the grid stays aligned for
    clues of up to two digits.
    """
    row_depth = max(len(clue) for clue in drawing.row_clues)
    col_depth = max(len(clue) for clue in drawing.col_clues)
    parts: list[str] = []

    for level in range(col_depth):
        parts.append(_HIDDEN * row_depth)
        for clue in drawing.col_clues:
            offset = level - (col_depth - len(clue))
            if offset < 0:
                parts.append(_HIDDEN)
            else:
                parts.append(_GRAY + _column_number(clue[offset]))
        parts.append("\n")

    for row_index, clue in enumerate(drawing.row_clues):
        for slot in range(row_depth):
            offset = slot - (row_depth - len(clue))
            if offset < 0:
                parts.append(_HIDDEN)
            else:
                parts.append(_GRAY + _row_number(clue[offset]))
        for col_index, cell in enumerate(drawing.row(row_index)):
            color, glyph = _CELL_STYLE[cell]
            if drawing.cursor_x == col_index and drawing.cursor_y == row_index:
                color = _YELLOW
            parts.append(color + glyph)
        parts.append("\n")

    parts.append("\n")
    parts.append(_RESET)
    return "".join(parts)


def show(drawing: Drawing, stream: TextIO | None = None) -> None:
    """Move the cursor to the top left corner and draw the board there."""
    stream = stream if stream is not None else sys.stdout
    stream.write(_HOME + render(drawing))
    stream.flush()