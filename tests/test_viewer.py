import io
import re

from nonogram.drawing import Cell, Drawing
from nonogram.viewer import render, show

ANSI = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def plain(text):
    return ANSI.sub("", text)


def test_render_small_board_layout():
    drawing = Drawing([[1, 0], [1, 1]])
    assert plain(render(drawing)) == "■2 1 \n 1■□\n 2■■\n\n"


def test_render_line_count_matches_clue_depth_and_height():
    drawing = Drawing([[1, 0, 1], [0, 0, 0], [1, 0, 1]])
    lines = plain(render(drawing)).split("\n")
    col_depth = max(len(c) for c in drawing.col_clues)
    # header lines, board lines, blank separator, trailing empty after last newline
    assert len(lines) == col_depth + drawing.height + 2
    assert lines[-1] == "" and lines[-2] == ""


def test_two_digit_clue_is_printed_whole():
    drawing = Drawing([[1] * 10])
    text = plain(render(drawing))
    board_line = text.split("\n")[1]
    assert board_line.startswith("10")


def test_cursor_cell_is_highlighted():
    drawing = Drawing([[0, 0]])
    drawing.cursor_x = 1
    text = render(drawing)
    assert text.count("\x1b[33m") == 1
    assert text.index("\x1b[33m") > text.index("\x1b[37m")


def test_crossed_cell_uses_red():
    drawing = Drawing([[0, 0]])
    drawing[0, 1] = Cell.CROSSED
    assert "\x1b[91m■" in render(drawing)


def test_show_writes_rendered_board_after_home():
    drawing = Drawing([[1, 0], [0, 1]])
    stream = io.StringIO()
    show(drawing, stream)
    written = stream.getvalue()
    assert written.endswith(render(drawing))
    assert plain(written) == plain(render(drawing))