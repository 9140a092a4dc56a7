import io
import random

import pytest

from nonogram.console import Key
from nonogram.drawing import Cell, Drawing
from nonogram.game import MAX_HINTS, GameManager, main
from nonogram.solver import AutoSolver, Uniqueness


def make(keys=(), lines=(), solver=None):
    return GameManager(
        keys=list(keys),
        lines=list(lines),
        out=io.StringIO(),
        rng=random.Random(7),
        solver=solver or AutoSolver(),
    )


def test_register_unique_puzzle():
    game = make()
    drawing = Drawing([[1, 1], [0, 0]])
    assert game.register(drawing) is Uniqueness.UNIQUE
    assert game.drawings == [drawing]
    assert game.hints == [MAX_HINTS]
    assert game.scenes[0].player.total_filled() == 0


def test_register_ambiguous_puzzle_is_kept():
    game = make()
    assert game.register(Drawing([[1, 0], [0, 1]])) is Uniqueness.MULTIPLE
    assert len(game.drawings) == 1
    assert "not unique" in game.out.getvalue()


def test_register_timeout_discards_puzzle():
    game = make(solver=AutoSolver(time_limit=-1))
    assert game.register(Drawing([[1]])) is Uniqueness.TIMEOUT
    assert game.drawings == [] and game.scenes == [] and game.hints == []


def test_start_game_completes_and_resets():
    game = make(keys=[Key.SELECT])
    game.register(Drawing([[1]]))
    assert game.start_game(0) is True
    assert game.scenes[0].player[0, 0] == Cell.EMPTY
    assert game.hints[0] == MAX_HINTS
    assert "Congratulations" in game.out.getvalue()


def test_start_game_back_keeps_progress():
    game = make(keys=[Key.SELECT, Key.ESCAPE])
    game.register(Drawing([[1, 1], [0, 0]]))
    assert game.start_game(0) is False
    assert game.scenes[0].player[0, 0] == Cell.FILLED


def test_hint_fills_a_cell_and_uses_a_hint():
    game = make(keys=[Key.HINT, Key.ESCAPE])
    game.register(Drawing([[1, 1], [0, 0]]))
    assert game.start_game(0) is False
    assert game.scenes[0].player.total_filled() == 1
    assert game.hints[0] == MAX_HINTS - 1


def test_add_drawing_rejects_bad_size_and_saves():
    game = make(keys=[Key.SELECT, Key.SAVE], lines=["0", "1", "1"])
    game.add_drawing()
    assert len(game.drawings) == 1
    assert game.drawings[0][0, 0] == Cell.FILLED
    assert game.drawings[0].row_clues == [[1]]
    assert "Invalid input" in game.out.getvalue()


def test_add_drawing_escape_saves_nothing():
    game = make(keys=[Key.ESCAPE], lines=["2", "2"])
    game.add_drawing()
    assert game.drawings == []


def test_add_drawing_without_input_raises_eof():
    game = make(lines=[])
    with pytest.raises(EOFError):
        game.add_drawing()


def test_add_random_drawing_has_requested_shape():
    game = make(lines=["3", "2"])
    game.add_random_drawing()
    assert len(game.drawings) == 1
    assert (game.drawings[0].width, game.drawings[0].height) == (3, 2)


def test_remove_drawing_deletes_selected():
    game = make(keys=[Key.RIGHT, Key.SELECT, Key.ESCAPE])
    first = Drawing([[1]])
    second = Drawing([[1, 1]])
    game.register(first)
    game.register(second)
    game.remove_drawing()
    assert game.drawings == [first]
    assert len(game.scenes) == len(game.hints) == 1


def test_remove_drawing_with_empty_collection():
    game = make()
    game.remove_drawing()
    assert "No drawings to remove" in game.out.getvalue()


def test_main_menu_play_with_no_puzzles():
    game = make(keys=[Key.SELECT])
    game.show_menu()
    assert "No saved drawings" in game.out.getvalue()


def test_edit_menu_adds_random_puzzle():
    game = make(keys=[Key.DOWN, Key.SELECT, Key.OTHER, Key.ESCAPE], lines=["1", "1"])
    game.show_menu_result = None
    game.show_edit_menu()
    assert len(game.drawings) == 1
    assert game.drawings[0].width == 1


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0