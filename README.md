# nonogram

A nonogram (picture-cross) puzzle game for the terminal. You fill cells on a
grid so that every row and every column matches its number clues. A
depth-first solver checks that a new puzzle has exactly one solution. The same
solver drives the hint feature.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
nonogram
```

The main menu has two entries:

1. **Play**: browse the saved puzzles with the left/right arrows and press `z` to play one.
2. **Edit puzzles**: add a drawing you paint yourself, add a random drawing, or remove a drawing.

Use the up/down arrows to move between entries and `z` to choose one. `Esc`
goes back, or quits from the main menu.

While playing:

| Key    | Action                                                |
|--------|-------------------------------------------------------|
| arrows | move the cursor                                       |
| `z`    | fill a cell, or clear it if it is already filled      |
| `x`    | mark a cell with an X, or clear the mark              |
| `i`    | clear the board; the hint count goes back to 3        |
| `h`    | correct one wrong cell (up to 3 times per puzzle)     |
| `Esc`  | back to the puzzle list                               |

When every row and column matches the clues, the finished picture is shown.
The board is then cleared so that the puzzle can be played again.

### Adding puzzles

A hand-made drawing can be 1 to 10 cells wide and high. In the editor, `z`
toggles a cell, `i` clears the drawing, `q` saves it and `Esc` discards it. A
random drawing can be 1 to 20 cells wide and high.

Before a puzzle is saved, the solver looks for its solutions. There are three
possible results:

- **One solution**: the puzzle is saved.
- **More than one solution**: the puzzle is saved, but hints are disabled for it.
- **Time limit reached** (30 seconds by default): the puzzle is not saved.

### Limits

Puzzles live only in memory. The game starts with an empty collection, and
everything you add is lost when you quit. Nothing is read from or written to
disk.

## Using the library

```python
from nonogram.drawing import Drawing
from nonogram.solver import AutoSolver, Uniqueness

answer = Drawing([
    [1, 1, 1],
    [0, 0, 0],
    [1, 1, 0],
])
print(answer.row_clues)  # [[3], [0], [2]]
print(answer.col_clues)  # [[1, 1], [1, 1], [1]]

solver = AutoSolver(time_limit=30)
if solver.check_unique_solution(answer) is Uniqueness.UNIQUE:
    print("unique puzzle")
```

The modules:

- `nonogram.drawing`: the `Drawing` board, addressed as `drawing[row, col]`,
  with its `Cell` states (`EMPTY`, `FILLED`, `CROSSED`). It also provides
  `line_clues` and `Drawing.random`.
- `nonogram.solver`: `AutoSolver` (`solve`, `check_unique_solution`, `hint`),
  the line checks `check_row`, `check_col` and `is_complete`, and the
  line-packing helpers `left_solve`, `right_solve` and `overlap_solve`.
  `hint` raises `HintError` when no hint can be given.
- `nonogram.viewer`: `render` returns a board with its clues as coloured
  terminal text, and `show` writes it to a stream.
- `nonogram.console`: `Key`, `decode_key`, `read_key` and `clear_screen`.
- `nonogram.play_scene`: `PlayScene`, which applies key presses to a player's
  board and returns an `Action`.
- `nonogram.game`: `GameManager`, which runs the menus, and `main`, the
  command's entry point. `GameManager` takes an iterable of keys, an iterable
  of input lines, an output stream, a random generator and a solver. With
  these supplied, it runs without a keyboard and without pauses.