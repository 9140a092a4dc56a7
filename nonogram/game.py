"""Menus and game flow of the terminal nonogram game."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Iterable, Iterator
from typing import TextIO

from nonogram.console import Key, clear_screen, read_key
from nonogram.drawing import Cell, Drawing
from nonogram.play_scene import CONTROLS, Action, PlayScene
from nonogram.solver import AutoSolver, HintError, Uniqueness, is_complete
from nonogram.viewer import show

MAX_HINTS = 3

_GREEN = "\x1b[92m"
_YELLOW = "\x1b[33m"
_RESET = "\x1b[0m"

_TITLE = "N O N O G R A M"

_EDITOR_CONTROLS = (
    "\n Move: arrow keys"
    "\n Fill: z"
    "\n Reset: i (all progress is lost)"
    "\n Save: q"
    "\n Back: Esc\n"
)


def _keyboard() -> Iterator[Key]:
    while True:
        try:
            yield read_key()
        except EOFError:
            return


def _stdin_lines() -> Iterator[str]:
    yield from sys.stdin


class GameManager:
    """Keeps the puzzle collection and runs the menus.

    ``keys`` and ``lines`` default to the keyboard and standard input; when
    they are given, the game runs without pauses.
    """

    def __init__(
        self,
        keys: Iterable[Key] | None = None,
        lines: Iterable[str] | None = None,
        out: TextIO | None = None,
        rng: random.Random | None = None,
        solver: AutoSolver | None = None,
    ) -> None:
        self._interactive = keys is None
        self._keys: Iterator[Key] = iter(keys) if keys is not None else _keyboard()
        self._lines: Iterator[str] = iter(lines) if lines is not None else _stdin_lines()
        self.out: TextIO = out if out is not None else sys.stdout
        self.rng = rng if rng is not None else random.Random()
        self.solver = solver if solver is not None else AutoSolver()
        self.drawings: list[Drawing] = []
        self.scenes: list[PlayScene] = []
        self.hints: list[int] = []

    # -- small helpers -------------------------------------------------

    def _key(self) -> Key:
        return next(self._keys, Key.ESCAPE)

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def _clear(self) -> None:
        clear_screen(self.out)

    def _sleep(self, seconds: float) -> None:
        if self._interactive:
            time.sleep(seconds)

    def _pause(self) -> None:
        self._write("Press any key to continue . . .\n")
        self._key()

    def _write_menu(self, items: list[str], selected: int) -> None:
        for position, item in enumerate(items):
            line = f"{position + 1}. {item}\n\n"
            self._write(f"{_YELLOW}{line}{_RESET}" if position == selected else line)

    def _read_size(self, label: str, upper: int) -> int:
        while True:
            self._write(f"Enter the {label} (1 ~ {upper}): ")
            try:
                line = next(self._lines)
            except StopIteration:
                raise EOFError("no more input") from None
            try:
                value = int(line.strip())
            except ValueError:
                value = 0
            if 1 <= value <= upper:
                return value
            self._write("Invalid input. Please try again.\n\n")

    # -- puzzle collection ---------------------------------------------

    def register(self, drawing: Drawing) -> Uniqueness:
        """Add a puzzle unless its uniqueness check times out."""
        scene = PlayScene(drawing)
        self._clear()
        show(scene.player, self.out)
        result = self.solver.check_unique_solution(drawing)
        if result is Uniqueness.TIMEOUT:
            self._write("The uniqueness check timed out.\n")
            self._write("The puzzle very likely has several solutions and is not saved.\n")
            return result
        self.drawings.append(drawing)
        self.scenes.append(scene)
        self.hints.append(MAX_HINTS)
        if result is Uniqueness.MULTIPLE:
            self._write("The solution is not unique. Hints are disabled for this puzzle.\n")
        else:
            self._write("The solution is unique. The puzzle has been added.\n")
        return result

    # -- menus ---------------------------------------------------------

    def show_menu(self) -> None:
        """Run the main menu until Esc is pressed."""
        index = 0
        while True:
            self._clear()
            self._write(f"{_GREEN}{_TITLE}{_RESET}\n\n\n")
            self._write_menu(["Play", "Edit puzzles"], index)
            self._write("Move: arrow keys\nSelect: z\nQuit: Esc\n")
            key = self._key()
            if key is Key.UP and index > 0:
                index -= 1
            elif key is Key.DOWN and index < 1:
                index += 1
            elif key is Key.SELECT:
                self._clear()
                if index == 0:
                    self.show_game_menu()
                else:
                    self.show_edit_menu()
            elif key is Key.ESCAPE:
                return

    def show_game_menu(self) -> None:
        """Let the player browse the puzzles and pick one to play."""
        index = 0
        while True:
            self._clear()
            if not self.drawings:
                self._write("No saved drawings.\n")
                self._sleep(1)
                return
            show(self.scenes[index].player, self.out)
            self._write("Browse: left/right arrows\nSelect: z\nBack: Esc\n")
            key = self._key()
            if key is Key.LEFT and index > 0:
                index -= 1
            elif key is Key.RIGHT and index < len(self.scenes) - 1:
                index += 1
            elif key is Key.SELECT:
                self._clear()
                self.start_game(index)
            elif key is Key.ESCAPE:
                return

    def show_edit_menu(self) -> None:
        """Offer adding a hand-made or random puzzle, or removing one."""
        index = 0
        while True:
            self._clear()
            self._write_menu(["Add your own drawing", "Add a random drawing", "Remove a drawing"], index)
            self._write("Move: arrow keys\nSelect: z\nBack: Esc\n")
            key = self._key()
            if key is Key.UP and index > 0:
                index -= 1
            elif key is Key.DOWN and index < 2:
                index += 1
            elif key is Key.SELECT:
                self._clear()
                if index == 0:
                    self.add_drawing()
                elif index == 1:
                    self.add_random_drawing()
                else:
                    self.remove_drawing()
            elif key is Key.ESCAPE:
                return

    # -- playing -------------------------------------------------------

    def start_game(self, index: int) -> bool:
        """Play puzzle ``index``; True when the player completed it."""
        scene = self.scenes[index]
        answer = self.drawings[index]
        player = scene.player
        action = Action.BACK
        while not is_complete(player, answer):
            show(player, self.out)
            self._write(CONTROLS)
            action = scene.handle_key(self._key())
            if action is Action.BACK:
                break
            if action is Action.HINT:
                self._give_hint(index)
            elif action is Action.RESET:
                self.hints[index] = MAX_HINTS

        if action is Action.BACK:
            return False

        self._clear()
        player.cursor_x = player.width
        show(player, self.out)
        self._write("The picture is complete. Congratulations!\n")
        self._sleep(2)
        scene.reset()
        self.hints[index] = MAX_HINTS
        return True

    def _give_hint(self, index: int) -> None:
        self._write("Looking for a hint...\n")
        try:
            self.solver.hint(self.scenes[index].player, self.drawings[index], self.hints[index], self.rng)
        except HintError as error:
            self._write(f"\n{error}\n")
        else:
            self._write("\nHint used!\n")
        finally:
            self.hints[index] -= 1
        self._sleep(1)
        self._clear()

    # -- editing -------------------------------------------------------

    def add_drawing(self) -> None:
        """Let the user paint a new puzzle and save it."""
        width = self._read_size("width", 10)
        height = self._read_size("height", 10)
        drawing = Drawing([[Cell.EMPTY] * width for _ in range(height)])

        while True:
            self._clear()
            show(drawing, self.out)
            self._write(_EDITOR_CONTROLS)
            key = self._key()
            x, y = drawing.cursor_x, drawing.cursor_y
            if key is Key.UP and y > 0:
                drawing.cursor_y = y - 1
            elif key is Key.DOWN and y < height - 1:
                drawing.cursor_y = y + 1
            elif key is Key.LEFT and x > 0:
                drawing.cursor_x = x - 1
            elif key is Key.RIGHT and x < width - 1:
                drawing.cursor_x = x + 1
            elif key is Key.SELECT:
                drawing[y, x] = Cell.FILLED if drawing[y, x] == Cell.EMPTY else Cell.EMPTY
                drawing.recompute_clues()
            elif key is Key.RESET:
                drawing.clear()
            elif key is Key.SAVE:
                self.register(drawing)
                self._pause()
                return
            elif key is Key.ESCAPE:
                return

    def add_random_drawing(self) -> None:
        """Create a random puzzle of a chosen size and save it."""
        width = self._read_size("width", 20)
        height = self._read_size("height", 20)
        self.register(Drawing.random(width, height, self.rng))
        self._pause()

    def remove_drawing(self) -> None:
        """Let the user browse the puzzles and delete one."""
        index = 0
        while True:
            self._clear()
            if not self.drawings:
                self._write("No drawings to remove!\n")
                self._sleep(1)
                return
            show(self.scenes[index].player, self.out)
            self._write("Browse: left/right arrows\nDelete: z (deleted at once)\nBack: Esc\n")
            key = self._key()
            if key is Key.LEFT and index > 0:
                index -= 1
            elif key is Key.RIGHT and index < len(self.scenes) - 1:
                index += 1
            elif key is Key.SELECT:
                self._clear()
                del self.drawings[index]
                del self.scenes[index]
                del self.hints[index]
                index = 0
            elif key is Key.ESCAPE:
                return


def main(argv: list[str] | None = None) -> int:
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="nonogram", description="Play and edit nonogram puzzles in the terminal."
    )
    parser.parse_args(argv)
    try:
        GameManager().show_menu()
    except (KeyboardInterrupt, EOFError):
        pass
    return 0