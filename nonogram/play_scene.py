"""A player's board for one puzzle, driven by key presses."""

from __future__ import annotations

from enum import Enum

from nonogram.console import Key
from nonogram.drawing import Cell, Drawing

CONTROLS = (
    "\n\n Move: arrow keys"
    "\n Fill: z"
    "\n Mark X: x"
    "\n Reset: i (progress is cleared at once)"
    "\n Hint: h (up to 3 times)"
    "\n Back: Esc\n"
)


class Action(Enum):
    """What the game should do after a key press."""

    BACK = 0
    CONTINUE = 1
    HINT = 2
    RESET = 3


class PlayScene:
    """Holds the player's board, which shares its clues with the answer."""

    def __init__(self, answer: Drawing) -> None:
        self.player = answer.copy()
        self.reset()

    def handle_key(self, key: Key) -> Action:
        """Apply a key press to the player's board."""
        board = self.player
        x, y = board.cursor_x, board.cursor_y
        if key is Key.UP:
            if y != 0:
                board.cursor_y = y - 1
        elif key is Key.DOWN:
            if y != board.height - 1:
                board.cursor_y = y + 1
        elif key is Key.LEFT:
            if x != 0:
                board.cursor_x = x - 1
        elif key is Key.RIGHT:
            if x != board.width - 1:
                board.cursor_x = x + 1
        elif key is Key.SELECT:
            board[y, x] = Cell.EMPTY if board[y, x] == Cell.FILLED else Cell.FILLED
        elif key is Key.CROSS:
            board[y, x] = Cell.EMPTY if board[y, x] == Cell.CROSSED else Cell.CROSSED
        elif key is Key.RESET:
            self.reset()
            return Action.RESET
        elif key is Key.HINT:
            return Action.HINT
        elif key is Key.ESCAPE:
            return Action.BACK
        return Action.CONTINUE

    def reset(self) -> None:
        """Empty every cell and move the cursor home."""
        self.player.clear()
        self.player.cursor_x = 0
        self.player.cursor_y = 0