"""Backtracking nonogram solver with uniqueness checks and hints."""

from __future__ import annotations

import random as _random
import time
from collections.abc import Sequence
from enum import IntEnum
from itertools import groupby

from nonogram.drawing import Cell, Drawing


class Uniqueness(IntEnum):
    """Outcome of a uniqueness check."""

    TIMEOUT = 0
    UNIQUE = 1
    MULTIPLE = 2


class HintError(Exception):
    """Raised when a hint cannot be given."""


class _Timeout(Exception):
    pass


def left_solve(clues: Sequence[int], length: int) -> list[int | None]:
    """Pack the blocks to the left; each cell holds its block index or None."""
    return _pack(list(clues), length)


def right_solve(clues: Sequence[int], length: int) -> list[int | None]:
    """Pack the blocks to the right; each cell holds its block index or None."""
    blocks = list(clues)
    packed = _pack(blocks[::-1], length)[::-1]
    last = len(blocks) - 1
    return [None if index is None else last - index for index in packed]


def _pack(clues: list[int], length: int) -> list[int | None]:
    needed = sum(clues) + max(len(clues) - 1, 0)
    if needed > length:
        raise ValueError(f"clues {clues} do not fit in a line of length {length}")
    line: list[int | None] = [None] * length
    position = 0
    for index, block in enumerate(clues):
        for _ in range(block):
            line[position] = index
            position += 1
        position += 1
    return line


def _overlap(clues: Sequence[int], length: int) -> list[int]:
    left = left_solve(clues, length)
    right = right_solve(clues, length)
    return [pos for pos, (a, b) in enumerate(zip(left, right)) if a is not None and a == b]


def overlap_solve(board: Drawing) -> None:
    """Fill the cells that every placement of a line's blocks must cover."""
    for row, clues in enumerate(board.row_clues):
        for col in _overlap(clues, board.width):
            board[row, col] = Cell.FILLED
    for col, clues in enumerate(board.col_clues):
        for row in _overlap(clues, board.height):
            board[row, col] = Cell.FILLED


def _check_line(cells: Sequence[int], target: Sequence[int], complete: bool) -> bool:
    found = [sum(1 for _ in group) for value, group in groupby(cells) if value == Cell.FILLED]
    target = list(target)
    if complete:
        return (found or [0]) == target
    if len(found) > len(target):
        return False
    if any(have > want for have, want in zip(found, target)):
        return False
    remaining = sum(1 for cell in cells if cell == Cell.EMPTY)
    needed = sum(target[len(found):]) + len(target) - len(found) - 1
    return remaining >= needed


def check_row(board: Drawing, answer: Drawing, row: int, complete: bool) -> bool:
    """Check a row of ``board`` against the row clue of ``answer``.

    With ``complete`` the row must match the clue exactly; otherwise it only
    must not yet contradict it.
    """
    return _check_line(board.row(row), answer.row_clues[row], complete)


def check_col(board: Drawing, answer: Drawing, col: int, complete: bool) -> bool:
    """Check a column of ``board`` against the column clue of ``answer``."""
    return _check_line(board.column(col), answer.col_clues[col], complete)


def is_complete(board: Drawing, answer: Drawing) -> bool:
    """True when every row and column of ``board`` satisfies ``answer``'s clues."""
    if board.total_filled() != answer.total_filled():
        return False
    return all(check_row(board, answer, row, True) for row in range(board.height)) and all(
        check_col(board, answer, col, True) for col in range(board.width)
    )


class AutoSolver:
    """Depth-first solver that stops after two solutions or a time limit."""

    def __init__(self, time_limit: float = 30.0) -> None:
        self.time_limit = time_limit
        self.solutions: list[Drawing] = []
        self._start = 0.0

    def solve(self, answer: Drawing) -> list[Drawing]:
        """Search for boards matching ``answer``'s clues.

        Returns at most two solutions, or none when the time limit ran out.
        """
        self.solutions = []
        self._start = time.monotonic()
        board = answer.copy()
        board.clear()
        try:
            self._search(board, answer, 0, 0)
        except _Timeout:
            self.solutions = []
        return list(self.solutions)

    def _search(self, board: Drawing, answer: Drawing, row: int, col: int) -> None:
        if time.monotonic() - self._start > self.time_limit:
            raise _Timeout
        if len(self.solutions) >= 2:
            return
        if row == board.height:
            if is_complete(board, answer):
                self.solutions.append(board.copy())
            return

        next_row = row + (col + 1) // board.width
        next_col = (col + 1) % board.width

        if board[row, col] != Cell.EMPTY:
            self._search(board, answer, next_row, next_col)
            return

        for value in (Cell.FILLED, Cell.CROSSED):
            board[row, col] = value
            if check_row(board, answer, row, False) and check_col(board, answer, col, False):
                self._search(board, answer, next_row, next_col)
            board[row, col] = Cell.EMPTY

    def check_unique_solution(self, answer: Drawing) -> Uniqueness:
        """Classify the puzzle as uniquely solvable, ambiguous, or timed out."""
        count = len(self.solve(answer))
        if count == 0:
            return Uniqueness.TIMEOUT
        if count == 1:
            return Uniqueness.UNIQUE
        return Uniqueness.MULTIPLE

    def hint(
        self,
        player: Drawing,
        answer: Drawing,
        hints_left: int,
        rng: _random.Random | None = None,
    ) -> tuple[int, int]:
        """Correct one wrong cell of ``player`` and return its position."""
        if hints_left <= 0:
            raise HintError("no hints left")
        if self.check_unique_solution(answer) is not Uniqueness.UNIQUE:
            raise HintError("the puzzle has no unique solution; hints are disabled")

        wrong = [
            (row, col)
            for row in range(player.height)
            for col in range(player.width)
            if not (
                (player[row, col] == Cell.CROSSED and answer[row, col] == Cell.EMPTY)
                or player[row, col] == answer[row, col]
            )
        ]
        if not wrong:
            raise HintError("nothing to correct")

        rng = rng or _random.Random()
        row, col = rng.choice(wrong)
        player[row, col] = Cell.FILLED if answer[row, col] == Cell.FILLED else Cell.CROSSED
        return row, col