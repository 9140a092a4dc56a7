"""Nonogram boards: a grid of cells together with its row and column clues."""

from __future__ import annotations

import random as _random
from collections.abc import Iterable, Sequence
from enum import IntEnum
from itertools import groupby


class Cell(IntEnum):
    """State of a single board cell."""

    EMPTY = 0
    FILLED = 1
    CROSSED = 2


def line_clues(cells: Iterable[int]) -> list[int]:
    """Return the lengths of the runs of filled cells; ``[0]`` for a line with none."""
    runs = [sum(1 for _ in group) for value, group in groupby(cells) if value == Cell.FILLED]
    return runs or [0]


class Drawing:
    """A rectangular board with clues, addressed as ``drawing[row, col]``."""

    def __init__(self, grid: Iterable[Iterable[int]]) -> None:
        rows = [[Cell(value) for value in row] for row in grid]
        if not rows or not rows[0]:
            raise ValueError("a drawing needs at least one row and one column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("every row of a drawing must have the same length")
        self.grid: list[list[Cell]] = rows
        self.height = len(rows)
        self.width = width
        self.cursor_x = 0
        self.cursor_y = 0
        self.row_clues: list[list[int]] = []
        self.col_clues: list[list[int]] = []
        self.recompute_clues()

    @classmethod
    def random(cls, width: int, height: int, rng: _random.Random | None = None) -> Drawing:
        """Build a drawing of the given size whose cells are filled at random."""
        if width < 1 or height < 1:
            raise ValueError("width and height must be at least 1")
        rng = rng or _random.Random()
        return cls([[rng.randrange(2) for _ in range(width)] for _ in range(height)])

    def copy(self) -> Drawing:
        """Return an independent copy, clues and cursor included."""
        duplicate = Drawing(self.grid)
        duplicate.row_clues = [list(clue) for clue in self.row_clues]
        duplicate.col_clues = [list(clue) for clue in self.col_clues]
        duplicate.cursor_x = self.cursor_x
        duplicate.cursor_y = self.cursor_y
        return duplicate

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        row, col = pos
        return self.grid[row][col]

    def __setitem__(self, pos: tuple[int, int], value: int) -> None:
        row, col = pos
        self.grid[row][col] = Cell(value)

    def row(self, index: int) -> tuple[Cell, ...]:
        """Return the cells of one row, left to right."""
        return tuple(self.grid[index])

    def column(self, index: int) -> tuple[Cell, ...]:
        """Return the cells of one column, top to bottom."""
        return tuple(row[index] for row in self.grid)

    def recompute_clues(self) -> None:
        """Derive the row and column clues from the current cells."""
        self.row_clues = [line_clues(row) for row in self.grid]
        self.col_clues = [line_clues(self.column(col)) for col in range(self.width)]

    def clear(self) -> None:
        """Set every cell to empty, keeping the clues."""
        self.grid = [[Cell.EMPTY] * self.width for _ in range(self.height)]

    def row_sum(self, index: int) -> int:
        """Number of filled cells in a row."""
        return sum(1 for cell in self.grid[index] if cell == Cell.FILLED)

    def col_sum(self, index: int) -> int:
        """Number of filled cells in a column."""
        return sum(1 for cell in self.column(index) if cell == Cell.FILLED)

    def total_filled(self) -> int:
        """Number of filled cells on the whole board."""
        return sum(self.row_sum(index) for index in range(self.height))


def _as_sequence(cells: Iterable[int]) -> Sequence[int]:
    return cells if isinstance(cells, Sequence) else tuple(cells)