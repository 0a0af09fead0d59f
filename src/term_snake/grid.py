"""Grid geometry for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

Cell = tuple[int, int]


class CellType(enum.IntEnum):
    """Integer codes stored in the occupancy array."""

    EMPTY = 0
    SNAKE = 1
    HEAD = 2
    FOOD = 3


class Grid:
    """Square game grid of ``size`` x ``size`` cells.

    Coordinates use (row, col) ordering consistent with NumPy indexing.
    The grid holds no state of its own; snake and food positions are
    passed in by the caller.
    """

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError("Grid size must be at least 1.")
        self.size = size

    def is_out_of_bounds(self, cell: Cell) -> bool:
        """Check whether a coordinate lies outside the grid."""
        row, col = cell
        return not (0 <= row < self.size and 0 <= col < self.size)

    @staticmethod
    def is_occupied(cell: Cell, body: Iterable[Cell]) -> bool:
        """Check whether any body segment sits on *cell*."""
        return any(seg == cell for seg in body)

    def is_collision(self, cell: Cell, body: Iterable[Cell]) -> bool:
        """Out of bounds, or on one of the given body segments."""
        return self.is_out_of_bounds(cell) or self.is_occupied(cell, body)

    def random_free_cell(
        self,
        body: Iterable[Cell],
        rng: np.random.Generator,
    ) -> Cell:
        """Sample uniform cells until one is not covered by *body*."""
        occupied = set(body)
        if len(occupied) >= self.size * self.size:
            raise ValueError("No free cell left on the grid.")
        while True:
            row, col = rng.integers(0, self.size, size=2).tolist()
            if (row, col) not in occupied:
                return row, col

    def occupancy(self, body: Iterable[Cell], food: Cell | None) -> np.ndarray:
        """Return an ``int8`` array of :class:`CellType` codes."""
        cells = np.zeros((self.size, self.size), dtype=np.int8)
        if food is not None and not self.is_out_of_bounds(food):
            cells[food] = CellType.FOOD
        segments = list(body)
        for seg in segments[1:]:
            if not self.is_out_of_bounds(seg):
                cells[seg] = CellType.SNAKE
        if segments and not self.is_out_of_bounds(segments[0]):
            cells[segments[0]] = CellType.HEAD
        return cells
