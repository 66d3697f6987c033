"""Arena bounds and cell coordinates for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from typing import NamedTuple

import numpy as np


class Cell(NamedTuple):
    """A discrete arena coordinate. ``y`` grows upward."""

    x: int
    y: int


class CellType(enum.IntEnum):
    """Integer codes stored in an occupancy array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """Fixed-size arena of ``width`` × ``height`` cells.

    The grid owns no entities; it only answers questions about coordinates.
    """

    def __init__(self, width: int = 10, height: int = 10) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be at least 1×1.")
        self.width = width
        self.height = height

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a cell lies within the arena."""
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def cells(self) -> Iterator[Cell]:
        """Yield every cell in the arena, bottom row first."""
        for y in range(self.height):
            for x in range(self.width):
                yield Cell(x, y)

    def occupancy(
        self,
        snake_cells: Iterable[Cell] = (),
        food_cells: Iterable[Cell] = (),
    ) -> np.ndarray:
        """Return an ``(height, width)`` array of :class:`CellType` codes.

        Indexed ``[y, x]``. Snake cells are painted after food, so a snake
        segment standing on food reads as ``SNAKE``. Out-of-bounds cells
        are ignored.
        """
        cells = np.zeros((self.height, self.width), dtype=np.int8)
        for cell_type, group in (
            (CellType.FOOD, food_cells),
            (CellType.SNAKE, snake_cells),
        ):
            for cell in group:
                if self.in_bounds(cell):
                    cells[cell.y, cell.x] = cell_type
        return cells

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"width": self.width, "height": self.height}
