"""The owned world state passed through every phase."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from grid_snake.config import GameConfig
from grid_snake.entities import EntityStore
from grid_snake.food import FoodSpawner
from grid_snake.grid import Cell, Grid
from grid_snake.snake import Snake


@dataclass
class World:
    """All mutable game state for a single game."""

    config: GameConfig
    grid: Grid
    store: EntityStore
    snake: Snake
    food: FoodSpawner
    last_tail: Cell | None = None
    tick: int = 0
    resets: int = 0

    def occupancy(self) -> np.ndarray:
        """Return the grid occupancy array for the current state."""
        return self.grid.occupancy(self.snake.cells(), self.food.cells())

    def to_dict(self) -> dict:
        """Return the full, serializable world state."""
        return {
            "tick": self.tick,
            "resets": self.resets,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
            "last_tail": list(self.last_tail) if self.last_tail is not None else None,
        }
