"""Food spawning logic."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.entities import EntityKind, EntityStore
from grid_snake.grid import Cell

if TYPE_CHECKING:
    from grid_snake.grid import Grid

logger = logging.getLogger(__name__)

SeedSource = Callable[[], int]

_U32_LIMIT = 2**32


def entropy_seed() -> int:
    """Draw an unsigned 32-bit seed from OS entropy."""
    return int(np.random.default_rng().integers(0, _U32_LIMIT))


class FoodSpawner:
    """Places food at random in-bounds cells.

    A fresh NumPy generator is seeded from ``seed_source`` on every spawn,
    so a deterministic seed source gives reproducible placement. Spawns are
    not checked against the snake or existing food.
    """

    def __init__(
        self,
        grid: Grid,
        store: EntityStore,
        seed_source: SeedSource | None = None,
        size: float = 0.8,
    ) -> None:
        self.grid = grid
        self.store = store
        self.seed_source = seed_source if seed_source is not None else entropy_seed
        self.size = size

    def spawn(self) -> int:
        """Create one food entity and return its handle."""
        seed = self.seed_source() % _U32_LIMIT
        rng = np.random.default_rng(seed)
        cell = Cell(
            int(rng.integers(0, self.grid.width)),
            int(rng.integers(0, self.grid.height)),
        )
        handle = self.store.spawn(EntityKind.FOOD, cell, self.size)
        logger.debug("Food spawned at %s (seed %d).", cell, seed)
        return handle

    def handles(self) -> list[int]:
        return self.store.handles(EntityKind.FOOD)

    def cells(self) -> list[Cell]:
        """Return the cells of all live food, oldest first."""
        return [self.store.position(h) for h in self.handles()]

    def eat_at(self, cell: Cell) -> int:
        """Remove every food at *cell*. Returns how many were removed."""
        eaten = 0
        for handle in self.handles():
            if self.store.position(handle) == cell:
                self.store.despawn(handle)
                eaten += 1
        return eaten

    def clear(self) -> None:
        """Remove all food."""
        for handle in self.handles():
            self.store.despawn(handle)

    def __len__(self) -> int:
        return len(self.handles())

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {"positions": [list(c) for c in self.cells()]}
