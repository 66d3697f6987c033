"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from grid_snake.grid import Cell, Grid
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Arena, spawn, timing and sizing settings for one game.

    Supports JSON serialization so runs can be reproduced.
    """

    # Arena
    arena_width: int = 10
    arena_height: int = 10

    # Snake spawn
    start_x: int = 4
    start_y: int = 5
    start_direction: str = "up"

    # Timers, in seconds
    movement_period: float = 0.5
    food_period: float = 3.0

    # Logical sizes, as fractions of one tile
    head_size: float = 0.8
    segment_size: float = 0.65
    food_size: float = 0.8

    def __post_init__(self) -> None:
        if self.arena_width < 1 or self.arena_height < 1:
            raise ValueError("arena_width and arena_height must be at least 1.")
        if self.movement_period <= 0 or self.food_period <= 0:
            raise ValueError("movement_period and food_period must be positive.")
        direction = Direction.from_name(self.start_direction)

        grid = self.grid()
        head = self.start_cell
        tail = direction.opposite().step(head)
        if not (grid.in_bounds(head) and grid.in_bounds(tail)):
            raise ValueError(
                "start position does not fit the arena; the head and the "
                "segment behind it must both be in bounds."
            )

    @property
    def start_cell(self) -> Cell:
        return Cell(self.start_x, self.start_y)

    @property
    def direction(self) -> Direction:
        return Direction.from_name(self.start_direction)

    def grid(self) -> Grid:
        return Grid(width=self.arena_width, height=self.arena_height)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file, ignoring unknown keys."""
        raw = json.loads(Path(path).read_text())
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in raw.items() if k in known})
