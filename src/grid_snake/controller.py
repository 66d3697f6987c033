"""World construction and game-over recovery."""

from __future__ import annotations

import logging

from grid_snake.config import GameConfig
from grid_snake.entities import EntityStore
from grid_snake.food import FoodSpawner, SeedSource
from grid_snake.snake import Snake
from grid_snake.world import World

logger = logging.getLogger(__name__)


def new_world(
    config: GameConfig | None = None,
    seed_source: SeedSource | None = None,
) -> World:
    """Build a world in its initial state: a fresh snake and no food."""
    cfg = config or GameConfig()
    grid = cfg.grid()
    store = EntityStore()
    snake = Snake(
        store,
        start=cfg.start_cell,
        direction=cfg.direction,
        head_size=cfg.head_size,
        segment_size=cfg.segment_size,
    )
    food = FoodSpawner(grid, store, seed_source=seed_source, size=cfg.food_size)
    return World(config=cfg, grid=grid, store=store, snake=snake, food=food)


def reset_world(world: World) -> None:
    """Despawn all food and segments and respawn the starting snake."""
    logger.info(
        "Game over at tick %d with %d segments; resetting.",
        world.tick, len(world.snake),
    )
    world.food.clear()
    world.snake.reset()
    world.last_tail = None
    world.resets += 1
