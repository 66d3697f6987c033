"""Grid Snake — simulation core."""

from grid_snake.config import GameConfig
from grid_snake.controller import new_world, reset_world
from grid_snake.controls import Key, read_direction
from grid_snake.engine import TickResult, step
from grid_snake.grid import Cell, CellType, Grid
from grid_snake.loop import GameLoop, RepeatingTimer
from grid_snake.snake import Direction, Snake
from grid_snake.world import World

__all__ = [
    "Cell",
    "CellType",
    "Direction",
    "GameConfig",
    "GameLoop",
    "Grid",
    "Key",
    "RepeatingTimer",
    "Snake",
    "TickResult",
    "World",
    "new_world",
    "read_direction",
    "reset_world",
    "step",
]
