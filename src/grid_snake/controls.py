"""Mapping from pressed direction keys to a facing."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from grid_snake.snake import Direction


class Key(enum.Enum):
    """Directional keys the core understands."""

    LEFT = "left"
    DOWN = "down"
    UP = "up"
    RIGHT = "right"


# First pressed key in this order wins.
_PRIORITY: list[tuple[Key, Direction]] = [
    (Key.LEFT, Direction.LEFT),
    (Key.DOWN, Direction.DOWN),
    (Key.UP, Direction.UP),
    (Key.RIGHT, Direction.RIGHT),
]


def read_direction(pressed: Iterable[Key], current: Direction) -> Direction:
    """Return the direction requested by *pressed*, or *current* if none."""
    keys = set(pressed)
    for key, direction in _PRIORITY:
        if key in keys:
            return direction
    return current
