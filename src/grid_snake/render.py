"""Placement data for a presentation layer.

The core never draws anything. It exposes each entity as a
``(cell, logical_size)`` pair and the arithmetic for turning those into
screen-space positions and scales for a viewport centred on the origin.
"""

from __future__ import annotations

from dataclasses import dataclass

from grid_snake.entities import EntityKind
from grid_snake.grid import Cell
from grid_snake.world import World


@dataclass(frozen=True)
class Placement:
    kind: EntityKind
    cell: Cell
    size: float


def placements(world: World) -> list[Placement]:
    """Return a placement for every live entity, in spawn order."""
    return [Placement(e.kind, e.cell, e.size) for _, e in world.store]


def _convert(pos: float, bound_window: float, bound_game: float) -> float:
    tile_size = bound_window / bound_game
    return pos / bound_game * bound_window - bound_window / 2 + tile_size / 2


def to_screen(
    cell: Cell,
    viewport: tuple[float, float],
    arena: tuple[int, int],
) -> tuple[float, float]:
    """Map *cell* to the centre of its tile in screen space.

    Cell ``(0, 0)`` lands on the bottom-left tile centre and
    ``(W - 1, H - 1)`` on the top-right one.
    """
    return (
        _convert(cell.x, viewport[0], arena[0]),
        _convert(cell.y, viewport[1], arena[1]),
    )


def scale(
    size: float,
    viewport: tuple[float, float],
    arena: tuple[int, int],
) -> tuple[float, float]:
    """Return the on-screen width and height for a logical *size*."""
    return size / arena[0] * viewport[0], size / arena[1] * viewport[1]
