"""Tick phases: movement, eating, growth and game-over.

Each phase takes the :class:`~grid_snake.world.World` explicitly and
reports its signal as a return value. Phases must run in the order
movement → eating → growth → game-over within a pass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from grid_snake.controller import reset_world
from grid_snake.world import World

logger = logging.getLogger(__name__)


@dataclass
class TickResult:
    """What happened during one settled pass."""

    moved: bool = False
    eaten: int = 0
    grew: bool = False
    reset: bool = False


def movement_phase(world: World) -> bool:
    """Advance the snake one cell along its facing.

    Returns ``True`` when a game-over is pending: the head left the arena,
    or it entered a cell that any segment occupied before the move.
    """
    snake = world.snake
    occupied = set(snake.cells())
    world.last_tail = snake.advance()
    world.tick += 1

    head = snake.head
    game_over = False
    if not world.grid.in_bounds(head):
        game_over = True
    if head in occupied:
        game_over = True
    return game_over


def eating_phase(world: World) -> int:
    """Destroy food under the head. Returns one growth signal per food eaten."""
    return world.food.eat_at(world.snake.head)


def growth_phase(world: World, growth_signals: int) -> bool:
    """Apply at most one growth, at the cell the tail last vacated.

    Signals beyond the first are dropped, not carried into later passes.
    """
    if growth_signals <= 0:
        return False
    if growth_signals > 1:
        logger.debug("Dropping %d extra growth signals.", growth_signals - 1)
    # No movement since the last reset: stack onto the current tail.
    at = world.last_tail if world.last_tail is not None else world.snake.tail
    world.snake.grow(at)
    return True


def game_over_phase(world: World, pending: bool) -> bool:
    """Fully reset the world when a game-over is pending."""
    if not pending:
        return False
    reset_world(world)
    return True


def settle(world: World, game_over: bool, moved: bool = False) -> TickResult:
    """Run the eating, growth and game-over phases after movement."""
    result = TickResult(moved=moved)
    result.eaten = eating_phase(world)
    # A pending game-over replaces the world, so growth would be discarded.
    if not game_over:
        result.grew = growth_phase(world, result.eaten)
    result.reset = game_over_phase(world, game_over)
    return result


def step(world: World) -> TickResult:
    """Run one complete movement tick and settle it."""
    return settle(world, movement_phase(world), moved=True)
