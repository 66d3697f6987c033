"""Single-threaded update loop multiplexing the movement and food timers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from grid_snake.controls import Key, read_direction
from grid_snake.engine import TickResult, movement_phase, settle
from grid_snake.world import World

logger = logging.getLogger(__name__)

InputSource = Callable[[World], Iterable[Key]]


class RepeatingTimer:
    """Fires when accumulated time crosses a multiple of ``period``.

    Excess time carries over into the next period. A single :meth:`tick`
    reports at most one firing, however many periods it spans.
    """

    def __init__(self, period: float) -> None:
        if period <= 0:
            raise ValueError("Timer period must be positive.")
        self.period = period
        self.elapsed = 0.0

    def tick(self, dt: float) -> bool:
        if dt < 0:
            raise ValueError("dt must be non-negative.")
        self.elapsed += dt
        if self.elapsed < self.period:
            return False
        self.elapsed %= self.period
        return True

    def reset(self) -> None:
        self.elapsed = 0.0


@dataclass
class PassReport(TickResult):
    """What happened during one :meth:`GameLoop.update` pass."""

    spawned: bool = False


class GameLoop:
    """Runs the ordered phases of one game on a cooperative schedule.

    Each call to :meth:`update` is one pass: food spawn, input, movement,
    eating, growth, game-over. Every phase finishes before the next starts,
    so no phase ever observes a half-applied mutation.
    """

    def __init__(
        self,
        world: World,
        movement_period: float | None = None,
        food_period: float | None = None,
    ) -> None:
        cfg = world.config
        self.world = world
        self.movement_timer = RepeatingTimer(
            movement_period if movement_period is not None else cfg.movement_period,
        )
        self.food_timer = RepeatingTimer(
            food_period if food_period is not None else cfg.food_period,
        )
        self.passes = 0

    def update(self, dt: float, pressed: Iterable[Key] = ()) -> PassReport:
        """Advance wall-clock time by *dt* and run one pass."""
        world = self.world
        spawned = False
        if self.food_timer.tick(dt):
            world.food.spawn()
            spawned = True

        world.snake.set_facing(read_direction(pressed, world.snake.facing))

        moved = self.movement_timer.tick(dt)
        game_over = movement_phase(world) if moved else False

        result = settle(world, game_over, moved=moved)
        self.passes += 1
        return PassReport(
            moved=result.moved,
            eaten=result.eaten,
            grew=result.grew,
            reset=result.reset,
            spawned=spawned,
        )

    def run(
        self,
        duration: float,
        dt: float,
        inputs: InputSource | None = None,
    ) -> list[PassReport]:
        """Run passes of *dt* seconds until *duration* has elapsed."""
        if dt <= 0:
            raise ValueError("dt must be positive.")
        count = round(duration / dt)
        reports = []
        for _ in range(count):
            pressed = inputs(self.world) if inputs is not None else ()
            reports.append(self.update(dt, pressed))
        logger.info(
            "Ran %d passes: %d ticks, %d resets, snake length %d.",
            count, self.world.tick, self.world.resets, len(self.world.snake),
        )
        return reports
