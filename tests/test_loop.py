"""Tests for the timers and the cooperative game loop."""

import pytest

from grid_snake.controller import new_world
from grid_snake.controls import Key
from grid_snake.entities import EntityKind
from grid_snake.grid import Cell
from grid_snake.loop import GameLoop, RepeatingTimer
from grid_snake.snake import Direction


class TestRepeatingTimer:
    def test_fires_on_period(self):
        timer = RepeatingTimer(0.5)
        assert not timer.tick(0.25)
        assert timer.tick(0.25)
        assert timer.elapsed == 0.0

    def test_excess_carries_over(self):
        timer = RepeatingTimer(0.5)
        assert timer.tick(0.75)
        assert timer.elapsed == 0.25
        assert timer.tick(0.25)

    def test_fires_once_for_long_delta(self):
        timer = RepeatingTimer(0.5)
        assert timer.tick(1.25)
        assert timer.elapsed == 0.25

    def test_invalid_period(self):
        with pytest.raises(ValueError, match="positive"):
            RepeatingTimer(0)

    def test_negative_dt(self):
        with pytest.raises(ValueError, match="non-negative"):
            RepeatingTimer(1.0).tick(-0.1)

    def test_reset(self):
        timer = RepeatingTimer(1.0)
        timer.tick(0.5)
        timer.reset()
        assert not timer.tick(0.5)


class TestGameLoopTiming:
    def test_uses_config_periods(self):
        loop = GameLoop(new_world(seed_source=lambda: 0))
        assert loop.movement_timer.period == 0.5
        assert loop.food_timer.period == 3.0

    def test_moves_on_movement_period(self):
        world = new_world(seed_source=lambda: 0)
        loop = GameLoop(world)
        assert not loop.update(0.25).moved
        assert world.snake.head == Cell(4, 5)
        assert loop.update(0.25).moved
        assert world.snake.head == Cell(4, 6)

    def test_food_spawns_on_food_period(self):
        world = new_world(seed_source=lambda: 0)
        loop = GameLoop(world, movement_period=100.0)
        reports = [loop.update(0.5) for _ in range(6)]
        assert [r.spawned for r in reports] == [False] * 5 + [True]
        assert len(world.food) == 1

    def test_timers_are_independent(self):
        world = new_world(seed_source=lambda: 0)
        loop = GameLoop(world, movement_period=1.0, food_period=1.5)
        reports = [loop.update(0.5) for _ in range(6)]
        assert [r.moved for r in reports] == [False, True] * 3
        assert [r.spawned for r in reports] == [False, False, True] * 2


class TestGameLoopInput:
    def test_input_applied_before_movement(self):
        world = new_world(seed_source=lambda: 0)
        loop = GameLoop(world)
        loop.update(0.5, [Key.RIGHT])
        assert world.snake.head == Cell(5, 5)

    def test_reverse_input_ignored(self):
        world = new_world(seed_source=lambda: 0)
        loop = GameLoop(world)
        loop.update(0.5, [Key.DOWN])
        assert world.snake.head == Cell(4, 6)

    def test_input_between_ticks_is_buffered(self):
        world = new_world(seed_source=lambda: 0)
        loop = GameLoop(world)
        loop.update(0.25, [Key.LEFT])
        assert world.snake.facing == Direction.LEFT
        loop.update(0.25)
        assert world.snake.head == Cell(3, 5)


class TestGameLoopPhases:
    def test_eating_and_growth_in_same_pass(self):
        world = new_world(seed_source=lambda: 0)
        world.store.spawn(EntityKind.FOOD, Cell(4, 6), 0.8)
        report = GameLoop(world).update(0.5)
        assert report.moved
        assert report.eaten == 1
        assert report.grew
        assert len(world.snake) == 3

    def test_wall_resets_repeatedly(self):
        world = new_world(seed_source=lambda: 0)
        loop = GameLoop(world, food_period=1000.0)
        reports = loop.run(5.0, 0.5)
        assert len(reports) == 10
        assert [i for i, r in enumerate(reports) if r.reset] == [4, 9]
        assert world.resets == 2
        assert world.snake.cells() == [Cell(4, 5), Cell(4, 4)]

    def test_run_with_inputs(self):
        world = new_world(seed_source=lambda: 0)
        loop = GameLoop(world, food_period=1000.0)
        loop.run(1.0, 0.5, inputs=lambda _world: [Key.RIGHT])
        assert world.snake.head == Cell(6, 5)
        assert loop.passes == 2

    def test_run_rejects_bad_dt(self):
        loop = GameLoop(new_world(seed_source=lambda: 0))
        with pytest.raises(ValueError, match="positive"):
            loop.run(1.0, 0.0)
