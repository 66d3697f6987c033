"""Snake representation and movement logic."""

from __future__ import annotations

import enum
import logging

from grid_snake.entities import EntityKind, EntityStore
from grid_snake.grid import Cell

logger = logging.getLogger(__name__)


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values. Up is +y."""

    LEFT = (-1, 0)
    UP = (0, 1)
    RIGHT = (1, 0)
    DOWN = (0, -1)

    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def step(self, cell: Cell) -> Cell:
        """Return the cell one unit away from *cell* in this direction."""
        dx, dy = self.value
        return Cell(cell.x + dx, cell.y + dy)

    @classmethod
    def from_name(cls, name: str) -> Direction:
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class Snake:
    """A snake stored as an ordered list of entity handles.

    The head is ``segments[0]``; the tail is ``segments[-1]``. Positions
    live in the shared :class:`EntityStore`, the snake only owns the order
    and the facing.
    """

    def __init__(
        self,
        store: EntityStore,
        start: Cell = Cell(4, 5),
        direction: Direction = Direction.UP,
        head_size: float = 0.8,
        segment_size: float = 0.65,
    ) -> None:
        self.store = store
        self.start = start
        self.start_direction = direction
        self.head_size = head_size
        self.segment_size = segment_size
        self.segments: list[int] = []
        self.facing = direction
        self.reset()

    @property
    def head(self) -> Cell:
        """Return the head cell."""
        return self.store.position(self.segments[0])

    @property
    def tail(self) -> Cell:
        return self.store.position(self.segments[-1])

    def cells(self) -> list[Cell]:
        """Return segment cells from head to tail."""
        return [self.store.position(h) for h in self.segments]

    def set_facing(self, requested: Direction) -> None:
        """Change facing, ignoring 180° reversals."""
        if requested != self.facing.opposite():
            self.facing = requested

    def advance(self) -> Cell:
        """Move the snake one step along its facing.

        Every trailing segment takes the cell its predecessor held before
        the move. Returns the cell vacated by the tail.
        """
        previous = self.cells()
        self.store.move(self.segments[0], self.facing.step(previous[0]))
        for handle, cell in zip(self.segments[1:], previous, strict=False):
            self.store.move(handle, cell)
        return previous[-1]

    def grow(self, at: Cell) -> int:
        """Append a new tail segment at *at* and return its handle."""
        handle = self.store.spawn(EntityKind.SEGMENT, at, self.segment_size)
        self.segments.append(handle)
        logger.debug("Snake grew to %d segments at %s.", len(self), at)
        return handle

    def despawn(self) -> None:
        """Remove every segment from the store."""
        for handle in self.segments:
            self.store.despawn(handle)
        self.segments = []

    def reset(self) -> None:
        """Replace the body with a fresh two-segment snake at the start cell."""
        self.despawn()
        self.facing = self.start_direction
        behind = self.start_direction.opposite().step(self.start)
        self.segments = [
            self.store.spawn(EntityKind.HEAD, self.start, self.head_size),
            self.store.spawn(EntityKind.SEGMENT, behind, self.segment_size),
        ]

    def __len__(self) -> int:
        return len(self.segments)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(c) for c in self.cells()],
            "facing": self.facing.name.lower(),
        }
