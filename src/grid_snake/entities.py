"""Handle-indexed storage for everything that sits on the arena."""

from __future__ import annotations

import enum
import itertools
from collections.abc import Iterator
from dataclasses import dataclass

from grid_snake.grid import Cell


class EntityKind(enum.Enum):
    """What an entity represents."""

    HEAD = "head"
    SEGMENT = "segment"
    FOOD = "food"


@dataclass
class Entity:
    """A positioned object with a logical size (a fraction of one tile)."""

    kind: EntityKind
    cell: Cell
    size: float


class EntityStore:
    """Arena of entities keyed by integer handles.

    Handles are never reused within a store, so a stale handle can always
    be told apart from a live one.
    """

    def __init__(self) -> None:
        self._entities: dict[int, Entity] = {}
        self._next_handle = itertools.count()

    def spawn(self, kind: EntityKind, cell: Cell, size: float) -> int:
        """Create an entity and return its handle."""
        handle = next(self._next_handle)
        self._entities[handle] = Entity(kind, cell, size)
        return handle

    def despawn(self, handle: int) -> None:
        """Remove an entity. Raises ``KeyError`` for unknown handles."""
        try:
            del self._entities[handle]
        except KeyError:
            raise KeyError(f"Entity {handle} does not exist.") from None

    def get(self, handle: int) -> Entity:
        """Return the entity for *handle*. Raises ``KeyError`` if removed."""
        try:
            return self._entities[handle]
        except KeyError:
            raise KeyError(f"Entity {handle} does not exist.") from None

    def position(self, handle: int) -> Cell:
        return self.get(handle).cell

    def move(self, handle: int, cell: Cell) -> None:
        self.get(handle).cell = cell

    def handles(self, kind: EntityKind | None = None) -> list[int]:
        """Return live handles in creation order, optionally filtered by kind."""
        return [
            h for h, e in self._entities.items()
            if kind is None or e.kind == kind
        ]

    def __contains__(self, handle: object) -> bool:
        return handle in self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[tuple[int, Entity]]:
        return iter(list(self._entities.items()))
