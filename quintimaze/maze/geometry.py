"""Directions, relative doors and grid coordinates.

Axes: x grows East, y grows South, z grows Up. Door storage in a cell is
indexed by ``Direction`` value (North=0 .. Down=5).
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import NamedTuple

from .errors import NoDirectionError


class Direction(IntEnum):
    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3
    UP = 4
    DOWN = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self) -> tuple[int, int, int]:
        return _DELTAS[self]

    def __str__(self) -> str:
        return self.label


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

_DELTAS = {
    Direction.NORTH: (0, -1, 0),
    Direction.SOUTH: (0, 1, 0),
    Direction.WEST: (-1, 0, 0),
    Direction.EAST: (1, 0, 0),
    Direction.UP: (0, 0, 1),
    Direction.DOWN: (0, 0, -1),
}

DEFAULT_FACING = Direction.NORTH


class RelativeDoor(Enum):
    """Doors as seen by the player, relative to the current facing."""

    LEFT = "left"
    FORWARD = "forward"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    def direction(self, facing: Direction) -> Direction:
        if self is RelativeDoor.UP:
            return Direction.UP
        if self is RelativeDoor.DOWN:
            return Direction.DOWN
        if self is RelativeDoor.FORWARD:
            return facing
        if self is RelativeDoor.LEFT:
            return _LEFT_OF.get(facing, Direction.WEST)
        return _RIGHT_OF.get(facing, Direction.EAST)


# North (and the vertical facings, which never occur in play) fall through
# to the .get() defaults above.
_LEFT_OF = {
    Direction.EAST: Direction.NORTH,
    Direction.SOUTH: Direction.EAST,
    Direction.WEST: Direction.SOUTH,
}
_RIGHT_OF = {
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}


class Coord(NamedTuple):
    x: int = 0
    y: int = 0
    z: int = 0

    def move_in_direction(self, direction: Direction) -> "Coord":
        dx, dy, dz = direction.delta
        return Coord(self.x + dx, self.y + dy, self.z + dz)

    def direction_to(self, target: "Coord") -> Direction:
        """Single-axis step from here toward ``target``; x first, then y, then z.

        Raises NoDirectionError when both coordinates are equal.
        """
        if self.x != target.x:
            return Direction.EAST if self.x < target.x else Direction.WEST
        if self.y != target.y:
            return Direction.SOUTH if self.y < target.y else Direction.NORTH
        if self.z != target.z:
            return Direction.UP if self.z < target.z else Direction.DOWN
        raise NoDirectionError(self)

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.z}"


ORIGIN = Coord(0, 0, 0)

__all__ = ["Direction", "RelativeDoor", "Coord", "ORIGIN", "DEFAULT_FACING"]
