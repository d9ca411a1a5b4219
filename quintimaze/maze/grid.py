"""Dense 3D maze grid.

Cells are stored ``cells[z][y][x]``. Every in-bounds lookup validates its
coordinate and raises ``CoordinateOutOfBounds``; stepping outside the grid
is only meaningful through ``is_win``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

from .cells import Cell
from .errors import CoordinateOutOfBounds
from .geometry import Coord, Direction

Size3D = Tuple[int, int, int]


class Grid:
    __slots__ = ("width", "height", "depth", "cells")

    def __init__(self, width: int = 5, height: int = 5, depth: int = 5):
        self.width = width
        self.height = height
        self.depth = depth
        self.cells: List[List[List[Cell]]] = [
            [[Cell() for _ in range(width)] for _ in range(height)] for _ in range(depth)
        ]

    @property
    def dimensions(self) -> Size3D:
        return (self.width, self.height, self.depth)

    @property
    def cell_count(self) -> int:
        return self.width * self.height * self.depth

    def in_bounds(self, coord: Coord) -> bool:
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height and 0 <= coord.z < self.depth

    def validate_coord(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise CoordinateOutOfBounds(coord, self.dimensions)

    def cell(self, coord: Coord) -> Cell:
        self.validate_coord(coord)
        return self.cells[coord.z][coord.y][coord.x]

    def is_win(self, coord: Coord) -> bool:
        """True when ``coord`` lies outside the grid on any axis."""
        return not self.in_bounds(coord)

    def neighbor(self, coord: Coord, direction: Direction) -> Optional[Coord]:
        """In-bounds neighbor of ``coord`` in ``direction`` or None at the boundary."""
        nxt = coord.move_in_direction(direction)
        return nxt if self.in_bounds(nxt) else None

    def carve(self, coord: Coord, direction: Direction) -> Optional[Coord]:
        """Open the door between ``coord`` and its neighbor on both sides.

        At the boundary only the inner side is opened (an exit); None is returned.
        """
        self.cell(coord).remove_wall(direction)
        nxt = self.neighbor(coord, direction)
        if nxt is not None:
            self.cell(nxt).remove_wall(direction.opposite())
        return nxt

    def coords(self) -> Iterator[Coord]:
        for z in range(self.depth):
            for y in range(self.height):
                for x in range(self.width):
                    yield Coord(x, y, z)

    def exits(self) -> List[Tuple[Coord, Direction]]:
        """Open doors that lead out of the grid."""
        found = []
        for coord in self.coords():
            for direction in self.cell(coord).open_doors():
                if self.is_win(coord.move_in_direction(direction)):
                    found.append((coord, direction))
        return found

    def passage_count(self) -> int:
        """Number of open interior passages (each counted once)."""
        total = 0
        for coord in self.coords():
            for direction in (Direction.SOUTH, Direction.EAST, Direction.UP):
                if self.cell(coord).has_door(direction) and self.neighbor(coord, direction) is not None:
                    total += 1
        return total

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": list(self.dimensions),
            "cells": [
                {"coord": list(coord), "doors": [d.label for d in self.cell(coord).open_doors()]}
                for coord in self.coords()
            ],
        }

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}x{self.depth}, passages={self.passage_count()})"


__all__ = ["Grid", "Size3D"]
