from typing import List, Optional

from .geometry import Direction, RelativeDoor


class Cell:
    """One maze room: six door flags indexed by Direction plus a generation marker."""
    __slots__ = ("doors", "visited")

    def __init__(self, doors: Optional[List[bool]] = None, visited: bool = False):
        self.doors = list(doors) if doors is not None else [False] * len(Direction)
        self.visited = visited

    def has_door(self, direction: Direction) -> bool:
        return self.doors[direction]

    def remove_wall(self, direction: Direction) -> None:
        self.doors[direction] = True

    def left(self, facing: Direction) -> bool:
        return self.doors[RelativeDoor.LEFT.direction(facing)]

    def front(self, facing: Direction) -> bool:
        return self.doors[RelativeDoor.FORWARD.direction(facing)]

    def right(self, facing: Direction) -> bool:
        return self.doors[RelativeDoor.RIGHT.direction(facing)]

    def top(self) -> bool:
        return self.doors[Direction.UP]

    def bottom(self) -> bool:
        return self.doors[Direction.DOWN]

    def open_doors(self) -> List[Direction]:
        return [d for d in Direction if self.doors[d]]

    def __repr__(self) -> str:
        return f"Cell(doors={''.join(d.name[0] for d in self.open_doors()) or '-'})"
