"""Exit search over open doors.

Depth-first with a fixed direction order (Up, Down, West, East, South,
North), never stepping straight back into the cell it came from. Mazes are
trees, so remembering a single prior cell per frame is enough to avoid
revisiting. The walk uses an explicit frame stack so its depth is bounded by
the grid's cell count rather than the interpreter's recursion limit.

The returned path runs from the exit coordinate (outside the grid) back to
the starting cell: ``path[0]`` is the exit, ``path[-1]`` is ``start``.
"""
from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, List, Optional, Tuple

from .config import MazeConfig
from .errors import CyclicMazeError
from .generator import generate_maze
from .geometry import ORIGIN, Coord, Direction
from .grid import Grid

SolutionPath = Deque[Coord]

SEARCH_ORDER = (
    Direction.UP,
    Direction.DOWN,
    Direction.WEST,
    Direction.EAST,
    Direction.SOUTH,
    Direction.NORTH,
)


class _Frame:
    __slots__ = ("location", "prior", "next_index")

    def __init__(self, location: Coord, prior: Optional[Coord]):
        self.location = location
        self.prior = prior
        self.next_index = 0


def find_path_to_exit(maze: Grid, starting_position: Coord) -> Tuple[bool, SolutionPath]:
    maze.validate_coord(starting_position)
    stack: List[_Frame] = [_Frame(starting_position, None)]
    while stack:
        frame = stack[-1]
        if frame.next_index >= len(SEARCH_ORDER):
            stack.pop()
            continue
        direction = SEARCH_ORDER[frame.next_index]
        frame.next_index += 1
        if not maze.cell(frame.location).has_door(direction):
            continue
        new_location = frame.location.move_in_direction(direction)
        if maze.is_win(new_location):
            path: SolutionPath = deque([new_location])
            path.extend(f.location for f in reversed(stack))
            return True, path
        if new_location != frame.prior:
            if len(stack) >= maze.cell_count:
                raise CyclicMazeError(f"search from {starting_position} exceeded {maze.cell_count} cells")
            stack.append(_Frame(new_location, frame.location))
    return False, deque()


def solve_report(seed: int, start: Coord = ORIGIN, config: Optional[MazeConfig] = None) -> Dict[str, Any]:
    """Generate the maze for ``seed`` and describe the exit path from ``start``.

    Used by the ``solve`` CLI command and the web debug endpoint. ``path`` is
    listed exit first, matching ``find_path_to_exit``.
    """
    maze = generate_maze(seed, config)
    found, path = find_path_to_exit(maze, start)
    return {
        "seed": seed,
        "start": list(start),
        "found": found,
        "length": len(path),
        "path": [list(c) for c in path],
    }


__all__ = ["find_path_to_exit", "solve_report", "SolutionPath", "SEARCH_ORDER"]
