"""Public maze package interface.

Geometry, grid storage, the seeded generator and the exit solver. Nothing in
here touches a display, a clock or the web layer.
"""

from .cells import Cell
from .config import DEFAULT_SEED, MazeConfig
from .errors import (
    ContractViolation,
    CoordinateOutOfBounds,
    CyclicMazeError,
    MazeConfigError,
    NoDirectionError,
)
from .generator import MazeGenerator, generate_maze
from .geometry import DEFAULT_FACING, ORIGIN, Coord, Direction, RelativeDoor
from .grid import Grid
from .solver import SEARCH_ORDER, SolutionPath, find_path_to_exit, solve_report

__all__ = [
    "Cell",
    "Coord",
    "Direction",
    "RelativeDoor",
    "DEFAULT_FACING",
    "ORIGIN",
    "Grid",
    "MazeConfig",
    "DEFAULT_SEED",
    "MazeGenerator",
    "generate_maze",
    "find_path_to_exit",
    "solve_report",
    "SolutionPath",
    "SEARCH_ORDER",
    "ContractViolation",
    "CoordinateOutOfBounds",
    "NoDirectionError",
    "CyclicMazeError",
    "MazeConfigError",
]
