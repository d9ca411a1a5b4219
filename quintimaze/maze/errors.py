"""Exceptions raised by the maze core.

Contract violations signal programming errors (bad coordinates, degenerate
direction queries). Game code never produces them from valid state, so
callers are expected to let them propagate.
"""

from __future__ import annotations


class ContractViolation(Exception):
    """Base class for fail-fast programming errors inside the core."""


class CoordinateOutOfBounds(ContractViolation, IndexError):
    def __init__(self, coord, dimensions):
        super().__init__(f"Coordinate {tuple(coord)} outside grid {dimensions}")
        self.coord = coord
        self.dimensions = dimensions


class NoDirectionError(ContractViolation, ValueError):
    def __init__(self, coord):
        super().__init__(f"No direction from {tuple(coord)} to itself")
        self.coord = coord


class CyclicMazeError(ContractViolation):
    """The solver walked deeper than the grid has cells; the passages contain a loop."""


class MazeConfigError(ValueError):
    """Raised for unusable maze dimensions or malformed environment values."""


__all__ = [
    "ContractViolation",
    "CoordinateOutOfBounds",
    "NoDirectionError",
    "CyclicMazeError",
    "MazeConfigError",
]
