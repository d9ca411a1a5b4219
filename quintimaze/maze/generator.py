"""Randomized backtracking maze carver.

The frontier holds visited cells that may still have unvisited neighbors.
Each step picks a random frontier entry (not necessarily the newest one),
shuffles the direction candidates and carves into the first unvisited
in-bounds neighbor. Entries with no such neighbor leave the frontier. The
result is a perfect maze: a spanning tree over every cell of the grid.
"""
from __future__ import annotations

import time
from typing import List, Optional

from ..logging_utils import get_logger
from .config import DEFAULT_SEED, MazeConfig
from .geometry import Coord, Direction
from .grid import Grid
from .metrics import init_metrics
from .rng import ChaChaRng

log = get_logger("quintimaze.maze")

# Starting order of the candidate list; it is shuffled in place on every step
# and never reset, so generation depends on the full history of shuffles.
CANDIDATE_ORDER = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.WEST,
    Direction.EAST,
    Direction.UP,
    Direction.DOWN,
)


class MazeGenerator:
    def __init__(self, config: Optional[MazeConfig] = None):
        self.config = config or MazeConfig()
        self.maze = Grid(*self.config.dimensions)
        self.cells: List[Coord] = []
        self.metrics = init_metrics()

    def exit_corner(self) -> Coord:
        w, h, d = self.config.dimensions
        return Coord(w - 1, h - 1, d - 1)

    def _is_cell_visited(self, coord: Coord) -> bool:
        return self.maze.cell(coord).visited

    def _carve_passage(self, coord: Coord, direction: Direction) -> Optional[Coord]:
        nxt = self.maze.neighbor(coord, direction)
        if nxt is None:
            return None
        self.maze.carve(coord, direction)
        self.maze.cell(coord).visited = True
        self.maze.cell(nxt).visited = True
        self.metrics['cells_carved'] += 1
        return nxt

    def generate(self, seed: Optional[int] = None) -> None:
        """Carve a fresh maze. ``seed`` falls back to the config seed, then DEFAULT_SEED."""
        if seed is None:
            seed = self.config.seed if self.config.seed is not None else DEFAULT_SEED
        started = time.perf_counter()
        self.maze = Grid(*self.config.dimensions)
        self.cells = []
        self.metrics = init_metrics()
        self.metrics['seed'] = seed

        rng = ChaChaRng.seed_from_u64(seed)
        max_x, max_y, max_z = self.config.dimensions
        x = rng.gen_range(max_x)
        y = rng.gen_range(max_y)
        z = rng.gen_range(max_z)
        start = Coord(x, y, z)
        self.maze.cell(start).visited = True
        self.cells.append(start)
        self.metrics['frontier_peak'] = 1

        directions = list(CANDIDATE_ORDER)
        while self.cells:
            index = rng.gen_range(len(self.cells))
            coords = self.cells[index]
            rng.shuffle(directions)
            carved = False
            for direction in directions:
                nxt = self.maze.neighbor(coords, direction)
                if nxt is None or self._is_cell_visited(nxt):
                    continue
                if self._carve_passage(coords, direction) is not None:
                    self.cells.append(nxt)
                    carved = True
                    break
            if not carved:
                self.cells.pop(index)
                self.metrics['backtracks'] += 1
            elif len(self.cells) > self.metrics['frontier_peak']:
                self.metrics['frontier_peak'] = len(self.cells)

        if self.config.force_exit:
            self.maze.cell(self.exit_corner()).remove_wall(Direction.UP)
            self.metrics['forced_exit'] = True
        self.metrics['runtime_ms'] = round((time.perf_counter() - started) * 1000, 3)
        log.debug(
            event="maze_generated",
            seed=seed,
            start=str(start),
            carved=self.metrics['cells_carved'],
            ms=self.metrics['runtime_ms'],
        )

    def take(self) -> Grid:
        return self.maze


def generate_maze(seed: Optional[int] = None, config: Optional[MazeConfig] = None) -> Grid:
    generator = MazeGenerator(config)
    generator.generate(seed)
    return generator.take()


__all__ = ["MazeGenerator", "generate_maze", "CANDIDATE_ORDER"]
