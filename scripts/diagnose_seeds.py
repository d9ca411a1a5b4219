#!/usr/bin/env python3
"""Maze structural diagnostics for specific seeds.

Usage:
  QUINTI_MAZE_SIZE=5x5x5 python scripts/diagnose_seeds.py 12 13 4242

If no seeds are provided as CLI args, a default list is used.
Exits with non-zero status if structural issues are detected.

Checks per seed:
  - asymmetric_doors: door flags that disagree with the neighbor's opposite door
  - passages: interior passages (a perfect maze has exactly cells - 1)
  - unreached_cells: cells not visited by the carver
  - exit_path: whether the solver finds an exit from the origin, and its length
"""

from __future__ import annotations

import json
import os
import sys
from typing import List

# Ensure project root on path if executed directly
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from quintimaze.maze import ORIGIN, Direction, MazeConfig, MazeGenerator, find_path_to_exit  # noqa: E402

DEFAULT_SEEDS = [12, 13, 292372, 730727]


def asymmetric_doors(maze) -> int:
    bad = 0
    for coord in maze.coords():
        cell = maze.cell(coord)
        for direction in Direction:
            neighbor = coord.move_in_direction(direction)
            if not maze.in_bounds(neighbor):
                continue
            if cell.has_door(direction) != maze.cell(neighbor).has_door(direction.opposite()):
                bad += 1
    return bad


def run_for_seed(seed: int, config: MazeConfig) -> dict:
    gen = MazeGenerator(config)
    gen.generate(seed)
    maze = gen.take()
    found, path = find_path_to_exit(maze, ORIGIN)
    issues = {
        "asymmetric_doors": asymmetric_doors(maze),
        "extra_or_missing_passages": abs(maze.passage_count() - (maze.cell_count - 1)),
        "unreached_cells": sum(1 for c in maze.coords() if not maze.cell(c).visited),
        "no_exit": 0 if found or not config.force_exit else 1,
    }
    return {
        "seed": seed,
        "issues": issues,
        "exit_path": len(path),
        "metrics": gen.metrics,
        "ok": all(v == 0 for v in issues.values()),
    }


def main(argv: List[str]) -> int:
    seeds = [int(a) for a in argv] if argv else DEFAULT_SEEDS
    config = MazeConfig.from_env()
    results = [run_for_seed(s, config) for s in seeds]
    print(json.dumps({"results": results}, indent=2))
    # Non-zero exit if any failure
    if not all(r["ok"] for r in results):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
