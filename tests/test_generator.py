import pytest

from quintimaze.maze import Coord, Direction, MazeConfig, MazeGenerator, generate_maze

SEEDS = [0, 1, 12, 13, 4242, 292372, (1 << 64) - 1]


def _asymmetric(maze):
    bad = []
    for coord in maze.coords():
        for d in Direction:
            nxt = maze.neighbor(coord, d)
            if nxt is not None and maze.cell(coord).has_door(d) != maze.cell(nxt).has_door(d.opposite()):
                bad.append((coord, d))
    return bad


@pytest.mark.parametrize("seed", SEEDS)
def test_doors_are_symmetric(seed):
    assert _asymmetric(generate_maze(seed)) == []


@pytest.mark.parametrize("seed", SEEDS)
def test_perfect_maze_with_single_forced_exit(seed):
    maze = generate_maze(seed)
    assert maze.passage_count() == maze.cell_count - 1
    assert all(maze.cell(c).visited for c in maze.coords())
    assert maze.exits() == [(Coord(4, 4, 4), Direction.UP)]


def test_generation_is_deterministic():
    assert generate_maze(13).to_dict() == generate_maze(13).to_dict()
    assert generate_maze(12).to_dict() != generate_maze(13).to_dict()


def test_default_seed_used_when_none_given():
    assert generate_maze().to_dict() == generate_maze(12).to_dict()
    assert generate_maze(config=MazeConfig(seed=13)).to_dict() == generate_maze(13).to_dict()


def test_without_forced_exit_there_is_no_way_out():
    maze = generate_maze(12, MazeConfig(force_exit=False))
    assert maze.exits() == []
    assert maze.passage_count() == 124


def test_non_cubic_maze():
    cfg = MazeConfig(width=3, height=4, depth=2)
    gen = MazeGenerator(cfg)
    gen.generate(77)
    maze = gen.take()
    assert maze.dimensions == (3, 4, 2)
    assert maze.passage_count() == 23
    assert gen.exit_corner() == Coord(2, 3, 1)
    assert maze.exits() == [(Coord(2, 3, 1), Direction.UP)]
    assert _asymmetric(maze) == []


def test_generation_metrics():
    gen = MazeGenerator()
    gen.generate(12)
    m = gen.metrics
    assert m["seed"] == 12
    assert m["cells_carved"] == 124
    # every frontier entry leaves exactly once
    assert m["backtracks"] == 125
    assert 1 <= m["frontier_peak"] <= 125
    assert m["forced_exit"] is True
    assert m["runtime_ms"] >= 0


def test_regenerate_resets_state():
    gen = MazeGenerator()
    gen.generate(12)
    first = gen.take().to_dict()
    gen.generate(13)
    gen.generate(12)
    assert gen.take().to_dict() == first
    assert gen.metrics["cells_carved"] == 124


def test_single_cell_maze():
    maze = generate_maze(3, MazeConfig(1, 1, 1, force_exit=False))
    assert maze.passage_count() == 0
    assert maze.cell(Coord(0, 0, 0)).open_doors() == []


def test_metrics_annotations_are_deferred():
    # Postponed evaluation keeps `int | float | bool` importable on 3.9.
    from quintimaze.maze import metrics

    assert isinstance(metrics.init_metrics.__annotations__["return"], str)
    assert metrics.init_metrics() == {
        "seed": 0,
        "cells_carved": 0,
        "backtracks": 0,
        "frontier_peak": 0,
        "forced_exit": False,
        "runtime_ms": 0.0,
    }


def test_public_maze_names_resolve():
    import quintimaze.maze as maze_pkg

    missing = [name for name in maze_pkg.__all__ if not hasattr(maze_pkg, name)]
    assert missing == []
