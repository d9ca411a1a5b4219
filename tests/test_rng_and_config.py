import pytest

from quintimaze.maze import MazeConfig, MazeConfigError
from quintimaze.maze.config import parse_size
from quintimaze.maze.rng import ChaChaRng, expand_seed


def test_same_seed_same_stream():
    a = ChaChaRng.seed_from_u64(42)
    b = ChaChaRng.seed_from_u64(42)
    assert [a.next_u32() for _ in range(200)] == [b.next_u32() for _ in range(200)]


def test_different_seeds_diverge():
    a = ChaChaRng.seed_from_u64(1)
    b = ChaChaRng.seed_from_u64(2)
    assert [a.next_u64() for _ in range(4)] != [b.next_u64() for _ in range(4)]


def test_expand_seed_is_32_bytes_and_masks_to_64_bits():
    key = expand_seed(7)
    assert len(key) == 32
    assert expand_seed(7 + (1 << 64)) == key
    assert expand_seed(8) != key


def test_gen_range_bounds():
    rng = ChaChaRng.seed_from_u64(99)
    for upper in (1, 2, 5, 7, 125, 1 << 40):
        for _ in range(50):
            assert 0 <= rng.gen_range(upper) < upper
    assert rng.gen_range(1) == 0


def test_shuffle_is_a_permutation():
    rng = ChaChaRng.seed_from_u64(5)
    items = list(range(6))
    rng.shuffle(items)
    assert sorted(items) == list(range(6))


def test_key_must_be_32_bytes():
    with pytest.raises(ValueError):
        ChaChaRng(b"short")


def test_config_defaults():
    cfg = MazeConfig()
    assert cfg.dimensions == (5, 5, 5)
    assert cfg.cell_count == 125
    assert cfg.force_exit is True
    assert cfg.seed is None


def test_config_from_env():
    cfg = MazeConfig.from_env({"QUINTI_MAZE_SIZE": "3x4x2", "QUINTI_MAZE_FORCE_EXIT": "no"})
    assert cfg.dimensions == (3, 4, 2)
    assert cfg.force_exit is False
    assert MazeConfig.from_env({}).dimensions == (5, 5, 5)


@pytest.mark.parametrize("raw", ["5x5", "axbxc", "5x5x5x5"])
def test_bad_size_strings(raw):
    with pytest.raises(MazeConfigError):
        parse_size(raw)


def test_non_positive_dimensions_rejected():
    with pytest.raises(MazeConfigError):
        MazeConfig(width=0)
    with pytest.raises(ValueError):
        MazeConfig.from_env({"QUINTI_MAZE_SIZE": "5x-1x5"})
