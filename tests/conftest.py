import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from quintimaze.game import Game  # noqa: E402
from quintimaze.maze import MazeConfig  # noqa: E402
from tests.maze_test_utils import FakePlatform  # noqa: E402


@pytest.fixture()
def platform():
    return FakePlatform()


@pytest.fixture()
def game(platform):
    """Game on the default-seed maze, still on the start screen."""
    return Game(platform, MazeConfig(seed=12))


@pytest.fixture()
def playing_game(game):
    assert game.key_hit() is False
    return game


@pytest.fixture()
def web_app(monkeypatch):
    monkeypatch.delenv("QUINTI_MAZE_SIZE", raising=False)
    monkeypatch.delenv("QUINTI_MAZE_FORCE_EXIT", raising=False)
    from quintimaze.web import app, registry

    app.config.update(TESTING=True)
    registry.clear()
    yield app
    registry.clear()


@pytest.fixture()
def client(web_app):
    return web_app.test_client()


@pytest.fixture()
def socket_client(web_app):
    from quintimaze.web import socketio

    c = socketio.test_client(web_app, flask_test_client=web_app.test_client())
    # Flush any connection events to start each test with a clean queue
    c.get_received()
    yield c
    if c.is_connected():
        c.disconnect()
