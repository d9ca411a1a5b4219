import asyncio

from quintimaze.game import Command
from quintimaze.maze import Direction, MazeConfig
from quintimaze.tui import MazeApp, TextRenderer
from tests.maze_test_utils import FakePlatform


def test_text_renderer_start_and_win_screens(game):
    r = TextRenderer()
    game.draw(r)
    assert r.screen == "start"
    assert "Press any key to start" in r.room_text()
    assert r.status_text() == ""
    r.draw_win()
    assert "You Win!" in r.room_text()


def test_text_renderer_room_view(playing_game):
    r = TextRenderer()
    playing_game.draw(r, elapsed=2500)
    assert r.screen == "room"
    text = r.room_text()
    cell = playing_game.maze.cell(playing_game.playing.position)
    assert ("[Up]" in text) == cell.top()
    assert ("[Front]" in text) == cell.front(Direction.NORTH)
    assert r.status_text() == "North   Time:  0:03"
    assert len({len(line) for line in text.splitlines()}) == 1


def test_text_renderer_tracks_dirtiness(playing_game):
    r = TextRenderer()
    playing_game.draw(r, elapsed=0)
    r.dirty = False
    playing_game.draw(r, elapsed=0)
    assert r.dirty is False
    playing_game.draw(r, elapsed=1200)
    assert r.dirty is True
    r.dirty = False
    playing_game.handle_command(Command.TOGGLE_SHOW_POSITION)
    playing_game.draw(r, elapsed=1200)
    assert r.dirty is True
    assert r.position == "0,0,0"


def test_app_keys_drive_the_game():
    async def scenario():
        app = MazeApp(MazeConfig(seed=12), platform=FakePlatform())
        async with app.run_test() as pilot:
            await pilot.press("x")
            assert app.game.playing is not None
            await pilot.press("right")
            assert app.game.playing.facing is Direction.EAST
            await pilot.press("slash")
            assert app.game.playing.show_position is True
            assert "0,0,0" in app.renderer.status_text()

    asyncio.run(scenario())

