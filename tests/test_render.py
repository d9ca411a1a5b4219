import pytest

from quintimaze.game import (
    KEYMAP,
    NOTES,
    Command,
    RecordingRenderer,
    SystemPlatform,
    command_for_key,
    position_label,
    status_label,
    time_label,
)
from quintimaze.maze import Coord, Direction
from tests.maze_test_utils import keys_to_exit

DOOR_OPS = {"right_door", "left_door", "top_door", "bottom_door", "front_door"}


def test_start_screen_drawn_once(game):
    r = RecordingRenderer()
    game.draw(r)
    assert r.drain() == [
        {"op": "clear", "args": ["black"]},
        {"op": "start", "args": ["Press any key to start"]},
    ]
    game.draw(r)
    assert r.drain() == []


def test_first_playing_frame_is_full(playing_game):
    r = RecordingRenderer()
    playing_game.draw(r, elapsed=0)
    ops = r.ops()
    assert ops[:2] == ["clear", "room"]
    assert r.instructions[0]["args"] == ["white"]
    assert ops[-1] == "status"
    # only doors that are open get drawn on a fresh room
    cell = playing_game.maze.cell(playing_game.playing.position)
    assert len([o for o in ops if o in DOOR_OPS]) == sum(
        [cell.left(Direction.NORTH), cell.right(Direction.NORTH), cell.top(), cell.bottom(), cell.front(Direction.NORTH)]
    )
    assert r.instructions[-1]["args"] == ["North", None, "Time:  0:00"]


def test_door_order(playing_game):
    r = RecordingRenderer()
    playing_game.draw(r)
    doors = [o for o in r.ops() if o in DOOR_OPS]
    order = ["right_door", "left_door", "top_door", "bottom_door", "front_door"]
    assert doors == [o for o in order if o in doors]


def test_idle_frame_only_updates_time(playing_game):
    r = RecordingRenderer()
    playing_game.draw(r, elapsed=0)
    r.drain()
    playing_game.draw(r, elapsed=1500)
    assert r.drain() == [{"op": "time", "args": ["Time:  0:02"]}]


def test_turn_redraws_status_and_changed_doors(playing_game):
    r = RecordingRenderer()
    playing_game.draw(r)
    shown = dict(vars(playing_game.playing.showing))
    r.drain()
    playing_game.handle_command(Command.TURN_RIGHT)
    playing_game.draw(r, elapsed=0)
    ops = r.ops()
    assert "clear" not in ops and "room" not in ops
    assert ops[-1] == "status"
    assert r.instructions[-1]["args"][0] == "East"
    now = vars(playing_game.playing.showing)
    flipped = {f"{name}_door" for name in now if now[name] != shown[name]}
    assert {o for o in ops if o in DOOR_OPS} == flipped


def test_hint_and_position_in_status(playing_game):
    playing_game.handle_command(Command.TOGGLE_SHOW_POSITION)
    playing_game.handle_command(Command.SHOW_HINTS)
    r = RecordingRenderer()
    playing_game.draw(r, elapsed=0)
    label, position, _ = r.instructions[-1]["args"]
    hint = playing_game.playing.direction_hint
    assert label == f"North[{hint.label}]"
    assert position == [0, 0, 0]


def test_win_screen(game):
    game.key_hit()
    r = RecordingRenderer()
    game.draw(r)
    for key in keys_to_exit(game.maze):
        game.handle_command(command_for_key(key))
    r.drain()
    game.draw(r)
    assert r.drain() == [
        {"op": "clear", "args": ["black"]},
        {"op": "win", "args": ["You Win!", "Press any key to continue"]},
    ]
    game.draw(r)
    assert r.drain() == []


@pytest.mark.parametrize(
    "elapsed,label",
    [
        (0, "Time:  0:00"),
        (1, "Time:  0:01"),
        (1000, "Time:  0:01"),
        (1001, "Time:  0:02"),
        (61_000, "Time:  1:01"),
        (600_000, "Time: 10:00"),
    ],
)
def test_time_label_rounds_up(elapsed, label):
    assert time_label(elapsed) == label


def test_status_and_position_labels():
    assert status_label(Direction.WEST) == "West"
    assert status_label(Direction.SOUTH, Direction.UP) == "South[Up]"
    assert position_label(Coord(1, 2, 3)) == "1,2,3"


def test_key_map():
    assert command_for_key("W") is Command.MOVE_FORWARD
    assert command_for_key("e") is Command.MOVE_UP
    assert command_for_key("q") is Command.MOVE_DOWN
    assert command_for_key("left") is Command.TURN_LEFT
    assert command_for_key("slash") is Command.TOGGLE_SHOW_POSITION
    assert command_for_key("=") is Command.SHOW_HINTS
    assert command_for_key("x") is None
    assert command_for_key("") is None
    assert set(KEYMAP.values()) == set(Command)


def test_system_platform_forwards_notes():
    received = []
    p = SystemPlatform(on_victory=received.append, clock=lambda: 12.3456)
    assert p.ticks() == 12345
    p.play_victory_notes()
    assert p.victories == 1
    assert received == [NOTES]
    assert len(NOTES) == 7
    assert NOTES[0] == (1000, 256, 0)


def test_door_memo_belongs_to_the_game_not_the_renderer(playing_game):
    # A renderer swapped in mid-game gets no full redraw: only doors whose
    # visibility flipped since the last frame, then the status line.
    playing_game.draw(RecordingRenderer(), elapsed=0)
    cell = playing_game.maze.cell(playing_game.playing.position)
    playing_game.handle_command(Command.TURN_LEFT)

    second = RecordingRenderer()
    playing_game.draw(second, elapsed=0)

    expected = [
        {"op": f"{name}_door", "args": [getattr(cell, name)(Direction.WEST)]}
        for name in ("right", "left", "front")
        if getattr(cell, name)(Direction.WEST) != getattr(cell, name)(Direction.NORTH)
    ]
    door_calls = [i for i in second.instructions if i["op"] in DOOR_OPS]
    assert door_calls == expected
    assert "clear" not in second.ops() and "room" not in second.ops()
    assert second.ops()[-1] == "status"
