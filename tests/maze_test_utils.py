"""Helpers shared by game, web and TUI tests.

Usage:
    from tests.maze_test_utils import FakePlatform, keys_to_exit, step
"""

from quintimaze.game import Command, PlatformSpecific
from quintimaze.maze import ORIGIN, Direction, RelativeDoor, find_path_to_exit


class FakePlatform(PlatformSpecific):
    """Scripted clock: every ticks() call advances by ``step`` ms."""

    def __init__(self, start: int = 1000, step: int = 7):
        self.now = start
        self.step = step
        self.victories = 0

    def ticks(self) -> int:
        self.now += self.step
        return self.now

    def play_victory_notes(self) -> None:
        self.victories += 1


def keys_to_exit(maze, start=ORIGIN, facing=Direction.NORTH):
    """Key names that walk from ``start`` to the exit, turning right as needed."""
    found, path = find_path_to_exit(maze, start)
    assert found, "maze has no exit"
    path.pop()
    keys = []
    position = start
    while path:
        target = path.pop()
        direction = position.direction_to(target)
        if direction is Direction.UP:
            keys.append("e")
        elif direction is Direction.DOWN:
            keys.append("q")
        else:
            while facing is not direction:
                facing = RelativeDoor.RIGHT.direction(facing)
                keys.append("right")
            keys.append("w")
        position = target
    return keys


def step(game, direction):
    """Move one cell in an absolute direction, turning right until facing it."""
    if direction is Direction.UP:
        game.handle_command(Command.MOVE_UP)
        return
    if direction is Direction.DOWN:
        game.handle_command(Command.MOVE_DOWN)
        return
    while game.playing.facing is not direction:
        game.handle_command(Command.TURN_RIGHT)
    game.handle_command(Command.MOVE_FORWARD)
