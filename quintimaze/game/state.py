"""Game state machine.

Start -> (any key) -> Playing -> (leave the grid) -> Done -> (any key) -> Start

Hosts call ``key_hit()`` for every key press and only forward the key to
``handle_command()`` when it returns True; the first press in Start and Done
is consumed by the phase change. ``draw()`` is called once per frame and
issues only the renderer calls needed since the previous frame.

A Game is not thread-safe. Hosts serialize every call (one lock per game).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..logging_utils import get_logger
from ..maze import Direction, Grid, MazeConfig, MazeGenerator, RelativeDoor, find_path_to_exit
from .commands import Command
from .phases import DonePhase, GamePhase, PlayingPhase, StartPhase
from .platform import PlatformSpecific, SystemPlatform
from .render import BLACK, WHITE, Renderer

log = get_logger("quintimaze.game")

_MOVES = {
    Command.MOVE_FORWARD: RelativeDoor.FORWARD,
    Command.MOVE_LEFT: RelativeDoor.LEFT,
    Command.MOVE_RIGHT: RelativeDoor.RIGHT,
    Command.MOVE_UP: RelativeDoor.UP,
    Command.MOVE_DOWN: RelativeDoor.DOWN,
}


class Game:
    def __init__(self, platform: Optional[PlatformSpecific] = None, config: Optional[MazeConfig] = None):
        self.platform = platform if platform is not None else SystemPlatform()
        self.config = config or MazeConfig()
        self.maze: Grid
        self.seed: int = 0
        self.generation_metrics: Dict[str, Any] = {}
        self.games_won = 0
        # A configured seed pins the first maze only; every regeneration is seeded from ticks.
        self.make_new_maze(self.config.seed)
        self.phase: GamePhase = StartPhase()

    # ------------------------------------------------------------------
    # Maze lifecycle
    # ------------------------------------------------------------------
    def make_new_maze(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = self.platform.ticks()
        generator = MazeGenerator(self.config)
        generator.generate(seed)
        self.maze = generator.take()
        self.seed = seed
        self.generation_metrics = dict(generator.metrics)
        log.info(event="new_maze", seed=seed, ms=generator.metrics["runtime_ms"])

    @property
    def playing(self) -> Optional[PlayingPhase]:
        return self.phase if isinstance(self.phase, PlayingPhase) else None

    def _set_phase(self, phase: GamePhase) -> None:
        log.debug(event="phase_change", previous=self.phase.name, current=phase.name, seed=self.seed)
        self.phase = phase

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def key_hit(self) -> bool:
        """Register a key press; True when the key should be handled as a command."""
        if isinstance(self.phase, PlayingPhase):
            return True
        if isinstance(self.phase, StartPhase):
            self._set_phase(PlayingPhase(started_at=self.platform.ticks()))
            return False
        self._set_phase(StartPhase())
        return False

    def handle_command(self, command: Command) -> None:
        play = self.playing
        if play is None:
            return
        door = _MOVES.get(command)
        if door is not None:
            self.try_move(door)
        elif command is Command.TURN_LEFT:
            self.turn_left()
        elif command is Command.TURN_RIGHT:
            self.turn_right()
        elif command is Command.TOGGLE_SHOW_POSITION:
            self.toggle_show_position()
        elif command is Command.SHOW_HINTS:
            self.show_direction_hint()

    def try_move(self, door: RelativeDoor) -> None:
        play = self.playing
        if play is None:
            return
        direction = door.direction(play.facing)
        if not self.maze.cell(play.position).has_door(direction):
            return
        play.position = play.position.move_in_direction(direction)
        play.direction_hint = None
        play.status_dirty = True
        path, play.path_to_exit = play.path_to_exit, None
        if path:
            on_path = path.pop()
            if on_path == play.position and path:
                play.direction_hint = play.position.direction_to(path[-1])
                play.path_to_exit = path
        if self.maze.is_win(play.position):
            self._win(play)

    def _win(self, play: PlayingPhase) -> None:
        elapsed = self.platform.ticks() - play.started_at
        self.games_won += 1
        log.info(event="victory", seed=self.seed, elapsed_ms=elapsed, exit=str(play.position))
        self._set_phase(DonePhase())
        self.platform.play_victory_notes()
        self.make_new_maze()

    def turn_left(self) -> None:
        play = self.playing
        if play is not None:
            play.facing = RelativeDoor.LEFT.direction(play.facing)
            play.status_dirty = True

    def turn_right(self) -> None:
        play = self.playing
        if play is not None:
            play.facing = RelativeDoor.RIGHT.direction(play.facing)
            play.status_dirty = True

    def toggle_show_position(self) -> None:
        play = self.playing
        if play is not None:
            play.show_position = not play.show_position
            play.status_dirty = True

    def show_direction_hint(self) -> None:
        play = self.playing
        if play is None:
            return
        found, path = find_path_to_exit(self.maze, play.position)
        if not found:
            log.info(event="hint", seed=self.seed, found=False)
            return
        path.pop()
        if not path:
            return
        play.direction_hint = play.position.direction_to(path[-1])
        play.path_to_exit = path
        play.status_dirty = True
        log.debug(event="hint", seed=self.seed, found=True, steps=len(path), hint=play.direction_hint)

    def is_win(self) -> bool:
        play = self.playing
        return play is not None and self.maze.is_win(play.position)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def elapsed(self) -> int:
        play = self.playing
        return self.platform.ticks() - play.started_at if play is not None else 0

    def draw(self, renderer: Renderer, elapsed: Optional[int] = None) -> None:
        phase = self.phase
        if isinstance(phase, PlayingPhase):
            self._draw_playing(renderer, phase, self.elapsed() if elapsed is None else elapsed)
        elif not phase.drawn:
            renderer.clear(BLACK)
            if isinstance(phase, DonePhase):
                renderer.draw_win()
            else:
                renderer.draw_start()
            phase.drawn = True

    def _draw_playing(self, renderer: Renderer, play: PlayingPhase, elapsed: int) -> None:
        full = play.needs_full_draw
        if full:
            play.showing.reset()
            renderer.clear(WHITE)
            renderer.draw_room()

        cell = self.maze.cell(play.position)
        shown = play.showing
        doors = (
            ("right", cell.right(play.facing), renderer.draw_right_door),
            ("left", cell.left(play.facing), renderer.draw_left_door),
            ("top", cell.top(), renderer.draw_top_door),
            ("bottom", cell.bottom(), renderer.draw_bottom_door),
            ("front", cell.front(play.facing), renderer.draw_front_door),
        )
        for name, showing, draw_door in doors:
            if showing != getattr(shown, name):
                draw_door(showing)
                setattr(shown, name, showing)

        if full or play.status_dirty:
            renderer.draw_status(
                play.facing,
                play.position if play.show_position else None,
                play.direction_hint,
                elapsed,
            )
        else:
            renderer.update_time(elapsed)
        play.needs_full_draw = False
        play.status_dirty = False

    def snapshot(self) -> Dict[str, Any]:
        """JSON-safe summary of the current phase for hosts and diagnostics."""
        data: Dict[str, Any] = {"phase": self.phase.name, "seed": self.seed, "games_won": self.games_won}
        play = self.playing
        if play is not None:
            hint: Optional[Direction] = play.direction_hint
            data.update(
                facing=play.facing.label,
                position=list(play.position) if play.show_position else None,
                hint=hint.label if hint is not None else None,
                elapsed_ms=self.elapsed(),
                show_position=play.show_position,
            )
        return data


__all__ = ["Game"]
