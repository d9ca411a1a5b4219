"""Textual terminal host for Quinti-Maze.

Panels:
 - Room view: the five visible doors of the current cell
 - Status line: facing (with hint), optional position, elapsed time

Keys follow the desktop layout (w/a/d move, e/q up/down, arrows turn,
``/`` toggles the position readout, ``=`` asks for a hint). Escape quits.

Run with: `python run.py play`
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from quintimaze.game import Game, PlatformSpecific, SystemPlatform, command_for_key
from quintimaze.game.platform import Note
from quintimaze.game.render import (
    BLACK,
    START_PROMPT,
    WIN_PROMPT,
    WIN_TITLE,
    position_label,
    status_label,
    time_label,
)
from quintimaze.logging_utils import get_logger
from quintimaze.maze import MazeConfig

log = get_logger("quintimaze.tui")

DOOR_NAMES = ("left", "front", "right", "top", "bottom")
ROOM_WIDTH = 33


class TextRenderer:
    """Renderer that keeps the current screen as plain text.

    Draw calls only update state and set ``dirty``; the app pulls
    ``room_text()`` / ``status_text()`` when something changed.
    """

    def __init__(self):
        self.dirty = True
        self.background = BLACK
        self.screen = "blank"
        self.doors: Dict[str, bool] = dict.fromkeys(DOOR_NAMES, False)
        self.status = ""
        self.position = ""
        self.time = ""
        self.message: List[str] = []

    def clear(self, background: str) -> None:
        self.background = background
        self.screen = "blank"
        self.doors = dict.fromkeys(DOOR_NAMES, False)
        self.status = self.position = self.time = ""
        self.message = []
        self.dirty = True

    def draw_room(self) -> None:
        self.screen = "room"
        self.dirty = True

    def _door(self, name: str, showing: bool) -> None:
        self.doors[name] = showing
        self.dirty = True

    def draw_left_door(self, showing: bool) -> None:
        self._door("left", showing)

    def draw_right_door(self, showing: bool) -> None:
        self._door("right", showing)

    def draw_top_door(self, showing: bool) -> None:
        self._door("top", showing)

    def draw_bottom_door(self, showing: bool) -> None:
        self._door("bottom", showing)

    def draw_front_door(self, showing: bool) -> None:
        self._door("front", showing)

    def draw_status(self, facing, position, hint, elapsed) -> None:
        self.status = status_label(facing, hint)
        self.position = position_label(position) if position is not None else ""
        self.time = time_label(elapsed)
        self.dirty = True

    def update_time(self, elapsed: int) -> None:
        label = time_label(elapsed)
        if label != self.time:
            self.time = label
            self.dirty = True

    def draw_start(self) -> None:
        self.screen = "start"
        self.message = [START_PROMPT]
        self.dirty = True

    def draw_win(self) -> None:
        self.screen = "win"
        self.message = [WIN_TITLE, "", WIN_PROMPT]
        self.dirty = True

    def _label(self, name: str, text: str) -> str:
        return f"[{text}]" if self.doors[name] else " " * (len(text) + 2)

    def room_text(self) -> str:
        if self.screen != "room":
            return "\n".join(line.center(ROOM_WIDTH) for line in self.message)
        rule = "+" + "-" * (ROOM_WIDTH - 2) + "+"
        middle = f"{self._label('left', 'Left')}  {self._label('front', 'Front')}  {self._label('right', 'Right')}"
        rows = [
            self._label("top", "Up").center(ROOM_WIDTH - 2),
            "",
            middle.center(ROOM_WIDTH - 2),
            "",
            self._label("bottom", "Down").center(ROOM_WIDTH - 2),
        ]
        return "\n".join([rule] + [f"|{row:<{ROOM_WIDTH - 2}}|" for row in rows] + [rule])

    def status_text(self) -> str:
        if self.screen != "room":
            return ""
        parts = [self.status, self.position, self.time]
        return "   ".join(p for p in parts if p)


class MazeApp(App):
    """Play Quinti-Maze in a terminal.

    A 500 ms interval redraws the frame so the clock advances while the
    player is idle; key presses redraw immediately.
    """

    CSS = """
    Screen { align: center middle; }
    Vertical { width: 35; height: auto; }
    #room { width: 35; height: 9; border: tall $primary; content-align: center middle; }
    #status { width: 35; height: 1; content-align: center middle; }
    """

    BINDINGS = [("escape", "quit", "Quit")]
    TITLE = "Quinti-Maze"

    def __init__(self, config: Optional[MazeConfig] = None, platform: Optional[PlatformSpecific] = None) -> None:
        super().__init__()
        self.platform = platform or SystemPlatform(on_victory=self._on_victory)
        self.game = Game(self.platform, config)
        self.renderer = TextRenderer()

    def compose(self) -> ComposeResult:  # type: ignore[override]
        yield Header()
        with Vertical():
            yield Static(id="room", markup=False)
            yield Static(id="status", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        self.redraw()
        self.set_interval(0.5, self.redraw)

    def on_key(self, event: events.Key) -> None:
        if event.key == "escape":
            return
        if self.game.key_hit():
            command = command_for_key(event.key)
            if command is not None:
                self.game.handle_command(command)
        self.redraw()

    def redraw(self) -> None:
        self.game.draw(self.renderer)
        if not self.renderer.dirty:
            return
        self.query_one("#room", Static).update(self.renderer.room_text())
        self.query_one("#status", Static).update(self.renderer.status_text())
        self.renderer.dirty = False

    def _on_victory(self, notes: Sequence[Note]) -> None:
        # Terminals have no tone generator; a bell stands in for the tune.
        self.bell()


def run_tui(config: Optional[MazeConfig] = None) -> None:  # pragma: no cover (interactive)
    log.info(event="startup", mode="play")
    MazeApp(config).run()


__all__ = ["MazeApp", "TextRenderer", "run_tui"]
