"""Renderer protocol and draw-instruction helpers.

The game decides *what* changed since the previous frame; a renderer decides
how to show it. Door calls carry the new visibility of a single door and are
only issued when that visibility flips, so a renderer can repaint just the
affected region.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional, Protocol

from ..maze import Coord, Direction

WHITE = "white"
BLACK = "black"


class Renderer(Protocol):
    def clear(self, background: str) -> None: ...

    def draw_room(self) -> None: ...

    def draw_left_door(self, showing: bool) -> None: ...

    def draw_right_door(self, showing: bool) -> None: ...

    def draw_top_door(self, showing: bool) -> None: ...

    def draw_bottom_door(self, showing: bool) -> None: ...

    def draw_front_door(self, showing: bool) -> None: ...

    def draw_status(
        self,
        facing: Direction,
        position: Optional[Coord],
        hint: Optional[Direction],
        elapsed: int,
    ) -> None: ...

    def update_time(self, elapsed: int) -> None: ...

    def draw_start(self) -> None: ...

    def draw_win(self) -> None: ...


@dataclass
class Showing:
    """Door visibility currently on screen. The back wall is never drawn."""

    left: bool = False
    front: bool = False
    right: bool = False
    top: bool = False
    bottom: bool = False

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, False)


def status_label(facing: Direction, hint: Optional[Direction] = None) -> str:
    if hint is None:
        return facing.label
    return f"{facing.label}[{hint.label}]"


def time_label(elapsed: int) -> str:
    seconds = (max(elapsed, 0) + 999) // 1000
    return f"Time: {seconds // 60:2}:{seconds % 60:02}"


def position_label(position: Coord) -> str:
    return f"{position.x},{position.y},{position.z}"


START_PROMPT = "Press any key to start"
WIN_TITLE = "You Win!"
WIN_PROMPT = "Press any key to continue"


def _jsonable(value: Any) -> Any:
    if isinstance(value, Direction):
        return value.label
    if isinstance(value, Coord):
        return list(value)
    return value


class RecordingRenderer:
    """Renderer that stores draw calls as JSON-safe instructions.

    Used by the web host to ship frames to clients and by tests to assert
    which regions a frame touched.
    """

    def __init__(self):
        self.instructions: List[Dict[str, Any]] = []

    def _record(self, op: str, *args: Any) -> None:
        self.instructions.append({"op": op, "args": [_jsonable(a) for a in args]})

    def drain(self) -> List[Dict[str, Any]]:
        out, self.instructions = self.instructions, []
        return out

    def ops(self) -> List[str]:
        return [i["op"] for i in self.instructions]

    def clear(self, background: str) -> None:
        self._record("clear", background)

    def draw_room(self) -> None:
        self._record("room")

    def draw_left_door(self, showing: bool) -> None:
        self._record("left_door", showing)

    def draw_right_door(self, showing: bool) -> None:
        self._record("right_door", showing)

    def draw_top_door(self, showing: bool) -> None:
        self._record("top_door", showing)

    def draw_bottom_door(self, showing: bool) -> None:
        self._record("bottom_door", showing)

    def draw_front_door(self, showing: bool) -> None:
        self._record("front_door", showing)

    def draw_status(self, facing, position, hint, elapsed) -> None:
        self._record("status", status_label(facing, hint), position, time_label(elapsed))

    def update_time(self, elapsed: int) -> None:
        self._record("time", time_label(elapsed))

    def draw_start(self) -> None:
        self._record("start", START_PROMPT)

    def draw_win(self) -> None:
        self._record("win", WIN_TITLE, WIN_PROMPT)


__all__ = [
    "Renderer",
    "RecordingRenderer",
    "Showing",
    "status_label",
    "time_label",
    "position_label",
    "START_PROMPT",
    "WIN_TITLE",
    "WIN_PROMPT",
    "WHITE",
    "BLACK",
]
