from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class Command(Enum):
    MOVE_FORWARD = "move_forward"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    TOGGLE_SHOW_POSITION = "toggle_show_position"
    SHOW_HINTS = "show_hints"


# Desktop simulator layout: WASD-style movement, arrows to turn.
KEYMAP: Dict[str, Command] = {
    "w": Command.MOVE_FORWARD,
    "a": Command.MOVE_LEFT,
    "d": Command.MOVE_RIGHT,
    "e": Command.MOVE_UP,
    "q": Command.MOVE_DOWN,
    "left": Command.TURN_LEFT,
    "right": Command.TURN_RIGHT,
    "/": Command.TOGGLE_SHOW_POSITION,
    "slash": Command.TOGGLE_SHOW_POSITION,
    "=": Command.SHOW_HINTS,
    "equals": Command.SHOW_HINTS,
    "equals_sign": Command.SHOW_HINTS,
}


def command_for_key(key: str) -> Optional[Command]:
    """Map a host key name to a Command; unknown keys map to None."""
    if not key:
        return None
    return KEYMAP.get(key.strip().lower())


__all__ = ["Command", "KEYMAP", "command_for_key"]
