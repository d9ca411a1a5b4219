"""Game layer: phases, commands, the platform capability and renderers.

Hosts build a ``Game`` with a platform, forward key presses through
``key_hit()`` / ``handle_command()`` and call ``draw()`` once per frame.
"""

from .commands import KEYMAP, Command, command_for_key
from .phases import DonePhase, GamePhase, PlayingPhase, StartPhase
from .platform import NOTES, PlatformSpecific, SystemPlatform
from .render import RecordingRenderer, Renderer, Showing, position_label, status_label, time_label
from .state import Game

__all__ = [
    "Game",
    "Command",
    "KEYMAP",
    "command_for_key",
    "GamePhase",
    "StartPhase",
    "PlayingPhase",
    "DonePhase",
    "PlatformSpecific",
    "SystemPlatform",
    "NOTES",
    "Renderer",
    "RecordingRenderer",
    "Showing",
    "status_label",
    "time_label",
    "position_label",
]
