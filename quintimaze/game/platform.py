"""Platform capability consumed by the game core.

The core never reads a clock or drives a speaker itself. Hosts inject an
object with ``ticks()`` (monotonic milliseconds) and ``play_victory_notes()``
(fire-and-forget). ``SystemPlatform`` is the desktop/web implementation;
tests use their own scripted variants.
"""

from __future__ import annotations

import abc
import time
from typing import Callable, Optional, Sequence, Tuple

from ..logging_utils import get_logger

log = get_logger("quintimaze.platform")

Note = Tuple[int, int, int]

# (frequency Hz, duration ms, delay before the note ms)
NOTES: Sequence[Note] = (
    (1000, 256, 0),
    (1000, 128, 50),
    (1000, 128, 50),
    (1333, 169, 50),
    (1000, 169, 50),
    (1333, 169, 50),
    (1667, 653, 50),
)


class PlatformSpecific(abc.ABC):
    @abc.abstractmethod
    def ticks(self) -> int:
        """Monotonic millisecond counter."""

    @abc.abstractmethod
    def play_victory_notes(self) -> None:
        """Start the victory tune; must not block the caller."""


class SystemPlatform(PlatformSpecific):
    """Ticks are ``time.monotonic`` in whole milliseconds.

    The absolute value also seeds new mazes, so it is not rebased to zero.
    ``on_victory`` receives the note table; hosts use it to forward the tune
    to whatever can actually play it (a browser, a buzzer task).
    """

    def __init__(
        self,
        on_victory: Optional[Callable[[Sequence[Note]], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._clock = clock
        self.on_victory = on_victory
        self.victories = 0

    def ticks(self) -> int:
        return int(self._clock() * 1000)

    def play_victory_notes(self) -> None:
        self.victories += 1
        log.info(event="victory_notes", notes=len(NOTES), total=self.victories)
        if self.on_victory is not None:
            self.on_victory(NOTES)


__all__ = ["PlatformSpecific", "SystemPlatform", "NOTES", "Note"]
