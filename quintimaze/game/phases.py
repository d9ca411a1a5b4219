"""Game phases as a tagged union.

Only ``PlayingPhase`` carries live play data, so code holding a Start or
Done phase has no position or facing to read by mistake.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from ..maze import DEFAULT_FACING, ORIGIN, Coord, Direction, SolutionPath
from .render import Showing


@dataclass
class StartPhase:
    drawn: bool = False
    name = "start"


@dataclass
class DonePhase:
    drawn: bool = False
    name = "done"


@dataclass
class PlayingPhase:
    started_at: int
    position: Coord = ORIGIN
    facing: Direction = DEFAULT_FACING
    show_position: bool = False
    direction_hint: Optional[Direction] = None
    path_to_exit: Optional[SolutionPath] = None
    needs_full_draw: bool = True
    status_dirty: bool = True
    showing: Showing = field(default_factory=Showing)
    name = "playing"


GamePhase = Union[StartPhase, PlayingPhase, DonePhase]

__all__ = ["StartPhase", "PlayingPhase", "DonePhase", "GamePhase"]
