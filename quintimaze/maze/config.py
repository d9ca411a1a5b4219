import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .errors import MazeConfigError

DEFAULT_SEED = 12
FALSY = {"0", "false", "no", "off", ""}


@dataclass
class MazeConfig:
    width: int = 5
    height: int = 5
    depth: int = 5
    seed: Optional[int] = None
    # Open the Up door of the far corner cell after carving so the maze always has an exit.
    force_exit: bool = True

    def __post_init__(self):
        for name in ("width", "height", "depth"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise MazeConfigError(f"{name} must be a positive integer, got {value!r}")

    @property
    def dimensions(self) -> Tuple[int, int, int]:
        return (self.width, self.height, self.depth)

    @property
    def cell_count(self) -> int:
        return self.width * self.height * self.depth

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MazeConfig":
        """Build a config from QUINTI_MAZE_SIZE ("WxHxD") and QUINTI_MAZE_FORCE_EXIT."""
        env = os.environ if environ is None else environ
        kwargs = {}
        raw_size = env.get("QUINTI_MAZE_SIZE")
        if raw_size:
            kwargs.update(zip(("width", "height", "depth"), parse_size(raw_size)))
        if "QUINTI_MAZE_FORCE_EXIT" in env:
            kwargs["force_exit"] = env["QUINTI_MAZE_FORCE_EXIT"].strip().lower() not in FALSY
        return cls(**kwargs)


def parse_size(raw: str) -> Tuple[int, int, int]:
    parts = raw.lower().replace(" ", "").split("x")
    if len(parts) != 3:
        raise MazeConfigError(f"maze size must look like 5x5x5, got {raw!r}")
    try:
        w, h, d = (int(p) for p in parts)
    except ValueError:
        raise MazeConfigError(f"maze size must be numeric, got {raw!r}") from None
    return w, h, d


__all__ = ["MazeConfig", "DEFAULT_SEED", "parse_size"]
