"""Structured event log for the maze core and its hosts.

Every record is one line built from an ``event`` name plus keyword fields,
e.g. a regeneration after a win::

    level=info ts=1760774400 event=new_maze seed=83412 ms=1.9 logger=quintimaze.game

Lines go to stdout (errors to stderr) so the Textual and web hosts never
block on a handler chain between frames. ``server._configure_logging`` sets
up the separate stdlib root logger that Flask and Socket.IO write to.

Usage:
    from quintimaze.logging_utils import get_logger
    log = get_logger("quintimaze.web")
    log.info(event="session_created", session=sid, seed=seed)

Environment:
    QUINTI_LOG_LEVEL  debug | info | warn | error (default info)
    QUINTI_LOG_JSON   1/true/yes/on for one JSON object per line

Fields set to None are dropped. Text values have spaces replaced by ``_`` so
each line splits cleanly on whitespace. Reserved keys: level, ts.
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Any, Dict

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("QUINTI_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("QUINTI_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")

ROOT_LOGGER = "quintimaze"


def set_level(level: str) -> None:
    """Change the threshold at runtime (tests, ``--debug`` style toggles)."""
    global CURRENT_LEVEL
    CURRENT_LEVEL = LEVELS[level]


def _kv(value: Any) -> str:
    if isinstance(value, (int, float)):
        return str(value)
    return str(value).replace(" ", "_")


def _render(level: str, fields: Dict[str, Any]) -> str:
    ts = int(time.time())
    kept = {k: v for k, v in fields.items() if v is not None}
    if JSON_MODE:
        return json.dumps({**kept, "level": level, "ts": ts}, separators=(",", ":"), default=str)
    head = [f"level={level}", f"ts={ts}"]
    return " ".join(head + [f"{k}={_kv(v)}" for k, v in kept.items()])


class EventLogger:
    """Named emitter; obtain one through ``get_logger``."""

    def __init__(self, name: str = ROOT_LOGGER):
        self.name = name

    def _emit(self, level: str, fields: Dict[str, Any]) -> None:
        if LEVELS[level] < CURRENT_LEVEL:
            return
        fields.setdefault("logger", self.name)
        stream = sys.stderr if level == "error" else sys.stdout
        print(_render(level, fields), file=stream)

    def debug(self, **fields: Any) -> None:
        self._emit("debug", fields)

    def info(self, **fields: Any) -> None:
        self._emit("info", fields)

    def warn(self, **fields: Any) -> None:
        self._emit("warn", fields)

    def error(self, **fields: Any) -> None:
        self._emit("error", fields)


_LOGGERS: Dict[str, EventLogger] = {}


def get_logger(name: str) -> EventLogger:
    if name not in _LOGGERS:
        _LOGGERS[name] = EventLogger(name)
    return _LOGGERS[name]


log = get_logger(ROOT_LOGGER)
