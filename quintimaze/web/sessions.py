"""In-memory game sessions for the web host.

Each session owns one ``Game`` plus the ``RecordingRenderer`` its frames are
drawn into. Every call into the game goes through the session lock: Socket.IO
handlers and REST requests for the same session may run on different
threads, and the game core itself is not thread-safe.
"""

from __future__ import annotations

import threading
import uuid
from collections import OrderedDict
from typing import Any, Dict, List, Optional, Sequence

from ..game import Game, RecordingRenderer, SystemPlatform, command_for_key
from ..game.platform import Note
from ..logging_utils import get_logger
from ..maze import MazeConfig

log = get_logger("quintimaze.web")

DEFAULT_MAX_SESSIONS = 64


class GameSession:
    def __init__(self, session_id: str, config: Optional[MazeConfig] = None):
        self.id = session_id
        self.lock = threading.Lock()
        self.renderer = RecordingRenderer()
        self.keys_handled = 0
        self._victory: Optional[List[List[int]]] = None
        self.platform = SystemPlatform(on_victory=self._on_victory)
        self.game = Game(self.platform, config)

    def _on_victory(self, notes: Sequence[Note]) -> None:
        # Called with the lock held; the host emits the tune after releasing it.
        self._victory = [list(n) for n in notes]

    def press(self, key: str) -> Dict[str, Any]:
        """Feed one key press through the phase machine and draw the next frame."""
        with self.lock:
            command = None
            if self.game.key_hit():
                command = command_for_key(key)
                if command is not None:
                    self.game.handle_command(command)
            self.keys_handled += 1
            self.game.draw(self.renderer)
            result = self._result()
        log.debug(event="key", session=self.id, key=key, command=command.value if command else None)
        return result

    def frame(self) -> Dict[str, Any]:
        """Draw whatever changed since the last frame (often just the clock)."""
        with self.lock:
            self.game.draw(self.renderer)
            return self._result()

    def _result(self) -> Dict[str, Any]:
        victory, self._victory = self._victory, None
        return {
            "session": self.id,
            "state": self.game.snapshot(),
            "frame": self.renderer.drain(),
            "victory": victory,
        }


class SessionRegistry:
    """Bounded map of session id -> GameSession; the oldest session is evicted first."""

    def __init__(self, max_sessions: int = DEFAULT_MAX_SESSIONS):
        if max_sessions < 1:
            raise ValueError("max_sessions must be >= 1")
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, GameSession]" = OrderedDict()
        self._lock = threading.Lock()

    def create(self, config: Optional[MazeConfig] = None) -> GameSession:
        session = GameSession(uuid.uuid4().hex[:12], config)
        with self._lock:
            while len(self._sessions) >= self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                log.info(event="session_evicted", session=evicted)
            self._sessions[session.id] = session
            total = len(self._sessions)
        log.info(event="session_created", session=session.id, seed=session.game.seed, sessions=total)
        return session

    def get(self, session_id: str) -> Optional[GameSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def remove(self, session_id: str) -> bool:
        with self._lock:
            removed = self._sessions.pop(session_id, None) is not None
        if removed:
            log.info(event="session_closed", session=session_id)
        return removed

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions


__all__ = ["GameSession", "SessionRegistry", "DEFAULT_MAX_SESSIONS"]
