"""Implementation of (Session)Repository keeping everything in process memory"""

import threading

from src.core.models import GameId
from src.quirky.game import GameSession


class InMemorySessionRepository:
    """
    Sessions stored in a dict guarded by a lock.
    ---
    NOTE: This lock only protects the registry itself. Each session has its own lock for the game state.
    """

    def __init__(self) -> None:
        self._sessions: dict[GameId, GameSession] = {}
        self._lock = threading.Lock()

    def add(self, session: GameSession) -> bool:
        with self._lock:
            if session.id in self._sessions:
                return False
            self._sessions[session.id] = session
            return True

    def get(self, session_id: GameId) -> GameSession | None:
        with self._lock:
            return self._sessions.get(session_id)

    def list_sessions(self) -> list[GameSession]:
        with self._lock:
            return list(self._sessions.values())
