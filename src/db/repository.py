"""Protocol repository (sessions live in memory for now, could be swapped for something else later)"""

from typing import Protocol

from src.core.models import GameId
from src.quirky.game import GameSession


class SessionRepository(Protocol):
    """Registry of running game sessions"""

    def add(self, session: GameSession) -> bool:
        """Store a new session. Returns False (and stores nothing) if its id is already taken."""
        ...

    def get(self, session_id: GameId) -> GameSession | None:
        """Get session by ID, if it exists."""
        ...

    def list_sessions(self) -> list[GameSession]:
        """All sessions, in creation order."""
        ...
