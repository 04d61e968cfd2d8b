"""
Custom exceptions.

Everything raised on purpose by the domain / service / repository layers inherits from GameError,
so the API layer can catch the whole family in one place and decide on a status code.
"""

from typing import Optional

from src.core.shared_types import Rejection


class GameError(Exception):
    """Base class: a recoverable, caller-correctable condition."""


class GameStateError(GameError):
    """Request does not make sense given the current state of the game."""


class NotYourTurnError(GameStateError):
    """Only the player holding the turn may place tiles or end the turn."""


class DuplicateNameError(GameStateError):
    """A player with this name already joined the game."""


class UnknownPlayerError(GameError):
    """No player with this name joined the game."""


class AlreadyOccupiedError(GameStateError):
    """Board cell already holds a piece."""


class PlacementRejectedError(GameError):
    """A tile placement was refused by the rules. Carries the reason so the API can report it."""

    def __init__(self, reason: Rejection, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message


class RepositoryError(GameError):
    """Something went wrong looking up / storing a game session."""


class UnknownSessionError(RepositoryError):
    def __init__(self, session_id: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Game with {session_id=} not found.")
        self.session_id = session_id


class InvalidRequestError(GameError):
    """Raised by the request models' validators. Propagates through pydantic untouched."""
