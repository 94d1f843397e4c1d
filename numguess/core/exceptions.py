"""
Custom exceptions shared across layers.

Everything derives from GameError, so the API layer can map the whole family to error responses.
NOTE none of these subclass ValueError: pydantic must let InvalidRequestError raised inside a validator propagate untouched.
"""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while playing a game."""


class GameStateError(GameError):
    """Requested action is not allowed in the current state of the game."""


class RepositoryError(GameError):
    """Problem with storing / retrieving games."""


class GameNotFoundError(RepositoryError):
    """No game registered under the requested ID."""


class InvalidRequestError(GameError):
    """Request data failed validation at the boundary."""
