"""Project-wide custom exceptions.

This module centralizes domain-specific exception types so that routers and
services can raise / catch them without importing deep infrastructure errors
like ``asyncpg`` or raw SQLAlchemy exceptions.

Add new errors here rather than scattering small ``class XError(Exception):``
definitions across the codebase; this keeps the public error surface easy to
audit and map to HTTP responses.
"""
from __future__ import annotations

class RosterError(Exception):
    """Base class for all custom project exceptions.

    Subclass this rather than ``Exception`` directly for new domain errors.
    """


class DataNotFoundError(RosterError):
    """Raised when a requested id has no corresponding stored record.

    The message names the missing id so it can be surfaced as-is.
    """
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidCredentialsError(RosterError):
    """Raised when authentication fails.

    Deliberately carries the same message whether the email is unknown or the
    password is wrong, so callers cannot probe which emails are registered.
    """
    MESSAGE = "Invalid credentials"

    def __init__(self):
        super().__init__(self.MESSAGE)


__all__ = [
    "RosterError",
    "DataNotFoundError",
    "InvalidCredentialsError",
]
