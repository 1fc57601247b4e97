"""
Domain errors raised by the repositories and services.

Each error carries the HTTP status the API layer answers with.
"""
from typing import Iterable


class JoblyError(Exception):
    """Base error for the Jobly service."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyInputError(JoblyError):
    """Raised when a partial update names no fields."""


class RangeError(JoblyError):
    """Raised when a filter's lower bound exceeds its upper bound."""


class UnknownFieldError(JoblyError):
    """Raised when input names a field outside the entity's declared set."""

    def __init__(self, fields: Iterable[str]):
        self.fields = list(fields)
        super().__init__(f"Unknown field(s): {', '.join(self.fields)}")


class DuplicateError(JoblyError):
    """Raised when a create collides with an existing key."""

    status_code = 409


class NotFoundError(JoblyError):
    """Raised when a key resolves to no row."""

    status_code = 404


class UnauthorizedError(JoblyError):
    """Raised when credentials do not match."""

    status_code = 401
