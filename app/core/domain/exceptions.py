# app/core/domain/exceptions.py
"""
Domain-level errors raised by use cases and mapped to HTTP statuses by the
routers. Engine-internal failures (bad patterns, missing payloads) never
surface here: the engine recovers them into `applied=False` results.
"""


class DomainError(Exception):
    """Base class for expected, user-facing failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequestError(DomainError):
    """The request is well-formed JSON but violates a business limit."""
