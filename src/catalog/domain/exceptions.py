"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An entity violates one or more of its declared constraints.

    ``errors`` lists each violated constraint; the exception message is the
    short summary shown to the caller.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


class InvalidArgumentError(DomainException, ValueError):
    """A required identifier was missing or blank."""


class EntityNotFoundError(DomainException, LookupError):
    """A requested entity does not exist."""
