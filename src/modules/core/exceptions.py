"""Error taxonomy shared by the order and notification engines.

Validation and not-found errors are surfaced to the caller for
user-facing messaging.  ``PersistenceError`` wraps every store failure,
including corrupted payloads, so callers never see ``json`` or pydantic
exceptions leaking out of a repository.
"""

from __future__ import annotations


class PrintSyncError(Exception):
    """Base class for every error raised by the engines."""


class ValidationError(PrintSyncError):
    """Required input to an operation is missing or invalid."""


class AuthRequiredError(ValidationError):
    """No actor is signed in.

    Subclasses ``ValidationError`` because an absent actor is the first
    missing input every operation checks.
    """


class NotFoundError(PrintSyncError):
    """The referenced record is absent from the actor's own collection."""


class PersistenceError(PrintSyncError):
    """A record store read or write failed (quota, I/O, corrupted payload)."""
