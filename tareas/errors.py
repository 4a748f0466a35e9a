"""Error taxonomy for the tareas backend.

Every failure a handler can report is a ``TareasError``. Each subclass
carries a ``kind`` (exposed to clients in the error envelope) and the HTTP
status it maps to at the application boundary.
"""

from typing import Any


class TareasError(Exception):
    """Base class for errors surfaced to API clients."""

    kind = "error"
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON error envelope for this error."""
        return {"error": self.message, "kind": self.kind}


class ValidationError(TareasError):
    """A required text field is empty or the request body is malformed."""

    kind = "validation"
    status_code = 400


class InvalidReferenceError(TareasError):
    """A task refers to a category that does not exist."""

    kind = "reference"
    status_code = 400


class NotFoundError(TareasError):
    """The addressed task does not exist."""

    kind = "not_found"
    status_code = 404


class PersistenceError(TareasError):
    """The relational store failed to execute a statement."""

    kind = "persistence"
    status_code = 500
