"""Domain error hierarchy.

Services raise these; the API layer maps them to HTTP responses.
Store failures use nuremento.db.errors instead.
"""

from datetime import date


class NurementoError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(NurementoError):
    """Raised on bad input shape, out-of-range dates or exceeded quotas.

    Attributes:
        details: Optional per-field messages as (field, message) pairs
    """

    def __init__(
        self,
        message: str,
        details: list[tuple[str | None, str]] | None = None,
    ) -> None:
        super().__init__(message)
        self.details = details or []


class NotFoundError(NurementoError):
    """Raised when a record is missing or owned by someone else.

    The two cases are deliberately indistinguishable.
    """


class LockedError(NurementoError):
    """Raised when a capsule is opened before its open date."""

    def __init__(self, open_on: date) -> None:
        super().__init__("This time capsule is still locked.")
        self.open_on = open_on


class ProgrammingInvariantViolation(NurementoError):
    """Raised when a caller breaks a documented contract.

    This signals a defect and is never caught by the service layer.
    """
