"""HTTP-facing errors.

Each subclass fixes the status and ErrorCode it answers with; app.py
renders them as ErrorResponse. Services never raise these directly,
from_domain_error maps their errors here.
"""

from datetime import date

from nuremento.api.models.errors import ErrorCode, ErrorDetail
from nuremento.db.errors import StoreError
from nuremento.errors import LockedError, NotFoundError, NurementoError, ValidationError


class NurementoAPIError(Exception):
    """An error with a fixed HTTP status; 500 unless a subclass says otherwise."""

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR
    headers: dict[str, str] | None = None

    def __init__(self, message: str, details: list[ErrorDetail] | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class InvalidRequestError(NurementoAPIError):
    """Input that cannot be accepted, including a reached capsule quota."""

    status_code = 400
    error_code = ErrorCode.INVALID_REQUEST


class UnauthorizedError(NurementoAPIError):
    """Raised when the bearer token is missing or invalid."""

    status_code = 401
    error_code = ErrorCode.UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}


class ResourceNotFoundError(NurementoAPIError):
    """Raised when a record is missing or owned by someone else."""

    status_code = 404
    error_code = ErrorCode.NOT_FOUND


class CapsuleLockedError(NurementoAPIError):
    """Raised when a capsule is opened before its open date."""

    status_code = 423
    error_code = ErrorCode.CAPSULE_LOCKED

    def __init__(self, message: str, open_on: date) -> None:
        super().__init__(message)
        self.open_on = open_on


class RateLimitExceededError(NurementoAPIError):
    """Raised when an owner exceeds their rate limit."""

    status_code = 429
    error_code = ErrorCode.RATE_LIMIT_EXCEEDED


class StoreUnavailableError(NurementoAPIError):
    """Raised when the storage backend fails."""

    status_code = 503
    error_code = ErrorCode.STORE_UNAVAILABLE


def from_domain_error(exc: NurementoError | StoreError) -> NurementoAPIError:
    """Translate a service-layer error into its API counterpart.

    Errors without an HTTP meaning become a plain NurementoAPIError (500).
    """
    if isinstance(exc, ValidationError):
        details = [ErrorDetail(field=field, message=msg) for field, msg in exc.details]
        return InvalidRequestError(exc.message, details=details or None)
    if isinstance(exc, NotFoundError):
        return ResourceNotFoundError(exc.message)
    if isinstance(exc, LockedError):
        return CapsuleLockedError(exc.message, open_on=exc.open_on)
    if isinstance(exc, StoreError):
        return StoreUnavailableError("Storage is temporarily unavailable")
    return NurementoAPIError("An unexpected error occurred")
