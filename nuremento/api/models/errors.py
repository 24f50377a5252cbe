"""The JSON error envelope returned by every failing endpoint.

    {"error": {"code": "CAPSULE_LOCKED",
               "message": "This time capsule is still locked.",
               "open_on": "2025-06-01"}}
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    INVALID_REQUEST = "INVALID_REQUEST"  # 400: bad input, bad dates, quota reached
    UNAUTHORIZED = "UNAUTHORIZED"  # 401
    NOT_FOUND = "NOT_FOUND"  # 404: missing or someone else's
    CAPSULE_LOCKED = "CAPSULE_LOCKED"  # 423
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"  # 429
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"  # 503
    INTERNAL_ERROR = "INTERNAL_ERROR"  # 500


class ErrorDetail(BaseModel):
    """One field-level problem; field is None for whole-request problems."""

    field: str | None = None
    message: str


class ErrorBody(BaseModel):
    code: ErrorCode
    message: str
    details: list[ErrorDetail] | None = None
    open_on: date | None = None


class ErrorResponse(BaseModel):
    error: ErrorBody
