"""Request and response models for the HTTP API."""

from nuremento.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse

__all__ = ["ErrorBody", "ErrorCode", "ErrorDetail", "ErrorResponse"]
