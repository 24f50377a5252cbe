"""Errors raised by storage backends.

Postgres stores wrap every driver exception in one of these so the API
layer can answer 503 without knowing about asyncpg.
"""


class StoreError(Exception):
    """A store call failed; nothing was changed.

    Attributes:
        cause: The backend exception, kept for logging
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConnectionError(StoreError):  # noqa: A001
    """The database could not be reached or the query failed on I/O."""
