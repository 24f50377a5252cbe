"""Structured logging with structlog.

JSON lines in production, colored console output in development. Journal
content and credentials are scrubbed from every event before rendering.
"""

import logging
import re
import sys
from collections.abc import Mapping
from typing import Any, cast

import structlog
from structlog.types import EventDict, WrappedLogger

# Keys whose values are credentials
SECRET_KEYS: frozenset[str] = frozenset({
    "password",
    "secret",
    "token",
    "access_token",
    "refresh_token",
    "authorization",
    "bearer",
    "api_key",
    "email",
})

# Keys whose values are what the owner wrote
CONTENT_KEYS: frozenset[str] = frozenset({
    "title",
    "description",
    "message",
    "mood",
    "location",
})

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
JWT_PATTERN = re.compile(r"\beyJ[\w-]+\.[\w-]+\.[\w-]*")


class PIIRedactor:
    """structlog processor that scrubs secrets and journal content.

    Known keys are replaced outright. Other string values are searched
    for email addresses and bearer tokens. Keys ending in "_id" are
    passed through untouched.
    """

    def __init__(self, extra_keys: frozenset[str] = frozenset()) -> None:
        self._secret_keys = SECRET_KEYS | {k.lower() for k in extra_keys}

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        return cast(EventDict, self._scrub_mapping(event_dict))

    def _scrub_mapping(self, data: Mapping[str, Any]) -> dict[str, Any]:
        scrubbed: dict[str, Any] = {}
        for key, value in data.items():
            lowered = key.lower()
            if lowered in self._secret_keys:
                scrubbed[key] = "[REDACTED]"
            elif lowered in CONTENT_KEYS:
                scrubbed[key] = "[CONTENT]"
            elif lowered.endswith("_id"):
                scrubbed[key] = value
            else:
                scrubbed[key] = self._scrub(value)
        return scrubbed

    def _scrub(self, value: Any) -> Any:
        if isinstance(value, str):
            return JWT_PATTERN.sub("[TOKEN]", EMAIL_PATTERN.sub("[EMAIL]", value))
        if isinstance(value, Mapping):
            return self._scrub_mapping(value)
        if isinstance(value, list | tuple):
            return [self._scrub(item) for item in value]
        return value


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    redact_pii: bool = True,
) -> None:
    """Configure structlog for the process.

    Args:
        level: Minimum level name; unknown names fall back to INFO
        format: "json" or "console"
        redact_pii: Install the PIIRedactor processor
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if redact_pii:
        processors.append(PIIRedactor())
    processors.append(
        structlog.processors.JSONRenderer()
        if format == "json"
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    level_num = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named after the calling module."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
