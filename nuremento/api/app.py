"""Nuremento HTTP application.

Run with `nuremento-api` or `uvicorn nuremento.api.app:app`.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from pydantic import ValidationError

import nuremento
from nuremento.api.exceptions import NurementoAPIError, from_domain_error
from nuremento.api.middleware.context import RequestContextMiddleware
from nuremento.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from nuremento.api.routes import register_routes
from nuremento.config import get_settings
from nuremento.db.errors import StoreError
from nuremento.errors import NurementoError, ProgrammingInvariantViolation
from nuremento.observability.logging import get_logger, setup_logging
from nuremento.observability.metrics import ERRORS

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Build the application from the current settings.

    Logging is configured first so that everything after it, including
    route registration, logs in the configured format. Every error,
    expected or not, leaves as an ErrorResponse envelope.
    """
    settings = get_settings()
    observability = settings.observability
    setup_logging(
        level=observability.logging.level,
        format=observability.logging.format,
        redact_pii=observability.logging.redact_pii,
    )

    app = FastAPI(
        title="Nuremento API",
        description="Memory journal with daily resurfacing and time capsules",
        version=nuremento.__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=settings.api.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    _register_exception_handlers(app)
    register_routes(app, metrics_enabled=observability.metrics.enabled)

    if observability.tracing.enabled:
        FastAPIInstrumentor.instrument_app(app)
        logger.info("tracing_enabled")

    logger.info(
        "app_created",
        debug=settings.debug,
        storage_backend=settings.storage.backend,
        capsule_open_mode=settings.capsules.open_mode.value,
    )
    return app


def _error_response(
    status_code: int,
    body: ErrorBody,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    ERRORS.labels(error_type=body.code.value).inc()
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=body).model_dump(mode="json", exclude_none=True),
        headers=headers,
    )


def _validation_details(errors: list[dict]) -> list[ErrorDetail]:
    """Turn pydantic error dicts into ErrorDetails named after the input field."""
    details = []
    for error in errors:
        # loc starts with where the value came from: body, query or path
        field = ".".join(str(p) for p in error["loc"] if p not in ("body", "query", "path"))
        message = str(error["msg"]).removeprefix("Value error, ")
        details.append(ErrorDetail(field=field or None, message=message))
    return details


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NurementoAPIError)
    async def api_error_handler(request: Request, exc: NurementoAPIError) -> JSONResponse:
        logger.warning(
            "api_error",
            error_code=exc.error_code.value,
            error_message=exc.message,
            path=request.url.path,
        )
        body = ErrorBody(
            code=exc.error_code,
            message=exc.message,
            details=exc.details,
            open_on=getattr(exc, "open_on", None),
        )
        return _error_response(exc.status_code, body, headers=exc.headers)

    @app.exception_handler(NurementoError)
    async def domain_error_handler(request: Request, exc: NurementoError) -> JSONResponse:
        if isinstance(exc, ProgrammingInvariantViolation):
            logger.error("programming_invariant_violation", error=str(exc), path=request.url.path)
        return await api_error_handler(request, from_domain_error(exc))

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.error(
            "store_error",
            error=str(exc),
            cause=type(exc.cause).__name__ if exc.cause else None,
            path=request.url.path,
        )
        return await api_error_handler(request, from_domain_error(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed JSON, missing fields and field validators all land here.

        A single problem is promoted to the top-level message.
        """
        details = _validation_details(list(exc.errors()))
        message = details[0].message if len(details) == 1 else "Request validation failed"
        logger.warning("request_invalid", path=request.url.path, error_count=len(details))
        body = ErrorBody(code=ErrorCode.INVALID_REQUEST, message=message, details=details)
        return _error_response(400, body)

    @app.exception_handler(ValidationError)
    async def model_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning("model_validation_failed", path=request.url.path)
        body = ErrorBody(
            code=ErrorCode.INVALID_REQUEST,
            message="Data validation failed",
            details=_validation_details(list(exc.errors())),
        )
        return _error_response(400, body)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unexpected_error", error_type=type(exc).__name__, path=request.url.path)
        body = ErrorBody(code=ErrorCode.INTERNAL_ERROR, message="An unexpected error occurred")
        return _error_response(500, body)


app = create_app()
