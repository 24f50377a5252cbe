"""JWT authentication for API requests."""

import os
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from nuremento.api.exceptions import UnauthorizedError
from nuremento.api.middleware.context import update_request_context
from nuremento.api.models.context import OwnerContext
from nuremento.observability.logging import get_logger

logger = get_logger(__name__)

# Security scheme for OpenAPI docs
security_scheme = HTTPBearer(auto_error=False)


def get_jwt_secret() -> str:
    """Get JWT secret from environment."""
    secret = os.environ.get("NUREMENTO_JWT_SECRET")
    if not secret:
        raise RuntimeError("NUREMENTO_JWT_SECRET environment variable not set")
    return secret


def get_jwt_algorithm() -> str:
    """Get JWT algorithm from environment."""
    return os.environ.get("NUREMENTO_JWT_ALGORITHM", "HS256")


async def get_owner_context(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security_scheme)],
) -> OwnerContext:
    """Validate the bearer token and extract the owner.

    The identity provider issues the token; its sub claim is the owner_id
    every store call is scoped by.

    Raises:
        UnauthorizedError: If the token is missing, invalid, expired, or
            has no sub claim
    """
    if credentials is None:
        logger.warning("auth_missing_token", path=request.url.path)
        raise UnauthorizedError("Missing authentication token")

    try:
        payload = jwt.decode(
            credentials.credentials,
            get_jwt_secret(),
            algorithms=[get_jwt_algorithm()],
        )
    except JWTError as e:
        logger.warning("auth_jwt_error", error=str(e), path=request.url.path)
        raise UnauthorizedError("Invalid or expired token") from None

    owner_id = payload.get("sub")
    if not owner_id or not isinstance(owner_id, str):
        logger.warning("auth_missing_sub", path=request.url.path)
        raise UnauthorizedError("Token missing sub claim")

    context = OwnerContext(owner_id=owner_id)
    update_request_context(owner_id=owner_id)
    logger.debug("auth_success")
    return context


# Type alias for dependency injection
OwnerContextDep = Annotated[OwnerContext, Depends(get_owner_context)]
