"""Caller authentication dependencies (composition root)."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from globcrm.application.dtos.auth import CallerContext
from globcrm.infrastructure.security.jwt import verify_token

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


async def get_token_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> dict[str, Any]:
    """Return verified JWT claims; raise 401 if the bearer token is missing or invalid."""
    if not credentials:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return verify_token(credentials.credentials)
    except ValueError as e:
        logger.debug("Rejected bearer token: %s", e)
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


async def get_caller_context(
    claims: Annotated[dict[str, Any], Depends(get_token_claims)],
) -> CallerContext:
    """Caller identity from verified claims.

    A verified token without a usable id claim raises CallerIdentityError,
    which surfaces as 500 (not 401).
    """
    return CallerContext.from_claims(claims)
