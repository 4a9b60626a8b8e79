"""JWT token creation and verification for authentication.

Uses globcrm.core.config for secret and algorithm. Tokens are issued by the
identity service; create_access_token exists for local tooling and tests.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from globcrm.core.config import get_settings


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT access token with the given claims.

    Args:
        data: Claims to encode (e.g. sub).
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = datetime.now(UTC) + expires_delta
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify signature and expiry of a JWT and return its claims.

    Only exp is required here. The caller-id claim is checked separately
    (CallerContext.from_claims): a signed token without it is an auth-layer
    fault, not an unauthenticated request.

    Raises:
        ValueError: If the token is malformed, badly signed, or expired.
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "verify_sub": False},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
