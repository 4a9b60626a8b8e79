"""Authenticated caller context, decoupled from the transport's session mechanism."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from globcrm.domain.exceptions import CallerIdentityError

# JWT claim carrying the caller's unique identifier.
CALLER_ID_CLAIM = "sub"


@dataclass(frozen=True)
class CallerContext:
    """The authenticated user making the request."""

    user_id: UUID

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "CallerContext":
        """Build from verified token claims.

        Raises:
            CallerIdentityError: If the id claim is missing or not a UUID.
        """
        raw = claims.get(CALLER_ID_CLAIM)
        if raw is None or raw == "":
            raise CallerIdentityError(f"missing '{CALLER_ID_CLAIM}' claim")
        try:
            return cls(user_id=UUID(str(raw)))
        except ValueError as e:
            raise CallerIdentityError(
                f"'{CALLER_ID_CLAIM}' claim is not a valid identifier"
            ) from e
