"""Domain exceptions for the CRM API.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any

from globcrm.core.constants import SEARCH_TERM_TOO_SHORT_MESSAGE


class CrmException(Exception):
    """Base exception for all CRM application errors.

    All handled errors inherit from this class so the presentation layer
    can map them to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body (error, message, and details when present)."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationException(CrmException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or query parameter that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class SearchTermTooShortException(ValidationException):
    """Raised when a global search term is blank or shorter than the minimum.

    Rendered as ``{"error": message}`` with status 400.
    """

    def __init__(self) -> None:
        super().__init__(SEARCH_TERM_TOO_SHORT_MESSAGE, field="q")


class SqlNotConfiguredException(CrmException):
    """Raised when an operation requires Postgres but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


class CallerIdentityError(RuntimeError):
    """Raised when an authenticated request carries no usable caller id claim.

    Not a CrmException: an authenticated token without a valid identifier is
    an auth-layer misconfiguration, so it surfaces as a generic 500.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Caller identity claim invalid: {reason}")
