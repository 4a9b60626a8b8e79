"""HTTP middleware: request ID, correlation ID, security headers.

Applied in main app; order matters (last added = outermost).
"""

from globcrm.middleware.correlation_id import CorrelationIDMiddleware
from globcrm.middleware.request_id import RequestIDMiddleware
from globcrm.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
]
