"""Security headers for JSON API responses.

Responses carry per-user search results, so they are marked uncacheable and
unframeable. HSTS is left to the TLS-terminating proxy. Raw ASGI.
"""

from typing import Callable

API_SECURITY_HEADERS: tuple[tuple[str, str], ...] = (
    ("Cache-Control", "no-store"),
    ("Content-Security-Policy", "default-src 'none'; frame-ancestors 'none'"),
    ("Referrer-Policy", "no-referrer"),
    ("X-Content-Type-Options", "nosniff"),
    ("X-Frame-Options", "DENY"),
)


def SecurityHeadersMiddleware(
    app: Callable, overrides: dict[str, str] | None = None
) -> Callable:
    """Add API_SECURITY_HEADERS (merged with overrides) where the route did not set them."""
    merged = dict(API_SECURITY_HEADERS)
    merged.update(overrides or {})
    encoded = [(name.lower().encode(), value.encode()) for name, value in merged.items()]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                present = {k.lower() for k, _ in message.get("headers", [])}
                message["headers"] = list(message.get("headers", [])) + [
                    pair for pair in encoded if pair[0] not in present
                ]
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
