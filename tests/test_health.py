"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/health returns 200 and status ok."""
    response = await client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"
    assert data.get("version") == "1.0.0"


async def test_health_sets_request_and_security_headers(client: AsyncClient) -> None:
    """Middleware adds X-Request-ID, X-Correlation-ID and security headers."""
    response = await client.get("/api/health")
    assert response.headers.get("x-request-id")
    assert response.headers.get("x-correlation-id") == response.headers.get("x-request-id")
    assert response.headers.get("x-content-type-options") == "nosniff"
    assert response.headers.get("x-frame-options") == "DENY"
    assert response.headers.get("cache-control") == "no-store"
    assert "strict-transport-security" not in response.headers


async def test_request_id_is_forwarded_when_safe(client: AsyncClient) -> None:
    """A well-formed client X-Request-ID is echoed back."""
    response = await client.get("/api/health", headers={"X-Request-ID": "abc-123_def"})
    assert response.headers.get("x-request-id") == "abc-123_def"


async def test_request_id_is_replaced_when_unsafe(client: AsyncClient) -> None:
    """A request ID with unsafe characters is replaced by a generated one."""
    response = await client.get("/api/health", headers={"X-Request-ID": "bad id;drop"})
    assert response.headers.get("x-request-id") != "bad id;drop"
    assert len(response.headers.get("x-request-id", "")) == 36
