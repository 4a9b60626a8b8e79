"""Pytest configuration and fixtures for globcrm.

Environment is set before globcrm.main is imported: a test SECRET_KEY,
telemetry off, and no DATABASE_URL (collaborators that need SQL are
replaced through app.dependency_overrides). Repository integration tests
use their own engine on TEST_DATABASE_URL and are skipped without it.
"""

import os
import uuid

# Read before DATABASE_URL is blanked for the app under test.
_TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "")

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["TELEMETRY_ENABLED"] = "false"
os.environ["DATABASE_URL"] = ""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from globcrm.core.config import get_settings

get_settings.cache_clear()

from globcrm.application.dtos.search import GlobalSearchResult
from globcrm.core.limiter import limiter
from globcrm.infrastructure.persistence import models  # noqa: F401  (registers tables)
from globcrm.infrastructure.persistence.database import Base
from globcrm.infrastructure.security.jwt import create_access_token
from globcrm.main import app


class RecordingSearchProvider:
    """ISearchProvider test double: records calls and returns a fixed result."""

    def __init__(self, result: GlobalSearchResult | None = None) -> None:
        self.result = result or GlobalSearchResult()
        self.calls: list[tuple[str, uuid.UUID, int]] = []

    async def search(
        self, term: str, user_id: uuid.UUID, max_per_type: int = 5
    ) -> GlobalSearchResult:
        self.calls.append((term, user_id, max_per_type))
        return self.result


@pytest.fixture(autouse=True)
def _reset_app_state():
    """Each test starts with the real composition root and fresh rate-limit windows."""
    limiter.reset()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def server_error_client() -> AsyncClient:
    """Client that receives 500 responses instead of re-raised app exceptions."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def caller_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def auth_headers(caller_id: uuid.UUID) -> dict[str, str]:
    """Bearer token for caller_id."""
    token = create_access_token({"sub": str(caller_id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def search_provider() -> RecordingSearchProvider:
    """Search provider double wired in place of the PostgreSQL repository."""
    from globcrm.api.dependencies import get_search_provider

    provider = RecordingSearchProvider()
    app.dependency_overrides[get_search_provider] = lambda: provider
    return provider


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository integration tests. Rolls back after test.

    Requires TEST_DATABASE_URL (postgresql+asyncpg://...). Tables are created
    inside the outer transaction (Postgres DDL is transactional), so nothing
    persists. Run without a DB via: pytest -m 'not requires_db'.
    """
    if not _TEST_DATABASE_URL:
        pytest.skip("Postgres not configured: set TEST_DATABASE_URL")
    engine = create_async_engine(_TEST_DATABASE_URL)
    try:
        async with engine.connect() as conn:
            trans = await conn.begin()
            await conn.run_sync(Base.metadata.create_all)
            session = AsyncSession(
                bind=conn,
                expire_on_commit=False,
                join_transaction_mode="create_savepoint",
            )
            try:
                yield session
            finally:
                await session.close()
                await trans.rollback()
    finally:
        await engine.dispose()
