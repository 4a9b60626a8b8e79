"""Global search dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from globcrm.application.use_cases.search import (
    GlobalSearchUseCase,
    normalize_search_term,
)
from globcrm.core.config import get_settings
from globcrm.domain.enums import PermissionScope
from globcrm.infrastructure.persistence.database import get_db
from globcrm.infrastructure.persistence.repositories import (
    GlobalSearchRepository,
    TeamMembershipRepository,
)
from globcrm.infrastructure.services import StaticPermissionResolver


def get_search_term(
    q: str | None = Query(None, description="Search term (at least 2 characters)"),
) -> str:
    """Trimmed search term; raises SearchTermTooShortException (400).

    Declared ahead of the provider chain so a bad term is rejected before a
    DB session is opened.
    """
    return normalize_search_term(q)


def get_permission_resolver() -> StaticPermissionResolver:
    """View-permission resolver; override this dependency to plug in real RBAC."""
    settings = get_settings()
    return StaticPermissionResolver(PermissionScope(settings.search_permission_scope))


async def get_team_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TeamMembershipRepository:
    """Team membership lookups for team-scoped search."""
    return TeamMembershipRepository(db)


async def get_search_provider(
    db: Annotated[AsyncSession, Depends(get_db)],
    permission_resolver: Annotated[
        StaticPermissionResolver, Depends(get_permission_resolver)
    ],
    team_repo: Annotated[TeamMembershipRepository, Depends(get_team_repo)],
) -> GlobalSearchRepository:
    """Search provider over PostgreSQL (same session as team_repo)."""
    return GlobalSearchRepository(db, permission_resolver, team_repo)


async def get_global_search_use_case(
    search_provider: Annotated[GlobalSearchRepository, Depends(get_search_provider)],
) -> GlobalSearchUseCase:
    """Global search use case (clamping, then provider)."""
    return GlobalSearchUseCase(search_provider)
