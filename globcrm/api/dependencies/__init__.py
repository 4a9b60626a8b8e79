"""Presentation-layer dependency injection (composition root).

Routes depend only on these; repositories and services are built here.
Tests swap implementations through app.dependency_overrides.
"""

from globcrm.api.dependencies.auth import get_caller_context, get_token_claims
from globcrm.api.dependencies.merge_fields import (
    get_custom_field_repo,
    get_merge_field_service,
)
from globcrm.api.dependencies.search import (
    get_global_search_use_case,
    get_permission_resolver,
    get_search_provider,
    get_search_term,
    get_team_repo,
)

__all__ = [
    "get_caller_context",
    "get_custom_field_repo",
    "get_global_search_use_case",
    "get_merge_field_service",
    "get_permission_resolver",
    "get_search_provider",
    "get_search_term",
    "get_team_repo",
    "get_token_claims",
]
