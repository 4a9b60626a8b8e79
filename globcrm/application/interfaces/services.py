"""Service interfaces (ports) for the application layer.

Protocols define contracts for the collaborators behind the endpoints (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from globcrm.application.dtos.merge_field import MergeField
    from globcrm.application.dtos.search import GlobalSearchResult
    from globcrm.domain.enums import PermissionScope


class IMergeFieldProvider(Protocol):
    """Protocol for the merge-field catalog source."""

    async def get_available_fields(self) -> dict[str, list[MergeField]]:
        """Return all merge fields grouped by lowercase entity type key."""


class ISearchProvider(Protocol):
    """Protocol for cross-entity full-text search.

    Implementations own matching, per-type capping at max_per_type,
    permission filtering, and ranking order within each group.
    """

    async def search(
        self, term: str, user_id: UUID, max_per_type: int = 5
    ) -> GlobalSearchResult:
        """Search every entity type the caller may view."""


class IPermissionResolver(Protocol):
    """Protocol for resolving a user's effective scope on an entity type."""

    async def get_effective_scope(
        self, user_id: UUID, entity_type: str, action: str
    ) -> PermissionScope:
        """Return the scope (none/own/team/all) for entity_type:action."""
