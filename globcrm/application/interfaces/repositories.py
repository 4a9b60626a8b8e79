"""Repository interfaces (ports) for the application layer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from globcrm.application.dtos.merge_field import CustomFieldSummary


class ICustomFieldDefinitionRepository(Protocol):
    """Protocol for reading custom field definitions."""

    async def list_for_entity_types(
        self, entity_types: Sequence[str]
    ) -> list[CustomFieldSummary]:
        """Return non-deleted definitions for the given entity types, in display order."""


class ITeamMembershipRepository(Protocol):
    """Protocol for team membership lookups used by team-scoped permissions."""

    async def get_team_member_ids(self, user_id: UUID) -> list[UUID]:
        """Return ids of every user sharing at least one team with user_id (including user_id)."""
