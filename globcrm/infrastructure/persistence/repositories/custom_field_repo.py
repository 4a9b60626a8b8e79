"""Custom field definition repository (read-only, merge-field catalog)."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from globcrm.application.dtos.merge_field import CustomFieldSummary
from globcrm.infrastructure.persistence.models.custom_field import CustomFieldDefinition


class CustomFieldDefinitionRepository:
    """Reads custom field definitions (implements ICustomFieldDefinitionRepository)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_for_entity_types(
        self, entity_types: Sequence[str]
    ) -> list[CustomFieldSummary]:
        """Return non-deleted definitions for entity_types ordered by sort_order, label."""
        if not entity_types:
            return []
        stmt = (
            select(
                CustomFieldDefinition.entity_type,
                CustomFieldDefinition.name,
                CustomFieldDefinition.label,
            )
            .where(
                CustomFieldDefinition.entity_type.in_(list(entity_types)),
                CustomFieldDefinition.is_deleted.is_(False),
            )
            .order_by(CustomFieldDefinition.sort_order, CustomFieldDefinition.label)
        )
        result = await self.db.execute(stmt)
        return [
            CustomFieldSummary(entity_type=row.entity_type, name=row.name, label=row.label)
            for row in result
        ]
