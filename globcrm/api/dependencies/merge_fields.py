"""Merge-field catalog dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from globcrm.application.services import MergeFieldService
from globcrm.infrastructure.persistence.database import get_db
from globcrm.infrastructure.persistence.repositories import (
    CustomFieldDefinitionRepository,
)


async def get_custom_field_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CustomFieldDefinitionRepository:
    """Custom field definition repository (read-only)."""
    return CustomFieldDefinitionRepository(db)


async def get_merge_field_service(
    custom_field_repo: Annotated[
        CustomFieldDefinitionRepository, Depends(get_custom_field_repo)
    ],
) -> MergeFieldService:
    """Merge-field provider: core catalog plus the caller's custom fields."""
    return MergeFieldService(custom_field_repo)
