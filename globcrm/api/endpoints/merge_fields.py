"""Merge-field catalog API: fields available to document/email templates."""

from typing import Annotated

from fastapi import APIRouter, Depends

from globcrm.api.dependencies import get_caller_context, get_merge_field_service
from globcrm.application.dtos.auth import CallerContext
from globcrm.application.interfaces.services import IMergeFieldProvider
from globcrm.schemas.merge_field import MergeFieldCatalogResponse, MergeFieldResponse

router = APIRouter()


@router.get("", response_model=MergeFieldCatalogResponse)
async def get_merge_fields(
    _: Annotated[CallerContext, Depends(get_caller_context)],
    provider: Annotated[IMergeFieldProvider, Depends(get_merge_field_service)],
):
    """Return all merge fields grouped by entity type (core then custom fields)."""
    catalog = await provider.get_available_fields()
    return {
        entity_type: [
            MergeFieldResponse(
                key=f.key,
                label=f.label,
                group=f.group,
                is_custom_field=f.is_custom_field,
            )
            for f in fields
        ]
        for entity_type, fields in catalog.items()
    }
