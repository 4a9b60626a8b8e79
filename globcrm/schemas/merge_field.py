"""Merge-field API schemas."""

from pydantic import Field

from globcrm.schemas.base import CamelModel


class MergeFieldResponse(CamelModel):
    """One merge field as exposed to the template editor."""

    key: str = Field(..., description="Template token path, e.g. contact.first_name")
    label: str
    group: str = Field(..., description="Display group, e.g. Contact")
    is_custom_field: bool


# GET /merge-fields body: entity type key -> fields in catalog order.
MergeFieldCatalogResponse = dict[str, list[MergeFieldResponse]]
