"""Global search API schemas."""

from uuid import UUID

from pydantic import BaseModel, Field

from globcrm.schemas.base import CamelModel


class SearchHitResponse(CamelModel):
    """Single search hit with a link to the record."""

    id: UUID
    title: str
    subtitle: str | None = None
    entity_type: str = Field(..., description="Company | Contact | Deal | ...")
    url: str


class SearchGroupResponse(CamelModel):
    """Hits for one entity type, in ranking order."""

    entity_type: str
    items: list[SearchHitResponse]


class SearchResponse(CamelModel):
    """Grouped search response. total_count is the number of items across all groups."""

    groups: list[SearchGroupResponse]
    total_count: int


class SearchErrorResponse(BaseModel):
    """400 body when the search term is rejected."""

    error: str
