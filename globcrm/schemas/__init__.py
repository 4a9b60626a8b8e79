"""API request/response schemas (pydantic)."""

from globcrm.schemas.health import HealthResponse
from globcrm.schemas.merge_field import MergeFieldCatalogResponse, MergeFieldResponse
from globcrm.schemas.search import (
    SearchErrorResponse,
    SearchGroupResponse,
    SearchHitResponse,
    SearchResponse,
)

__all__ = [
    "HealthResponse",
    "MergeFieldCatalogResponse",
    "MergeFieldResponse",
    "SearchErrorResponse",
    "SearchGroupResponse",
    "SearchHitResponse",
    "SearchResponse",
]
