"""Application DTOs: immutable read-models passed between layers."""

from globcrm.application.dtos.auth import CallerContext
from globcrm.application.dtos.merge_field import CustomFieldSummary, MergeField
from globcrm.application.dtos.search import GlobalSearchResult, SearchGroup, SearchHit

__all__ = [
    "CallerContext",
    "CustomFieldSummary",
    "GlobalSearchResult",
    "MergeField",
    "SearchGroup",
    "SearchHit",
]
