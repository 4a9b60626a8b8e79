"""Application use cases."""

from globcrm.application.use_cases.search import (
    GlobalSearchUseCase,
    clamp_max_per_type,
    normalize_search_term,
)

__all__ = ["GlobalSearchUseCase", "clamp_max_per_type", "normalize_search_term"]
