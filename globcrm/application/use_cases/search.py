"""Global search use case. Validates input, then delegates to ISearchProvider."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from globcrm.core.constants import (
    SEARCH_DEFAULT_MAX_PER_TYPE,
    SEARCH_MAX_PER_TYPE,
    SEARCH_MIN_PER_TYPE,
    SEARCH_MIN_TERM_LENGTH,
)
from globcrm.domain.exceptions import SearchTermTooShortException
from globcrm.shared.telemetry import add_span_attributes

if TYPE_CHECKING:
    from globcrm.application.dtos.auth import CallerContext
    from globcrm.application.dtos.search import GlobalSearchResult
    from globcrm.application.interfaces.services import ISearchProvider

logger = logging.getLogger(__name__)


def normalize_search_term(q: str | None) -> str:
    """Return the trimmed term.

    Raises:
        SearchTermTooShortException: If q is None, blank, or shorter than
            the minimum length after trimming.
    """
    term = (q or "").strip()
    if len(term) < SEARCH_MIN_TERM_LENGTH:
        raise SearchTermTooShortException()
    return term


def clamp_max_per_type(max_per_type: int) -> int:
    """Clamp silently into [SEARCH_MIN_PER_TYPE, SEARCH_MAX_PER_TYPE]."""
    return max(SEARCH_MIN_PER_TYPE, min(max_per_type, SEARCH_MAX_PER_TYPE))


class GlobalSearchUseCase:
    """Cross-entity search for the authenticated caller (companies, contacts, deals, ...)."""

    def __init__(self, search_provider: ISearchProvider) -> None:
        self.search_provider = search_provider

    async def search(
        self,
        q: str | None,
        caller: CallerContext,
        max_per_type: int = SEARCH_DEFAULT_MAX_PER_TYPE,
    ) -> GlobalSearchResult:
        """Validate the term, clamp the per-type cap, and run the search.

        The provider is not called when the term is rejected. Provider
        failures propagate unchanged (no retry, no partial results).
        """
        term = normalize_search_term(q)
        limit = clamp_max_per_type(max_per_type)
        if limit != max_per_type:
            logger.debug("maxPerType %d clamped to %d", max_per_type, limit)
        add_span_attributes(
            **{"search.max_per_type": limit, "search.term_length": len(term)}
        )
        return await self.search_provider.search(term, caller.user_id, limit)
