"""GlobalSearchUseCase, normalize_search_term, clamp_max_per_type."""

import uuid
from unittest.mock import AsyncMock

import pytest

from globcrm.application.dtos.auth import CallerContext
from globcrm.application.dtos.search import GlobalSearchResult, SearchGroup, SearchHit
from globcrm.application.use_cases.search import (
    GlobalSearchUseCase,
    clamp_max_per_type,
    normalize_search_term,
)
from globcrm.domain.exceptions import SearchTermTooShortException


@pytest.mark.parametrize("q", [None, "", " ", "a", " b ", "\t\n"])
def test_normalize_search_term_rejects_short_terms(q) -> None:
    with pytest.raises(SearchTermTooShortException) as exc_info:
        normalize_search_term(q)
    assert exc_info.value.message == "Search term must be at least 2 characters."


def test_normalize_search_term_trims() -> None:
    assert normalize_search_term("  ab ") == "ab"


@pytest.mark.parametrize(
    ("requested", "expected"),
    [(-5, 1), (0, 1), (1, 1), (5, 5), (20, 20), (21, 20), (1000, 20)],
)
def test_clamp_max_per_type(requested: int, expected: int) -> None:
    assert clamp_max_per_type(requested) == expected


async def test_search_rejects_short_term_before_provider() -> None:
    provider = AsyncMock()
    use_case = GlobalSearchUseCase(provider)
    with pytest.raises(SearchTermTooShortException):
        await use_case.search("x", CallerContext(user_id=uuid.uuid4()))
    provider.search.assert_not_called()


async def test_search_delegates_with_clamped_limit() -> None:
    user_id = uuid.uuid4()
    hit = SearchHit(
        id=uuid.uuid4(), title="Acme", subtitle="Software", entity_type="Company", url="/companies/1"
    )
    expected = GlobalSearchResult(groups=(SearchGroup(entity_type="Company", items=(hit,)),))
    provider = AsyncMock()
    provider.search = AsyncMock(return_value=expected)

    result = await GlobalSearchUseCase(provider).search(" acme ", CallerContext(user_id), 50)

    assert result is expected
    provider.search.assert_awaited_once_with("acme", user_id, 20)


async def test_search_propagates_provider_errors() -> None:
    provider = AsyncMock()
    provider.search = AsyncMock(side_effect=RuntimeError("boom"))
    with pytest.raises(RuntimeError, match="boom"):
        await GlobalSearchUseCase(provider).search("acme", CallerContext(uuid.uuid4()))
