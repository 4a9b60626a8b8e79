"""Global search API: permission-scoped search across CRM entity types."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from globcrm.api.dependencies import (
    get_caller_context,
    get_global_search_use_case,
    get_search_term,
)
from globcrm.application.dtos.auth import CallerContext
from globcrm.application.use_cases.search import GlobalSearchUseCase
from globcrm.core.constants import SEARCH_DEFAULT_MAX_PER_TYPE
from globcrm.core.limiter import limit_search
from globcrm.schemas.search import (
    SearchErrorResponse,
    SearchGroupResponse,
    SearchHitResponse,
    SearchResponse,
)

router = APIRouter()


@router.get(
    "",
    response_model=SearchResponse,
    responses={400: {"description": "Search term too short", "model": SearchErrorResponse}},
)
@limit_search
async def search(
    request: Request,
    caller: Annotated[CallerContext, Depends(get_caller_context)],
    term: Annotated[str, Depends(get_search_term)],
    use_case: Annotated[GlobalSearchUseCase, Depends(get_global_search_use_case)],
    max_per_type: int = Query(
        SEARCH_DEFAULT_MAX_PER_TYPE,
        alias="maxPerType",
        description="Results per entity type; clamped to 1..20",
    ),
):
    """Search companies, contacts, deals and more; groups and items keep provider order.

    Dependency order is auth (401), then term (400), then the provider chain.
    """
    result = await use_case.search(term, caller, max_per_type)
    groups = [
        SearchGroupResponse(
            entity_type=g.entity_type,
            items=[
                SearchHitResponse(
                    id=i.id,
                    title=i.title,
                    subtitle=i.subtitle,
                    entity_type=i.entity_type,
                    url=i.url,
                )
                for i in g.items
            ],
        )
        for g in result.groups
    ]
    return SearchResponse(
        groups=groups,
        total_count=sum(len(g.items) for g in groups),
    )
