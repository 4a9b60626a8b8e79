"""Global search repository. PostgreSQL tsvector prefix search with ILIKE fallback.

Searches Company, Contact, Deal (tsvector, then ILIKE to fill the cap) and
Product, Activity, Quote, Request (ILIKE only), each scoped by the caller's
effective view permission.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from uuid import UUID

from sqlalchemy import Select, case, cast, func, or_, select
from sqlalchemy.dialects.postgresql import REGCONFIG
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from globcrm.application.dtos.search import GlobalSearchResult, SearchGroup, SearchHit
from globcrm.core.constants import (
    SEARCH_DEFAULT_MAX_PER_TYPE,
    SEARCH_MIN_TERM_LENGTH,
    SEARCH_TEXT_CONFIG,
    VIEW_ACTION,
)
from globcrm.domain.enums import EntityType, PermissionScope
from globcrm.infrastructure.persistence.models import (
    Activity,
    Company,
    Contact,
    Deal,
    Pipeline,
    Product,
    Quote,
    ServiceRequest,
)
from globcrm.shared.telemetry import traced

if TYPE_CHECKING:
    from globcrm.application.interfaces.repositories import ITeamMembershipRepository
    from globcrm.application.interfaces.services import IPermissionResolver

logger = logging.getLogger(__name__)

_NON_WORD_RE = re.compile(r"[^\w\s]")
_LIKE_ESCAPE = "\\"


def build_prefix_query(term: str | None) -> str | None:
    """Build a prefix tsquery ("acme:* & corp:*") for partial word matching.

    Non-word characters are stripped so user input cannot inject tsquery
    operators. Returns None when nothing searchable remains.
    """
    if not term or not term.strip():
        return None
    cleaned = _NON_WORD_RE.sub("", term.strip())
    tokens = [f"{token}:*" for token in cleaned.split()]
    return " & ".join(tokens) if tokens else None


def escape_like(value: str) -> str:
    """Escape LIKE metacharacters (backslash, %, _) so value matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@dataclass(frozen=True)
class _SearchTarget:
    """How one entity type is matched, ordered, and projected into a SearchHit."""

    entity_type: str
    model: Any
    title: ColumnElement[Any]
    subtitle: ColumnElement[Any]
    url_prefix: str
    match_columns: tuple[ColumnElement[Any], ...]
    sort_column: ColumnElement[Any]
    search_vector: ColumnElement[Any] | None = None
    owned: bool = True
    outer_joins: tuple[tuple[Any, ColumnElement[bool]], ...] = ()


_CONTACT_FULL_NAME = Contact.first_name + " " + Contact.last_name

# Search order is the group order in the response.
SEARCH_TARGETS: tuple[_SearchTarget, ...] = (
    _SearchTarget(
        entity_type=EntityType.COMPANY.value,
        model=Company,
        title=Company.name,
        subtitle=Company.industry,
        url_prefix="/companies",
        match_columns=(Company.name, Company.industry, Company.email, Company.phone),
        sort_column=Company.name,
        search_vector=Company.search_vector,
    ),
    _SearchTarget(
        entity_type=EntityType.CONTACT.value,
        model=Contact,
        title=_CONTACT_FULL_NAME,
        subtitle=Contact.job_title,
        url_prefix="/contacts",
        match_columns=(
            _CONTACT_FULL_NAME,
            Contact.first_name,
            Contact.last_name,
            Contact.email,
            Contact.job_title,
        ),
        sort_column=Contact.first_name,
        search_vector=Contact.search_vector,
    ),
    _SearchTarget(
        entity_type=EntityType.DEAL.value,
        model=Deal,
        title=Deal.title,
        subtitle=Pipeline.name,
        url_prefix="/deals",
        match_columns=(Deal.title, Deal.description),
        sort_column=Deal.title,
        search_vector=Deal.search_vector,
        outer_joins=((Pipeline, Deal.pipeline_id == Pipeline.id),),
    ),
    _SearchTarget(
        entity_type=EntityType.PRODUCT.value,
        model=Product,
        title=Product.name,
        subtitle=Product.category,
        url_prefix="/products",
        match_columns=(Product.name, Product.sku, Product.category),
        sort_column=Product.name,
        owned=False,
    ),
    _SearchTarget(
        entity_type=EntityType.ACTIVITY.value,
        model=Activity,
        title=Activity.subject,
        subtitle=Activity.type,
        url_prefix="/activities",
        match_columns=(Activity.subject,),
        sort_column=Activity.subject,
    ),
    _SearchTarget(
        entity_type=EntityType.QUOTE.value,
        model=Quote,
        title=Quote.title,
        subtitle=Quote.quote_number,
        url_prefix="/quotes",
        match_columns=(Quote.title, Quote.quote_number),
        sort_column=Quote.title,
    ),
    _SearchTarget(
        entity_type=EntityType.REQUEST.value,
        model=ServiceRequest,
        title=ServiceRequest.subject,
        subtitle=ServiceRequest.category,
        url_prefix="/requests",
        match_columns=(ServiceRequest.subject, ServiceRequest.category),
        sort_column=ServiceRequest.subject,
    ),
)


@dataclass
class _SearchRun:
    """Per-call state; team membership is loaded at most once."""

    term: str
    prefix_query: str | None
    user_id: UUID
    max_per_type: int
    team_member_ids: list[UUID] | None = None


class GlobalSearchRepository:
    """Cross-entity search with RBAC scoping (implements ISearchProvider).

    Queries run sequentially on one AsyncSession (sessions are not safe for
    concurrent use).
    """

    def __init__(
        self,
        db: AsyncSession,
        permission_resolver: IPermissionResolver,
        team_repo: ITeamMembershipRepository,
    ) -> None:
        self.db = db
        self.permission_resolver = permission_resolver
        self.team_repo = team_repo

    @traced("search.global")
    async def search(
        self,
        term: str,
        user_id: UUID,
        max_per_type: int = SEARCH_DEFAULT_MAX_PER_TYPE,
    ) -> GlobalSearchResult:
        """Search every entity type the user may view; empty types are omitted."""
        if not term or len(term.strip()) < SEARCH_MIN_TERM_LENGTH:
            return GlobalSearchResult()
        clean_term = term.strip()
        run = _SearchRun(
            term=clean_term,
            prefix_query=build_prefix_query(clean_term),
            user_id=user_id,
            max_per_type=max_per_type,
        )
        groups: list[SearchGroup] = []
        for target in SEARCH_TARGETS:
            hits = await self._search_target(target, run)
            if hits:
                groups.append(SearchGroup(entity_type=target.entity_type, items=tuple(hits)))
        logger.debug(
            "Global search for user %s: %s",
            user_id,
            {g.entity_type: len(g.items) for g in groups},
        )
        return GlobalSearchResult(groups=tuple(groups))

    async def _search_target(self, target: _SearchTarget, run: _SearchRun) -> list[SearchHit]:
        scope = await self.permission_resolver.get_effective_scope(
            run.user_id, target.entity_type, VIEW_ACTION
        )
        if scope == PermissionScope.NONE:
            return []
        base = self._base_select(target)
        scope_filter = await self._scope_filter(target, run, scope)
        if scope_filter is not None:
            base = base.where(scope_filter)

        hits: list[SearchHit] = []
        if target.search_vector is not None and run.prefix_query is not None:
            hits = await self._fetch(target, self._ranked_stmt(target, base, run))
        if len(hits) < run.max_per_type:
            remaining = run.max_per_type - len(hits)
            exclude = [h.id for h in hits]
            hits.extend(
                await self._fetch(target, self._ilike_stmt(target, base, run, remaining, exclude))
            )
        return hits

    @staticmethod
    def _base_select(target: _SearchTarget) -> Select[Any]:
        stmt = select(
            target.model.id.label("id"),
            target.title.label("title"),
            target.subtitle.label("subtitle"),
        ).select_from(target.model)
        for joined, onclause in target.outer_joins:
            stmt = stmt.outerjoin(joined, onclause)
        return stmt

    async def _scope_filter(
        self, target: _SearchTarget, run: _SearchRun, scope: PermissionScope
    ) -> ColumnElement[bool] | None:
        """Owner predicate for own/team scope; None when unrestricted or unowned."""
        if not target.owned or scope == PermissionScope.ALL:
            return None
        owner = target.model.owner_id
        if scope == PermissionScope.OWN:
            return owner == run.user_id
        if run.team_member_ids is None:
            run.team_member_ids = await self.team_repo.get_team_member_ids(run.user_id)
        return owner.in_(run.team_member_ids)

    @staticmethod
    def _ranked_stmt(target: _SearchTarget, base: Select[Any], run: _SearchRun) -> Select[Any]:
        """Full-text match on search_vector, best ts_rank first."""
        tsquery = func.to_tsquery(cast(SEARCH_TEXT_CONFIG, REGCONFIG), run.prefix_query)
        return (
            base.where(target.search_vector.op("@@")(tsquery))
            .order_by(func.ts_rank(target.search_vector, tsquery).desc())
            .limit(run.max_per_type)
        )

    @staticmethod
    def _ilike_stmt(
        target: _SearchTarget,
        base: Select[Any],
        run: _SearchRun,
        limit: int,
        exclude_ids: list[UUID],
    ) -> Select[Any]:
        """Substring match on text columns; prefix matches on sort_column first."""
        escaped = escape_like(run.term)
        contains = f"%{escaped}%"
        starts_with = f"{escaped}%"
        stmt = base.where(
            or_(*(col.ilike(contains, escape=_LIKE_ESCAPE) for col in target.match_columns))
        )
        if exclude_ids:
            stmt = stmt.where(target.model.id.not_in(exclude_ids))
        return stmt.order_by(
            case((target.sort_column.ilike(starts_with, escape=_LIKE_ESCAPE), 0), else_=1),
            target.sort_column,
        ).limit(limit)

    async def _fetch(self, target: _SearchTarget, stmt: Select[Any]) -> list[SearchHit]:
        result = await self.db.execute(stmt)
        return [
            SearchHit(
                id=row.id,
                title=row.title,
                subtitle=row.subtitle,
                entity_type=target.entity_type,
                url=f"{target.url_prefix}/{row.id}",
            )
            for row in result.all()
        ]
