"""DTOs for global search results (no dependency on ORM)."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class SearchHit:
    """Single matched record with enough data to render and link to it."""

    id: UUID
    title: str
    subtitle: str | None
    entity_type: str
    url: str


@dataclass(frozen=True)
class SearchGroup:
    """Hits for one entity type, in provider ranking order."""

    entity_type: str
    items: tuple[SearchHit, ...] = ()


@dataclass(frozen=True)
class GlobalSearchResult:
    """Search provider output: one group per entity type that had hits."""

    groups: tuple[SearchGroup, ...] = field(default_factory=tuple)
