"""SQLAlchemy mixins for common model patterns (DRY).

Provides: UuidMixin, TimestampMixin, OwnedMixin, search_vector_column(), and the
combined CrmRecordModel used by owner-scoped CRM records.
"""

import uuid
from datetime import datetime

from sqlalchemy import Computed, DateTime, Uuid
from sqlalchemy.dialects.postgresql import TSVECTOR
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from globcrm.core.constants import SEARCH_TEXT_CONFIG


class UuidMixin:
    """Mixin for models with a UUID primary key (generated client-side)."""

    @declared_attr
    def id(cls) -> Mapped[uuid.UUID]:
        return mapped_column(Uuid, primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class OwnedMixin:
    """Mixin for records with an owning user (drives own/team permission scopes)."""

    @declared_attr
    def owner_id(cls) -> Mapped[uuid.UUID | None]:
        return mapped_column(Uuid, nullable=True, index=True)


def search_vector_column(*columns: str) -> Mapped[str]:
    """Generated tsvector over columns (NULLs coalesced to ''), stored."""
    parts = " || ' ' || ".join(f"coalesce({c}, '')" for c in columns)
    return mapped_column(
        TSVECTOR,
        Computed(f"to_tsvector('{SEARCH_TEXT_CONFIG}', {parts})", persisted=True),
        nullable=False,
    )


class CrmRecordModel(UuidMixin, TimestampMixin, OwnedMixin):
    """id, created_at, updated_at, owner_id."""
