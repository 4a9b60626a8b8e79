"""Deal and Pipeline ORM models."""

import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Index, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from globcrm.infrastructure.persistence.database import Base
from globcrm.infrastructure.persistence.models.mixins import (
    CrmRecordModel,
    TimestampMixin,
    UuidMixin,
    search_vector_column,
)


class Pipeline(UuidMixin, TimestampMixin, Base):
    """Sales pipeline a deal moves through. Table: pipelines."""

    __tablename__ = "pipelines"

    name: Mapped[str] = mapped_column(String(100), nullable=False)


class Deal(CrmRecordModel, Base):
    """Sales opportunity. Table: deals. Subtitle in search is the pipeline name."""

    __tablename__ = "deals"

    title: Mapped[str] = mapped_column(String(300), nullable=False)
    value: Mapped[Decimal | None] = mapped_column(Numeric(18, 2), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    expected_close_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    pipeline_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("pipelines.id", ondelete="SET NULL"), nullable=True, index=True
    )
    company_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("companies.id", ondelete="SET NULL"), nullable=True, index=True
    )
    search_vector: Mapped[str] = search_vector_column("title", "description")

    __table_args__ = (
        Index("idx_deals_search_vector", "search_vector", postgresql_using="gin"),
    )
