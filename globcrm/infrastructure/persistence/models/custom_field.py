"""Custom field definition ORM model."""

from sqlalchemy import Boolean, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from globcrm.infrastructure.persistence.database import Base
from globcrm.infrastructure.persistence.models.mixins import TimestampMixin, UuidMixin


class CustomFieldDefinition(UuidMixin, TimestampMixin, Base):
    """User-defined field on an entity type. Table: custom_field_definitions.

    Soft-deleted rows (is_deleted) are never exposed.
    """

    __tablename__ = "custom_field_definitions"

    entity_type: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    label: Mapped[str] = mapped_column(String(200), nullable=False)
    field_type: Mapped[str] = mapped_column(String(30), nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index("ix_custom_field_definitions_entity_type", "entity_type"),
    )
