"""Contact ORM model."""

import uuid

from sqlalchemy import ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from globcrm.infrastructure.persistence.database import Base
from globcrm.infrastructure.persistence.models.mixins import (
    CrmRecordModel,
    search_vector_column,
)


class Contact(CrmRecordModel, Base):
    """Person, optionally linked to a company. Table: contacts."""

    __tablename__ = "contacts"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str | None] = mapped_column(String(254), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    job_title: Mapped[str | None] = mapped_column(String(200), nullable=True)
    company_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("companies.id", ondelete="SET NULL"), nullable=True, index=True
    )
    search_vector: Mapped[str] = search_vector_column(
        "first_name", "last_name", "email", "job_title"
    )

    __table_args__ = (
        Index("idx_contacts_search_vector", "search_vector", postgresql_using="gin"),
    )
