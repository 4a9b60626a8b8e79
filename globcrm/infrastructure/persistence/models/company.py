"""Company ORM model."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from globcrm.infrastructure.persistence.database import Base
from globcrm.infrastructure.persistence.models.mixins import (
    CrmRecordModel,
    search_vector_column,
)


class Company(CrmRecordModel, Base):
    """Company account. Table: companies. GIN index on search_vector."""

    __tablename__ = "companies"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    industry: Mapped[str | None] = mapped_column(String(100), nullable=True)
    website: Mapped[str | None] = mapped_column(String(500), nullable=True)
    email: Mapped[str | None] = mapped_column(String(254), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    search_vector: Mapped[str] = search_vector_column("name", "industry", "email", "city")

    __table_args__ = (
        Index("idx_companies_search_vector", "search_vector", postgresql_using="gin"),
    )
