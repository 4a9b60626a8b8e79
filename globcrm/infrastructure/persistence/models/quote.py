"""Quote ORM model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from globcrm.infrastructure.persistence.database import Base
from globcrm.infrastructure.persistence.models.mixins import CrmRecordModel


class Quote(CrmRecordModel, Base):
    """Table: quotes."""

    __tablename__ = "quotes"

    quote_number: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="Draft")
