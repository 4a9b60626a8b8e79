"""Service request ORM model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from globcrm.infrastructure.persistence.database import Base
from globcrm.infrastructure.persistence.models.mixins import CrmRecordModel


class ServiceRequest(CrmRecordModel, Base):
    """Customer support/service request. Table: requests."""

    __tablename__ = "requests"

    subject: Mapped[str] = mapped_column(String(300), nullable=False)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="New")
