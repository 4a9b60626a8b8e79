"""Activity ORM model (calls, meetings, tasks, ...)."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from globcrm.infrastructure.persistence.database import Base
from globcrm.infrastructure.persistence.models.mixins import CrmRecordModel


class Activity(CrmRecordModel, Base):
    """Table: activities. type is stored as its name (e.g. 'Call', 'Meeting')."""

    __tablename__ = "activities"

    subject: Mapped[str] = mapped_column(String(300), nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
