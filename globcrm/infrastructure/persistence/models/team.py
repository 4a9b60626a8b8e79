"""Team and TeamMember ORM models (team-scoped permissions)."""

import uuid

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from globcrm.infrastructure.persistence.database import Base
from globcrm.infrastructure.persistence.models.mixins import TimestampMixin, UuidMixin


class Team(UuidMixin, TimestampMixin, Base):
    """Table: teams."""

    __tablename__ = "teams"

    name: Mapped[str] = mapped_column(String(100), nullable=False)


class TeamMember(Base):
    """Membership of a user in a team. Table: team_members. PK (team_id, user_id)."""

    __tablename__ = "team_members"

    team_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("teams.id", ondelete="CASCADE"), primary_key=True
    )
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, index=True)
