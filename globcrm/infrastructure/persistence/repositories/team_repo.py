"""Team membership repository (team-scoped permission filtering)."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from globcrm.infrastructure.persistence.models.team import TeamMember


class TeamMembershipRepository:
    """Resolves team co-members (implements ITeamMembershipRepository)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_team_member_ids(self, user_id: UUID) -> list[UUID]:
        """Return distinct user ids across all teams user_id belongs to.

        Empty when the user is in no team.
        """
        user_teams = select(TeamMember.team_id).where(TeamMember.user_id == user_id)
        stmt = (
            select(TeamMember.user_id)
            .where(TeamMember.team_id.in_(user_teams.scalar_subquery()))
            .distinct()
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
