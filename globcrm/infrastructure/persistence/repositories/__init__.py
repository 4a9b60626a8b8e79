"""SQLAlchemy repositories."""

from globcrm.infrastructure.persistence.repositories.custom_field_repo import (
    CustomFieldDefinitionRepository,
)
from globcrm.infrastructure.persistence.repositories.search_repo import (
    GlobalSearchRepository,
)
from globcrm.infrastructure.persistence.repositories.team_repo import (
    TeamMembershipRepository,
)

__all__ = [
    "CustomFieldDefinitionRepository",
    "GlobalSearchRepository",
    "TeamMembershipRepository",
]
