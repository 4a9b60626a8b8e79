"""Application ports (Protocols) implemented by infrastructure."""

from globcrm.application.interfaces.repositories import (
    ICustomFieldDefinitionRepository,
    ITeamMembershipRepository,
)
from globcrm.application.interfaces.services import (
    IMergeFieldProvider,
    IPermissionResolver,
    ISearchProvider,
)

__all__ = [
    "ICustomFieldDefinitionRepository",
    "IMergeFieldProvider",
    "IPermissionResolver",
    "ISearchProvider",
    "ITeamMembershipRepository",
]
