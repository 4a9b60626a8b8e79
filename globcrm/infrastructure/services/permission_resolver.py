"""Configuration-driven permission resolver (implements IPermissionResolver).

The RBAC model lives outside this service. This resolver returns a fixed
scope per entity type so the API is usable standalone; deployments with real
RBAC override the get_permission_resolver dependency.
"""

from __future__ import annotations

from collections.abc import Mapping
from uuid import UUID

from globcrm.domain.enums import PermissionScope


class StaticPermissionResolver:
    """Returns default_scope for every user, with optional per-entity-type overrides."""

    def __init__(
        self,
        default_scope: PermissionScope = PermissionScope.ALL,
        overrides: Mapping[str, PermissionScope] | None = None,
    ) -> None:
        self.default_scope = default_scope
        self.overrides = dict(overrides or {})

    async def get_effective_scope(
        self, user_id: UUID, entity_type: str, action: str
    ) -> PermissionScope:
        """Return the configured scope for entity_type (action is not distinguished)."""
        return self.overrides.get(entity_type, self.default_scope)
