"""Infrastructure service implementations."""

from globcrm.infrastructure.services.permission_resolver import StaticPermissionResolver

__all__ = ["StaticPermissionResolver"]
