"""HTTP API layer (routers, endpoints, dependencies)."""

from globcrm.api.router import api_router

__all__ = ["api_router"]
