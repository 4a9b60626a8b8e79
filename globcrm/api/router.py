"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from globcrm.api.dependencies.
"""

from fastapi import APIRouter

from globcrm.api.endpoints import health, merge_fields, search

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    merge_fields.router, prefix="/merge-fields", tags=["merge-fields"]
)
api_router.include_router(search.router, prefix="/search", tags=["search"])
