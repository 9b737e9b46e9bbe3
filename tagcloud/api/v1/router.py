"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from tagcloud.api.v1.dependencies.
"""

from fastapi import APIRouter

from tagcloud.api.v1.endpoints import health, tag_clouds

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(tag_clouds.router, prefix="/tag-clouds", tags=["tag-clouds"])
