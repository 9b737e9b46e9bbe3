"""API request/response schemas (pydantic)."""

from tagcloud.schemas.health import HealthResponse
from tagcloud.schemas.tag_cloud import TagCloudResponse

__all__ = ["HealthResponse", "TagCloudResponse"]
