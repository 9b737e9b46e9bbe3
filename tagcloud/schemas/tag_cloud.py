"""Tag cloud API schemas."""

from pydantic import BaseModel, Field

from tagcloud.domain.entities import Cloud


class TagCloudResponse(BaseModel):
    """Response for GET /tag-clouds/{category}."""

    category: str = Field(..., description="Content category slug")
    taxonomy: str = Field(..., description="Tag taxonomy the cloud was built from")
    tags: dict[str, int] = Field(
        default_factory=dict, description="Tag -> rank (1-5), in aggregation order"
    )

    @classmethod
    def from_cloud(cls, category: str, cloud: Cloud) -> "TagCloudResponse":
        return cls(category=category, taxonomy=cloud.taxonomy, tags=dict(cloud.tags))
