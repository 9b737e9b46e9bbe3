"""Application services: taxonomy resolution, cloud building, caching, rendering."""

from tagcloud.application.services.cloud_builder import (
    CloudBuilder,
    normalize_rank,
    rank_tags,
)
from tagcloud.application.services.cloud_renderer import CloudRenderer
from tagcloud.application.services.cloud_store import CloudStore
from tagcloud.application.services.taxonomy_resolver import TaxonomyResolver
from tagcloud.application.services.template_functions import TagCloudTemplateFunctions

__all__ = [
    "CloudBuilder",
    "CloudRenderer",
    "CloudStore",
    "TagCloudTemplateFunctions",
    "TaxonomyResolver",
    "normalize_rank",
    "rank_tags",
]
