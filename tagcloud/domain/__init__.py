"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from tagcloud.domain.entities import NO_TAXONOMY, Cloud, CloudResult, NoTaxonomy, TagCount
from tagcloud.domain.enums import ViewMode
from tagcloud.domain.exceptions import (
    AggregationFailedException,
    ConfigurationException,
    TagCloudException,
    UnsupportedViewModeException,
    ValidationException,
)
from tagcloud.domain.value_objects import RenderOptions

__all__ = [
    "NO_TAXONOMY",
    "AggregationFailedException",
    "Cloud",
    "CloudResult",
    "ConfigurationException",
    "NoTaxonomy",
    "RenderOptions",
    "TagCloudException",
    "TagCount",
    "UnsupportedViewModeException",
    "ValidationException",
    "ViewMode",
]
