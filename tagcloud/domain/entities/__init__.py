"""Domain entities.

Pure domain models; no ORM or persistence concerns.
"""

from tagcloud.domain.entities.cloud import (
    NO_TAXONOMY,
    Cloud,
    CloudResult,
    NoTaxonomy,
    TagCount,
)

__all__ = [
    "NO_TAXONOMY",
    "Cloud",
    "CloudResult",
    "NoTaxonomy",
    "TagCount",
]
