"""Cloud builder: resolve the tag taxonomy, aggregate usage, normalize ranks.

Ranks map usage counts linearly onto RANK_MIN..RANK_MAX: a count of 1 gets
the lowest rank, the most used tag the highest. Rounding is half-up.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from tagcloud.application.interfaces import ITagRepository
from tagcloud.application.services.taxonomy_resolver import TaxonomyResolver
from tagcloud.core.constants import RANK_MAX, RANK_MIN
from tagcloud.domain.entities import NO_TAXONOMY, Cloud, CloudResult, TagCount
from tagcloud.domain.exceptions import ValidationException

logger = logging.getLogger(__name__)


def normalize_rank(count: int, max_count: int) -> int:
    """Map count onto the rank scale given the highest count in the cloud.

    Every tag ranks RANK_MIN when max_count <= 1. Results are clamped so
    counts below 1 cannot fall under RANK_MIN.
    """
    if max_count <= 1:
        return RANK_MIN
    span = RANK_MAX - RANK_MIN
    value = Decimal(RANK_MIN) + Decimal(count - 1) * span / Decimal(max_count - 1)
    rank = int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return max(RANK_MIN, min(RANK_MAX, rank))


def rank_tags(tag_counts: Sequence[TagCount]) -> dict[str, int]:
    """Return tag -> rank in the order of tag_counts.

    Without variance (all counts equal) every tag ranks RANK_MIN.
    """
    if not tag_counts:
        return {}
    counts = [tc.count for tc in tag_counts]
    max_count = max(counts)
    if min(counts) == max_count:
        return {tc.tag: RANK_MIN for tc in tag_counts}
    return {tc.tag: normalize_rank(tc.count, max_count) for tc in tag_counts}


class CloudBuilder:
    """Builds a fresh Cloud for a category (no caching; see CloudStore)."""

    def __init__(
        self,
        resolver: TaxonomyResolver,
        repository: ITagRepository,
        cloud_size: int,
    ) -> None:
        """Initialize with collaborators and the configured cloud size.

        Raises:
            ValidationException: If cloud_size is below 1.
        """
        if cloud_size < 1:
            raise ValidationException("Cloud size must be at least 1", field="cloud_size")
        self.resolver = resolver
        self.repository = repository
        self.cloud_size = cloud_size

    def get_tags_taxonomy(self, category: str | None) -> str | None:
        """Return the tag taxonomy of category without building a cloud."""
        return self.resolver.resolve_tag_taxonomy(category)

    async def build(self, category: str | None) -> CloudResult:
        """Build the cloud of category, or NO_TAXONOMY.

        Raises:
            AggregationFailedException: If the store query fails.
        """
        taxonomy = self.get_tags_taxonomy(category)
        if taxonomy is None:
            return NO_TAXONOMY
        tag_counts = await self.repository.aggregate(category, taxonomy, self.cloud_size)
        cloud = Cloud(taxonomy=taxonomy, tags=rank_tags(tag_counts))
        logger.debug(
            "Built cloud for %s (%s): %d tags", category, taxonomy, len(cloud.tags)
        )
        return cloud
