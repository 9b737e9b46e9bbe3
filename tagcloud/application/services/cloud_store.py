"""Cloud store: cache-aside access to built clouds.

Clouds are cached per category under tagcloud_<category> until the
category's content changes. Categories without a tag taxonomy are never
cached so a later configuration change is picked up on the next fetch.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tagcloud.application.services.cloud_builder import CloudBuilder
from tagcloud.domain.entities import NO_TAXONOMY, Cloud, CloudResult
from tagcloud.domain.exceptions import ValidationException
from tagcloud.infrastructure.cache.keys import tagcloud_key

if TYPE_CHECKING:
    from tagcloud.infrastructure.cache.cache_protocol import CacheProtocol

logger = logging.getLogger(__name__)


class CloudStore:
    """Lazily populated category -> Cloud cache with explicit invalidation.

    Concurrent cold fetches of one category may each build; the clouds are
    equal and the last save wins, leaving one entry.
    """

    def __init__(self, builder: CloudBuilder, cache: CacheProtocol) -> None:
        self.builder = builder
        self.cache = cache

    async def fetch(self, category: str | None) -> CloudResult:
        """Return the cached cloud of category, building and caching it on a miss.

        A missing category (None or empty) has no taxonomy.
        A cached value that no longer decodes to a Cloud is rebuilt.

        Raises:
            AggregationFailedException: If the cloud had to be built and the
                store query failed. Nothing is cached in that case.
        """
        if not category:
            return NO_TAXONOMY
        key = tagcloud_key(category)
        if await self.cache.contains(key):
            cached = await self.cache.fetch(key)
            if cached is not None:
                try:
                    return Cloud.from_dict(cached)
                except (KeyError, TypeError, ValueError, AttributeError, ValidationException):
                    logger.warning("Discarding unreadable cached cloud: %s", key)
        cloud = await self.builder.build(category)
        if isinstance(cloud, Cloud):
            await self.cache.save(key, cloud.to_dict())
        return cloud

    async def invalidate(self, category: str | None) -> None:
        """Drop the cached cloud of category. No-op when nothing is cached."""
        if not category:
            return
        key = tagcloud_key(category)
        if await self.cache.contains(key):
            await self.cache.delete(key)
            logger.info("Tag cloud invalidated: %s", category)

    async def on_content_saved(self, category: str) -> None:
        """Content of category was created or updated: its cloud is stale."""
        await self.invalidate(category)
