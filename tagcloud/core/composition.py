"""Composition root: wire the tag cloud singletons together.

Built once (lifespan or tests) and passed by reference; no module-level
service instances.
"""

from __future__ import annotations

from dataclasses import dataclass

from tagcloud.application.interfaces import ITagRepository
from tagcloud.application.services import (
    CloudBuilder,
    CloudRenderer,
    CloudStore,
    TagCloudTemplateFunctions,
    TaxonomyResolver,
)
from tagcloud.core.catalog import ContentCatalog
from tagcloud.core.config import Settings
from tagcloud.infrastructure.cache.cache_protocol import CacheProtocol


@dataclass(frozen=True)
class TagCloudServices:
    """Process-wide tag cloud services."""

    builder: CloudBuilder
    store: CloudStore
    renderer: CloudRenderer
    templates: TagCloudTemplateFunctions
    cache: CacheProtocol


def build_services(
    settings: Settings,
    catalog: ContentCatalog,
    repository: ITagRepository,
    cache: CacheProtocol,
) -> TagCloudServices:
    """Build builder, store, renderer and template functions from collaborators."""
    builder = CloudBuilder(TaxonomyResolver(catalog), repository, settings.tagcloud_size)
    store = CloudStore(builder, cache)
    renderer = CloudRenderer(settings.base_url)
    return TagCloudServices(
        builder=builder,
        store=store,
        renderer=renderer,
        templates=TagCloudTemplateFunctions(builder, store, renderer),
        cache=cache,
    )
