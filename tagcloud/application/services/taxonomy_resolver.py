"""Resolve which taxonomy of a content category behaves like tags."""

from __future__ import annotations

import logging

from tagcloud.core.catalog import ContentCatalog
from tagcloud.core.constants import TAGS_BEHAVIOUR

logger = logging.getLogger(__name__)


class TaxonomyResolver:
    """First-match scan over the taxonomies a category declares.

    Declaration order matters: when a category declares several taxonomies
    that behave like tags, only the first one is ever used.
    """

    def __init__(self, catalog: ContentCatalog) -> None:
        self.catalog = catalog

    def resolve_tag_taxonomy(self, category: str | None) -> str | None:
        """Return the first tag-like taxonomy of category, or None.

        None when the category is unknown, declares no taxonomies, or none of
        them behaves like tags. Taxonomies missing from the catalog are skipped.
        """
        for taxonomy in self.catalog.taxonomies_for(category):
            if self.catalog.behaves_like(taxonomy) == TAGS_BEHAVIOUR:
                return taxonomy
        logger.debug("No tag taxonomy for category %s", category)
        return None
