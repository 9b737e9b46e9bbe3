"""Content catalog: which taxonomies each content category declares.

Typed view of the host's content type and taxonomy configuration, read
once at startup and validated eagerly. Shape (YAML)::

    contenttypes:
      articles:
        taxonomy: [categories, tags]
    taxonomy:
      tags:
        behaves_like: tags
      categories:
        behaves_like: categories
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from tagcloud.domain.exceptions import ConfigurationException

logger = logging.getLogger(__name__)


class TaxonomyConfig(BaseModel):
    """Configuration of one taxonomy (classification axis)."""

    behaves_like: str


class ContentTypeConfig(BaseModel):
    """Configuration of one content category. Taxonomy order is significant."""

    taxonomy: list[str] = Field(default_factory=list)


class ContentCatalog(BaseModel):
    """Content categories and taxonomies known to the host application."""

    contenttypes: dict[str, ContentTypeConfig] = Field(default_factory=dict)
    taxonomy: dict[str, TaxonomyConfig] = Field(default_factory=dict)

    def taxonomies_for(self, category: str | None) -> list[str]:
        """Return the declared taxonomy names for category (empty if unknown)."""
        content_type = self.contenttypes.get(category)
        if content_type is None:
            return []
        return list(content_type.taxonomy)

    def behaves_like(self, taxonomy: str) -> str | None:
        """Return the behaves_like classification of taxonomy, or None if undeclared."""
        config = self.taxonomy.get(taxonomy)
        return config.behaves_like if config else None


def parse_catalog(data: dict[str, Any] | None) -> ContentCatalog:
    """Validate raw configuration into a ContentCatalog.

    Raises:
        ConfigurationException: If the data does not match the catalog shape.
    """
    try:
        return ContentCatalog.model_validate(data or {})
    except ValidationError as e:
        raise ConfigurationException(
            "Invalid content catalog", details={"errors": e.errors(include_url=False)}
        ) from e


def load_catalog(path: str | Path) -> ContentCatalog:
    """Read and validate the catalog YAML file at path.

    Raises:
        ConfigurationException: If the file is missing, not YAML, or invalid.
    """
    catalog_path = Path(path)
    try:
        raw = yaml.safe_load(catalog_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationException(
            f"Content catalog not readable: {catalog_path}",
            details={"path": str(catalog_path), "reason": str(e)},
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationException(
            f"Content catalog is not valid YAML: {catalog_path}",
            details={"path": str(catalog_path), "reason": str(e)},
        ) from e
    if raw is not None and not isinstance(raw, dict):
        raise ConfigurationException(
            f"Content catalog must be a mapping: {catalog_path}",
            details={"path": str(catalog_path)},
        )
    catalog = parse_catalog(raw)
    logger.info(
        "Content catalog loaded: %s (%d content types, %d taxonomies)",
        catalog_path,
        len(catalog.contenttypes),
        len(catalog.taxonomy),
    )
    return catalog
