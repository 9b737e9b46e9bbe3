"""Persistence repositories. Re-exports for dependency injection."""

from tagcloud.infrastructure.persistence.repositories.taxonomy_repo import (
    TaxonomyRepository,
)

__all__ = ["TaxonomyRepository"]
