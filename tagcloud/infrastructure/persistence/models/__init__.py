"""ORM models. Import here so Base.metadata sees every table."""

from tagcloud.infrastructure.persistence.models.taxonomy import Taxonomy

__all__ = ["Taxonomy"]
