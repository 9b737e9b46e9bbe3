"""Taxonomy repository: tag usage aggregation over the content store.

Constructed once per process with a session factory; every call opens its
own short-lived session so the repository can be shared by concurrent
requests.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tagcloud.domain.entities import TagCount
from tagcloud.domain.exceptions import AggregationFailedException, ValidationException
from tagcloud.infrastructure.persistence.models.taxonomy import Taxonomy

logger = logging.getLogger(__name__)


class TaxonomyRepository:
    """Implements ITagRepository on the taxonomy table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def aggregate(self, category: str, taxonomy: str, limit: int) -> list[TagCount]:
        """Return usage counts per tag slug, most used first, at most limit rows.

        Ties are broken by slug so repeated calls on unchanged data return the
        same order.

        Raises:
            ValidationException: If limit is below 1.
            AggregationFailedException: If the store query fails.
        """
        if limit < 1:
            raise ValidationException("Cloud size must be at least 1", field="limit")
        usage = func.count(Taxonomy.id).label("usage")
        stmt = (
            select(Taxonomy.slug, usage)
            .where(
                Taxonomy.contenttype == category,
                Taxonomy.taxonomytype == taxonomy,
            )
            .group_by(Taxonomy.slug)
            .order_by(usage.desc(), Taxonomy.slug.asc())
            .limit(limit)
        )
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                rows = result.all()
        except SQLAlchemyError as e:
            logger.exception(
                "Tag aggregation failed for %s/%s", category, taxonomy
            )
            raise AggregationFailedException(category, taxonomy, str(e)) from e
        return [TagCount(tag=slug, count=int(count)) for slug, count in rows]

    async def record_tags(
        self,
        category: str,
        content_id: int,
        taxonomy: str,
        slugs: Iterable[str],
    ) -> int:
        """Replace the terms of one content item in taxonomy with slugs.

        Returns:
            Number of associations written.
        """
        unique_slugs = list(dict.fromkeys(s for s in slugs if s))
        async with self.session_factory() as session:
            async with session.begin():
                existing = await session.execute(
                    select(Taxonomy).where(
                        Taxonomy.contenttype == category,
                        Taxonomy.content_id == content_id,
                        Taxonomy.taxonomytype == taxonomy,
                    )
                )
                for row in existing.scalars().all():
                    await session.delete(row)
                session.add_all(
                    Taxonomy(
                        content_id=content_id,
                        contenttype=category,
                        taxonomytype=taxonomy,
                        slug=slug,
                        name=slug,
                        sortorder=position,
                    )
                    for position, slug in enumerate(unique_slugs)
                )
        logger.debug(
            "Recorded %d %s terms for %s #%s", len(unique_slugs), taxonomy, category, content_id
        )
        return len(unique_slugs)
