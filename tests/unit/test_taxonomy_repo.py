"""TaxonomyRepository unit tests with a mocked session factory."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from tagcloud.domain.entities import TagCount
from tagcloud.domain.exceptions import AggregationFailedException, ValidationException
from tagcloud.infrastructure.persistence.repositories import TaxonomyRepository


def _session_factory(session: AsyncMock) -> MagicMock:
    """Factory whose call returns an async context manager yielding session."""
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=session)
    context.__aexit__ = AsyncMock(return_value=False)
    return MagicMock(return_value=context)


async def test_aggregate_maps_rows_to_tag_counts() -> None:
    session = AsyncMock()
    result = MagicMock()
    result.all.return_value = [("python", 4), ("sql", 2)]
    session.execute.return_value = result
    repo = TaxonomyRepository(_session_factory(session))

    counts = await repo.aggregate("articles", "tags", 20)

    assert counts == [TagCount("python", 4), TagCount("sql", 2)]
    session.execute.assert_awaited_once()


async def test_aggregate_query_shape() -> None:
    session = AsyncMock()
    result = MagicMock()
    result.all.return_value = []
    session.execute.return_value = result
    repo = TaxonomyRepository(_session_factory(session))

    await repo.aggregate("articles", "tags", 7)

    sql = str(session.execute.await_args.args[0]).lower()
    assert "count(taxonomy.id)" in sql
    assert "group by taxonomy.slug" in sql
    assert "order by usage desc, taxonomy.slug asc" in sql
    assert "limit" in sql


async def test_aggregate_store_error_raises_aggregation_failed() -> None:
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))
    repo = TaxonomyRepository(_session_factory(session))

    with pytest.raises(AggregationFailedException) as exc_info:
        await repo.aggregate("articles", "tags", 10)

    assert exc_info.value.details["category"] == "articles"
    assert exc_info.value.details["taxonomy"] == "tags"
    assert isinstance(exc_info.value.__cause__, OperationalError)


async def test_aggregate_rejects_limit_below_one() -> None:
    repo = TaxonomyRepository(MagicMock())
    with pytest.raises(ValidationException):
        await repo.aggregate("articles", "tags", 0)
