"""Pytest configuration and fixtures for tagcloud.

Unit tests use an in-memory tag repository double and the in-process
cache backend. API tests build the FastAPI app with those services
injected. Repository integration tests need Postgres (requires_db).
"""

import asyncio

import pytest
from httpx import ASGITransport, AsyncClient

from tagcloud.core.catalog import ContentCatalog, parse_catalog
from tagcloud.core.composition import TagCloudServices, build_services
from tagcloud.core.config import Settings
from tagcloud.domain.entities import TagCount
from tagcloud.infrastructure.cache import MemoryCacheBackend
from tagcloud.infrastructure.persistence import database

CATALOG_DATA = {
    "contenttypes": {
        "articles": {"taxonomy": ["categories", "tags"]},
        "entries": {"taxonomy": ["keywords", "tags"]},
        "pages": {"taxonomy": ["chapters"]},
        "drafts": {"taxonomy": []},
        "orphans": {"taxonomy": ["undeclared", "tags"]},
        "empty": {"taxonomy": ["tags"]},
    },
    "taxonomy": {
        "tags": {"behaves_like": "tags"},
        "keywords": {"behaves_like": "tags"},
        "categories": {"behaves_like": "categories"},
        "chapters": {"behaves_like": "grouping"},
    },
}


class FakeTagRepository:
    """ITagRepository double: fixed rows per (category, taxonomy), records calls."""

    def __init__(
        self,
        rows: dict[tuple[str, str], list[TagCount]] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.rows = rows or {}
        self.error = error
        self.calls: list[tuple[str, str, int]] = []

    async def aggregate(self, category: str, taxonomy: str, limit: int) -> list[TagCount]:
        self.calls.append((category, taxonomy, limit))
        # yield to the loop so concurrent fetches interleave
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return list(self.rows.get((category, taxonomy), []))[:limit]


@pytest.fixture
def catalog() -> ContentCatalog:
    """Catalog covering ordered, missing, and undeclared taxonomies."""
    return parse_catalog(CATALOG_DATA)


@pytest.fixture
def settings() -> Settings:
    return Settings(tagcloud_size=10, base_url="/", cache_backend="memory")


@pytest.fixture
def tag_repository() -> FakeTagRepository:
    return FakeTagRepository(
        {
            ("articles", "tags"): [
                TagCount("python", 10),
                TagCount("sql", 5),
                TagCount("caching", 1),
            ],
            ("entries", "keywords"): [TagCount("go", 2), TagCount("php", 2)],
        }
    )


@pytest.fixture
def cache() -> MemoryCacheBackend:
    return MemoryCacheBackend()


@pytest.fixture
def services(
    settings: Settings,
    catalog: ContentCatalog,
    tag_repository: FakeTagRepository,
    cache: MemoryCacheBackend,
) -> TagCloudServices:
    return build_services(settings, catalog, tag_repository, cache)


@pytest.fixture
async def client(services: TagCloudServices) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with injected services."""
    from tagcloud.main import create_app

    app = create_app(services)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session_factory():
    """Session factory for repository integration tests. Drops the table after the test.

    Requires DATABASE_URL. Skips (pytest.skip) when no database is configured.
    Use @pytest.mark.requires_db; run without DB via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip("Database not configured: set DATABASE_URL")
    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)
    yield database.AsyncSessionLocal
    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.drop_all)
    await database.dispose_engine()


