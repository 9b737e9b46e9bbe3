"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (catalog, cache
backend, tag repository, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from tagcloud.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: when app.state.services is not preset (tests inject it), load
    the content catalog, connect the cache backend and build the services.
    Shutdown: Redis disconnect, SQL engine dispose.
    """
    settings = get_settings()
    redis_backend = None

    # ---- Startup ----
    if getattr(app.state, "services", None) is None:
        from tagcloud.core.catalog import load_catalog
        from tagcloud.core.composition import build_services
        from tagcloud.infrastructure.cache import MemoryCacheBackend, RedisCacheBackend
        from tagcloud.infrastructure.persistence.database import get_session_factory
        from tagcloud.infrastructure.persistence.repositories import TaxonomyRepository

        catalog = load_catalog(settings.catalog_path)
        if settings.cache_backend == "redis":
            redis_backend = RedisCacheBackend()
            await redis_backend.connect()
            cache = redis_backend
        else:
            cache = MemoryCacheBackend()
        repository = TaxonomyRepository(get_session_factory())
        app.state.services = build_services(settings, catalog, repository, cache)
        logger.info(
            "Tag cloud services ready (cache=%s, size=%d)",
            settings.cache_backend,
            settings.tagcloud_size,
        )

    yield

    # ---- Shutdown ----
    if redis_backend is not None:
        await redis_backend.disconnect()
        logger.info("Cache disconnected")

    from tagcloud.infrastructure.persistence import database

    await database.dispose_engine()
