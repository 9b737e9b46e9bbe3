"""Seed taxonomy associations from a JSON file and print the resulting clouds.

Creates the taxonomy table if missing, records each item's tags through
TaxonomyRepository, then builds one cloud per seeded category.

Usage:
    python -m scripts.seed_tags [path/to/seed-tags.json]

JSON shape:
    {"items": [{"category": "articles", "content_id": 1,
                "taxonomy": "tags", "tags": ["php", "go"]}]}

Requires: DATABASE_URL, CATALOG_PATH (defaults to catalog.yml).
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from tagcloud.core.catalog import load_catalog
from tagcloud.core.composition import build_services
from tagcloud.core.config import get_settings
from tagcloud.infrastructure.cache import MemoryCacheBackend
from tagcloud.infrastructure.persistence import database
from tagcloud.infrastructure.persistence.database import Base, get_session_factory
from tagcloud.infrastructure.persistence.repositories import TaxonomyRepository
from tagcloud.shared.telemetry import setup_logging


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run(path: Path) -> None:
    _load_env()
    get_settings.cache_clear()
    settings = get_settings()
    setup_logging(settings)
    data = json.loads(path.read_text(encoding="utf-8"))

    session_factory = get_session_factory()
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    repository = TaxonomyRepository(session_factory)
    categories: list[str] = []
    for item in data.get("items", []):
        written = await repository.record_tags(
            item["category"], int(item["content_id"]), item["taxonomy"], item.get("tags", [])
        )
        print(f"  {item['category']} #{item['content_id']}: {written} {item['taxonomy']}")
        if item["category"] not in categories:
            categories.append(item["category"])

    services = build_services(
        settings, load_catalog(settings.catalog_path), repository, MemoryCacheBackend()
    )
    for category in categories:
        html = services.renderer.render(await services.store.fetch(category))
        print(f"{category}: {html if html is not None else '(no tag taxonomy)'}")

    await database.dispose_engine()
    print("Seed completed.")


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "scripts" / "seed-tags.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
