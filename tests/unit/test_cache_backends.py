"""Cache backend tests: in-process map, Redis backend with a mocked client, keys."""

import json
from unittest.mock import AsyncMock

import pytest
import redis.asyncio as redis

from tagcloud.domain.exceptions import ValidationException
from tagcloud.infrastructure.cache import MemoryCacheBackend, RedisCacheBackend, tagcloud_key


class TestTagcloudKey:
    def test_format(self) -> None:
        assert tagcloud_key("articles") == "tagcloud_articles"

    def test_empty_category_rejected(self) -> None:
        with pytest.raises(ValidationException):
            tagcloud_key("")


class TestMemoryCacheBackend:
    async def test_save_fetch_contains_delete(self) -> None:
        cache = MemoryCacheBackend()
        assert await cache.contains("k") is False
        assert await cache.fetch("k") is None
        assert await cache.save("k", {"taxonomy": "tags", "tags": {}}) is True
        assert await cache.contains("k") is True
        assert await cache.fetch("k") == {"taxonomy": "tags", "tags": {}}
        assert await cache.delete("k") is True
        assert await cache.delete("k") is False
        assert cache.keys() == []

    async def test_clear(self) -> None:
        cache = MemoryCacheBackend()
        await cache.save("a", 1)
        await cache.save("b", 2)
        cache.clear()
        assert cache.keys() == []


@pytest.fixture
def redis_client() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def redis_cache(redis_client: AsyncMock) -> RedisCacheBackend:
    return RedisCacheBackend(redis_client=redis_client)


class TestRedisCacheBackend:
    async def test_injected_client_is_available(self, redis_cache: RedisCacheBackend) -> None:
        assert redis_cache.is_available() is True

    async def test_contains_uses_exists(
        self, redis_cache: RedisCacheBackend, redis_client: AsyncMock
    ) -> None:
        redis_client.exists.return_value = 1
        assert await redis_cache.contains("tagcloud_articles") is True
        redis_client.exists.assert_awaited_once_with("tagcloud_articles")

    async def test_fetch_deserializes_json(
        self, redis_cache: RedisCacheBackend, redis_client: AsyncMock
    ) -> None:
        redis_client.get.return_value = json.dumps({"taxonomy": "tags", "tags": {"php": 1}})
        assert await redis_cache.fetch("k") == {"taxonomy": "tags", "tags": {"php": 1}}

    async def test_fetch_undecodable_value_is_miss(
        self, redis_cache: RedisCacheBackend, redis_client: AsyncMock
    ) -> None:
        redis_client.get.return_value = "not json"
        assert await redis_cache.fetch("tagcloud_articles") is None

    async def test_fetch_miss(self, redis_cache: RedisCacheBackend, redis_client: AsyncMock) -> None:
        redis_client.get.return_value = None
        assert await redis_cache.fetch("k") is None

    async def test_save_without_ttl(
        self, redis_cache: RedisCacheBackend, redis_client: AsyncMock
    ) -> None:
        assert await redis_cache.save("k", {"taxonomy": "tags", "tags": {}}) is True
        redis_client.set.assert_awaited_once_with("k", '{"taxonomy": "tags", "tags": {}}')
        redis_client.setex.assert_not_called()

    async def test_delete(self, redis_cache: RedisCacheBackend, redis_client: AsyncMock) -> None:
        redis_client.delete.return_value = 1
        assert await redis_cache.delete("k") is True
        redis_client.delete.return_value = 0
        assert await redis_cache.delete("k") is False

    async def test_errors_degrade_to_miss(
        self, redis_cache: RedisCacheBackend, redis_client: AsyncMock
    ) -> None:
        redis_client.exists.side_effect = redis.ConnectionError("down")
        redis_client.get.side_effect = redis.ConnectionError("down")
        redis_client.set.side_effect = redis.ConnectionError("down")
        assert await redis_cache.contains("k") is False
        assert await redis_cache.fetch("k") is None
        assert await redis_cache.save("k", {}) is False

    async def test_unconnected_backend_is_noop(self) -> None:
        cache = RedisCacheBackend()
        assert cache.is_available() is False
        assert await cache.contains("k") is False
        assert await cache.fetch("k") is None
        assert await cache.save("k", {}) is False
        assert await cache.delete("k") is False

    async def test_disconnect_closes_client(
        self, redis_cache: RedisCacheBackend, redis_client: AsyncMock
    ) -> None:
        await redis_cache.disconnect()
        redis_client.close.assert_awaited_once()
        assert redis_cache.is_available() is False
