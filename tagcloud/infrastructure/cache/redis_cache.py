"""Redis cache backend for tag clouds.

Values are stored as JSON without TTL; entries live until the cloud store
invalidates them or Redis evicts them. When Redis is unreachable the
backend degrades to always-miss so clouds are rebuilt from the store.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import redis.asyncio as redis

from tagcloud.core.config import get_settings

logger = logging.getLogger(__name__)


class RedisCacheBackend:
    """Async Redis backend implementing CacheProtocol.

    Uses tagcloud.core.config for connection settings. Call connect() at
    startup and disconnect() at shutdown.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize cache backend.

        Args:
            redis_client: Optional Redis client for testing or DI.
        """
        self.redis = redis_client
        self.settings = get_settings()
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if self.redis is None:
            try:
                self.redis = redis.Redis(
                    host=self.settings.redis_host,
                    port=self.settings.redis_port,
                    db=self.settings.redis_db,
                    password=self.settings.redis_password.get_secret_value() if self.settings.redis_password else None,
                    decode_responses=True,
                    socket_connect_timeout=5,
                    socket_keepalive=True,
                )
                await self.redis.ping()
                self._connected = True
                logger.info(
                    "Redis cache connected: %s:%s",
                    self.settings.redis_host,
                    self.settings.redis_port,
                )
            except (redis.ConnectionError, redis.TimeoutError) as e:
                logger.warning(
                    "Redis connection failed: %s. Cache disabled.",
                    e,
                )
                self._connected = False
                self.redis = None

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            await self.redis.close()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def contains(self, key: str) -> bool:
        """Return True if key exists; False when missing or Redis is unavailable."""
        if not self.is_available() or self.redis is None:
            return False
        try:
            return bool(await self.redis.exists(key))
        except redis.RedisError:
            logger.exception("Cache exists error for key %s", key)
            return False

    async def fetch(self, key: str) -> Any | None:
        """Return cached value (JSON-deserialized) or None if missing/unavailable."""
        if not self.is_available() or self.redis is None:
            return None
        try:
            value = await self.redis.get(key)
        except redis.RedisError:
            logger.exception("Cache get error for key %s", key)
            return None
        if value is None:
            logger.debug("Cache MISS: %s", key)
            return None
        try:
            decoded = json.loads(value)
        except (json.JSONDecodeError, TypeError):
            logger.warning("Cache value for key %s is not JSON; treating as miss", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return decoded

    async def save(self, key: str, value: Any) -> bool:
        """Store value (JSON-serializable) without expiry. Returns True on success."""
        if not self.is_available() or self.redis is None:
            return False
        try:
            await self.redis.set(key, json.dumps(value))
            logger.debug("Cache SET: %s", key)
            return True
        except redis.RedisError:
            logger.exception("Cache set error for key %s", key)
            return False

    async def delete(self, key: str) -> bool:
        """Remove key from cache. Returns True if a key was deleted."""
        if not self.is_available() or self.redis is None:
            return False
        try:
            deleted = await self.redis.delete(key)
            logger.debug("Cache DELETE: %s", key)
            return bool(deleted)
        except redis.RedisError:
            logger.exception("Cache delete error for key %s", key)
            return False
