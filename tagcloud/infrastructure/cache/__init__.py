"""Cache: backends for rendered-cloud storage and cache key utilities.

MemoryCacheBackend is the default; RedisCacheBackend uses
tagcloud.core.config. Key format is in keys.py (DRY).
"""

from tagcloud.infrastructure.cache.cache_protocol import CacheProtocol
from tagcloud.infrastructure.cache.keys import tagcloud_key
from tagcloud.infrastructure.cache.memory_cache import MemoryCacheBackend
from tagcloud.infrastructure.cache.redis_cache import RedisCacheBackend

__all__ = [
    "CacheProtocol",
    "MemoryCacheBackend",
    "RedisCacheBackend",
    "tagcloud_key",
]
