"""In-process cache backend (default when Redis is not configured).

Entries live until deleted or the process exits. A lock guards the map
so the backend can be shared by request handlers running in threads as
well as on the event loop.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

logger = logging.getLogger(__name__)


class MemoryCacheBackend:
    """Dict-backed cache implementing CacheProtocol."""

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self._lock = threading.Lock()

    async def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    async def fetch(self, key: str) -> Any | None:
        with self._lock:
            value = self._entries.get(key)
        logger.debug("Cache %s: %s", "HIT" if value is not None else "MISS", key)
        return value

    async def save(self, key: str, value: Any) -> bool:
        with self._lock:
            self._entries[key] = value
        logger.debug("Cache SET: %s", key)
        return True

    async def delete(self, key: str) -> bool:
        with self._lock:
            removed = self._entries.pop(key, None) is not None
        if removed:
            logger.debug("Cache DELETE: %s", key)
        return removed

    def keys(self) -> list[str]:
        """Return cached keys (snapshot)."""
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()
