"""Cache backend protocol used by the cloud store (DIP)."""

from typing import Any, Protocol


class CacheProtocol(Protocol):
    """Protocol for cache backends (in-process dict, Redis). No TTL, no size bound."""

    async def contains(self, key: str) -> bool:
        """Return True if key is cached."""
        ...

    async def fetch(self, key: str) -> Any:
        """Return cached value or None."""
        ...

    async def save(self, key: str, value: Any) -> bool:
        """Store value under key. Returns True on success."""
        ...

    async def delete(self, key: str) -> bool:
        """Remove key. Returns True if a value was removed."""
        ...
