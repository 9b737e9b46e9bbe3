"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain values only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tagcloud.domain.entities import TagCount


class ITagRepository(Protocol):
    """Protocol for tag usage aggregation over the content store (DIP)."""

    async def aggregate(self, category: str, taxonomy: str, limit: int) -> list[TagCount]:
        """Return tag usage counts for category/taxonomy, at most limit rows.

        Raises AggregationFailedException when the store cannot be queried.
        """
        ...
