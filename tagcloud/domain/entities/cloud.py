"""Cloud domain entity and the tag usage value it is built from.

A Cloud is immutable: built on a cache miss, cached, read and eventually
invalidated as a whole. NO_TAXONOMY is the result for categories that do
not declare a tag taxonomy; it is distinct from an empty Cloud.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from tagcloud.core.constants import RANK_MAX, RANK_MIN
from tagcloud.domain.exceptions import ValidationException


@dataclass(frozen=True)
class TagCount:
    """Number of content items in a category bearing a tag."""

    tag: str
    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValidationException("Tag count cannot be negative", field="count")


@dataclass(frozen=True)
class Cloud:
    """Rank-annotated tags of a category's tag taxonomy.

    tags preserves aggregation order; every rank is within RANK_MIN..RANK_MAX.
    """

    taxonomy: str
    tags: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))
        self.validate()

    def validate(self) -> None:
        """Validate cloud invariants. Raises ValidationException if invalid."""
        if not self.taxonomy:
            raise ValidationException("Cloud must have a taxonomy", field="taxonomy")
        for tag, rank in self.tags.items():
            if not isinstance(rank, int) or not RANK_MIN <= rank <= RANK_MAX:
                raise ValidationException(
                    f"Rank of tag {tag!r} must be within {RANK_MIN}..{RANK_MAX}, got {rank!r}",
                    field="tags",
                )

    def is_empty(self) -> bool:
        """Return True when the cloud holds no tags."""
        return not self.tags

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON cache backends and API responses."""
        return {"taxonomy": self.taxonomy, "tags": dict(self.tags)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Cloud:
        """Deserialize from to_dict() output."""
        return cls(taxonomy=data["taxonomy"], tags=dict(data.get("tags") or {}))


class NoTaxonomy:
    """Sentinel type: the category has no taxonomy that behaves like tags."""

    _instance: NoTaxonomy | None = None

    def __new__(cls) -> NoTaxonomy:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_TAXONOMY"


NO_TAXONOMY = NoTaxonomy()

CloudResult = Cloud | NoTaxonomy
