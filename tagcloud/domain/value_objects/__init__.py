"""Domain value objects: immutable, identity-free types."""

from tagcloud.domain.value_objects.render_options import (
    AttributeValue,
    Attributes,
    RenderOptions,
)

__all__ = ["AttributeValue", "Attributes", "RenderOptions"]
