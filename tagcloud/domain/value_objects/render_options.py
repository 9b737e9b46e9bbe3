"""Rendering options value object.

Immutable per-render options; never persisted. View mode is kept as given
so that an unknown mode is reported by the renderer, not swallowed here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from tagcloud.core.constants import DEFAULT_MARKER
from tagcloud.domain.enums import ViewMode

AttributeValue = str | Sequence[str] | None
Attributes = Mapping[str, AttributeValue]


@dataclass(frozen=True)
class RenderOptions:
    """Options for rendering a cloud.

    Attributes:
        view: View mode ("list" or "raw").
        marker: Class template; "{rank}" is replaced by the tag rank.
        list_attributes: HTML attributes of the <ul> container (list view only).
        link_attributes: HTML attributes of every <a> link.
    """

    view: str = ViewMode.LIST.value
    marker: str = DEFAULT_MARKER
    list_attributes: Attributes = field(default_factory=dict)
    link_attributes: Attributes = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> RenderOptions:
        """Merge template-style options over the defaults.

        Recognized keys: view, marker, list_options, link_options. Missing or
        None values keep the default.
        """
        options = options or {}
        view = options.get("view")
        return cls(
            view=view.value if isinstance(view, ViewMode) else (view or ViewMode.LIST.value),
            marker=options.get("marker") or DEFAULT_MARKER,
            list_attributes=dict(options.get("list_options") or {}),
            link_attributes=dict(options.get("link_options") or {}),
        )
