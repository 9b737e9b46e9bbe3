"""Cloud renderer: turns a Cloud into link markup.

List view wraps links in <ul>/<li>; raw view emits bare links separated by
single spaces. Each link points to <base_url><taxonomy>/<tag> and carries
a rank class built from the marker template.
"""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import quote

from markupsafe import escape

from tagcloud.core.constants import RANK_PLACEHOLDER
from tagcloud.domain.entities import Cloud, CloudResult
from tagcloud.domain.enums import ViewMode
from tagcloud.domain.exceptions import UnsupportedViewModeException
from tagcloud.domain.value_objects import AttributeValue, Attributes, RenderOptions


def _attribute_value(value: AttributeValue) -> str:
    """Sequences are space-joined; scalars are used as-is, trimmed; None is empty."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (list, tuple, set, frozenset)):
        return " ".join(str(v) for v in value)
    return str(value).strip()


def render_attributes(attributes: Attributes) -> str:
    """Render attributes as ` key="value"` pairs in mapping order."""
    return "".join(
        f' {escape(key)}="{escape(_attribute_value(value))}"'
        for key, value in attributes.items()
    )


def _resolve_view(view: str) -> ViewMode:
    try:
        return ViewMode(view)
    except ValueError:
        raise UnsupportedViewModeException(str(view)) from None


class CloudRenderer:
    """Renders clouds with a fixed base URL for tag links."""

    def __init__(self, base_url: str = "/") -> None:
        self.base_url = base_url

    def tag_url(self, taxonomy: str, tag: str) -> str:
        """Return the link target of tag: base URL, taxonomy, tag (percent-encoded)."""
        return f"{self.base_url}{quote(taxonomy, safe='')}/{quote(tag, safe='')}"

    def render_link(
        self,
        taxonomy: str,
        tag: str,
        rank: int,
        marker: str,
        link_attributes: Attributes | None = None,
    ) -> str:
        """Render one <a> element.

        The rank class (marker with {rank} substituted) is appended to any
        class given in link_attributes; class keeps its position in the
        mapping, or comes last when link_attributes has none.
        """
        attributes: dict[str, AttributeValue] = dict(link_attributes or {})
        base_class = _attribute_value(attributes.get("class") or "")
        rank_class = marker.replace(RANK_PLACEHOLDER, str(rank))
        attributes["class"] = f"{base_class} {rank_class}".strip()
        href = escape(self.tag_url(taxonomy, tag))
        return f'<a href="{href}"{render_attributes(attributes)}>{escape(tag)}</a>'

    def render(
        self,
        cloud: CloudResult | None,
        options: RenderOptions | Mapping | None = None,
    ) -> str | None:
        """Render cloud with options; None when there is no cloud.

        An empty cloud renders as "<ul></ul>" in list view and "" in raw view.

        Raises:
            UnsupportedViewModeException: If options.view is not a known mode.
        """
        if not isinstance(options, RenderOptions):
            options = RenderOptions.from_mapping(options)
        view = _resolve_view(options.view)
        if not isinstance(cloud, Cloud):
            return None

        links = [
            self.render_link(cloud.taxonomy, tag, rank, options.marker, options.link_attributes)
            for tag, rank in cloud.tags.items()
        ]
        if view is ViewMode.RAW:
            return " ".join(links)
        items = "".join(f"<li>{link}</li>" for link in links)
        return f"<ul{render_attributes(options.list_attributes)}>{items}</ul>"
