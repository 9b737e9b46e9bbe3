"""Template functions exposing tag clouds to a templating layer.

register() installs them on a Jinja2 environment created with
enable_async=True; Jinja awaits the coroutine-returning globals itself:

    {% if has_tag_cloud('articles') %}{{ tag_cloud_list('articles') }}{% endif %}
    {{ tag_cloud_raw(page | content_category, {'class': 'tag'}) }}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jinja2 import Environment
from markupsafe import Markup

from tagcloud.application.services.cloud_builder import CloudBuilder
from tagcloud.application.services.cloud_renderer import CloudRenderer
from tagcloud.application.services.cloud_store import CloudStore
from tagcloud.domain.enums import ViewMode
from tagcloud.domain.value_objects import Attributes, RenderOptions


class TagCloudTemplateFunctions:
    """has_cloud / render / render_raw / render_list for templates."""

    def __init__(self, builder: CloudBuilder, store: CloudStore, renderer: CloudRenderer) -> None:
        self.builder = builder
        self.store = store
        self.renderer = renderer

    def has_cloud(self, category: str | None) -> bool:
        """Return True when category has a tag taxonomy (the cloud is not built)."""
        return self.builder.get_tags_taxonomy(category) is not None

    async def render(
        self,
        category: str | None,
        options: RenderOptions | Mapping[str, Any] | None = None,
    ) -> Markup | None:
        """Render the cloud of category; None when it has no tag taxonomy.

        Raises:
            UnsupportedViewModeException: If the view option is unknown.
            AggregationFailedException: If the cloud had to be built and failed.
        """
        if not isinstance(options, RenderOptions):
            options = RenderOptions.from_mapping(options)
        cloud = await self.store.fetch(category)
        html = self.renderer.render(cloud, options)
        return Markup(html) if html is not None else None

    async def render_raw(
        self,
        category: str | None,
        link_options: Attributes | None = None,
        marker: str | None = None,
    ) -> Markup | None:
        """Render the cloud of category as bare links."""
        return await self.render(
            category,
            {"view": ViewMode.RAW, "link_options": link_options, "marker": marker},
        )

    async def render_list(
        self,
        category: str | None,
        link_options: Attributes | None = None,
        marker: str | None = None,
        list_options: Attributes | None = None,
    ) -> Markup | None:
        """Render the cloud of category as an unordered list."""
        return await self.render(
            category,
            {
                "view": ViewMode.LIST,
                "link_options": link_options,
                "marker": marker,
                "list_options": list_options,
            },
        )

    @staticmethod
    def content_category(content: Any) -> str | None:
        """Return the category slug of a content item (object or mapping), or None."""
        if content is None:
            return None
        if isinstance(content, Mapping):
            contenttype = content.get("contenttype")
        else:
            contenttype = getattr(content, "contenttype", None)
        if isinstance(contenttype, Mapping):
            return contenttype.get("slug")
        if isinstance(contenttype, str):
            return contenttype
        return None

    def register(self, env: Environment) -> None:
        """Install globals and the content_category filter on env."""
        env.globals.update(
            has_tag_cloud=self.has_cloud,
            tag_cloud=self.render,
            tag_cloud_raw=self.render_raw,
            tag_cloud_list=self.render_list,
        )
        env.filters["content_category"] = self.content_category
