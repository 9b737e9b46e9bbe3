"""Tag cloud endpoints: cloud data, rendered HTML fragment, content-saved hook."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import HTMLResponse

from tagcloud.api.v1.dependencies import get_cloud_store, get_template_functions
from tagcloud.application.services import CloudStore, TagCloudTemplateFunctions
from tagcloud.core.constants import DEFAULT_MARKER
from tagcloud.domain.entities import Cloud
from tagcloud.domain.enums import ViewMode
from tagcloud.schemas.tag_cloud import TagCloudResponse

router = APIRouter()


def _not_found(category: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"No tag taxonomy for category: {category}",
    )


@router.get("/{category}", response_model=TagCloudResponse)
async def get_tag_cloud(
    category: str,
    store: Annotated[CloudStore, Depends(get_cloud_store)],
) -> TagCloudResponse:
    """Return the ranked tags of category (cached)."""
    cloud = await store.fetch(category)
    if not isinstance(cloud, Cloud):
        raise _not_found(category)
    return TagCloudResponse.from_cloud(category, cloud)


@router.get("/{category}/html", response_class=HTMLResponse)
async def render_tag_cloud(
    category: str,
    templates: Annotated[TagCloudTemplateFunctions, Depends(get_template_functions)],
    view: Annotated[str, Query(description=f"One of: {', '.join(ViewMode.values())}")] = ViewMode.LIST.value,
    marker: Annotated[str, Query(description="Rank class template")] = DEFAULT_MARKER,
) -> HTMLResponse:
    """Return the cloud of category rendered as an HTML fragment."""
    if not templates.has_cloud(category):
        raise _not_found(category)
    html = await templates.render(category, {"view": view, "marker": marker})
    return HTMLResponse(content=html or "")


@router.post("/{category}/content-saved", status_code=status.HTTP_204_NO_CONTENT)
async def content_saved(
    category: str,
    store: Annotated[CloudStore, Depends(get_cloud_store)],
) -> Response:
    """Signal that content of category was saved; its cached cloud is dropped."""
    await store.on_content_saved(category)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
