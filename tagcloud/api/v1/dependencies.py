"""Presentation-layer dependencies.

Routes get the process-wide tag cloud services built in the lifespan
(app.state.services); no service is constructed per request.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from tagcloud.application.services import CloudStore, TagCloudTemplateFunctions
from tagcloud.core.composition import TagCloudServices


def get_services(request: Request) -> TagCloudServices:
    """Return wired services; 503 when startup has not completed."""
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise HTTPException(status_code=503, detail="Tag cloud services not initialized")
    return services


def get_cloud_store(
    services: Annotated[TagCloudServices, Depends(get_services)],
) -> CloudStore:
    return services.store


def get_template_functions(
    services: Annotated[TagCloudServices, Depends(get_services)],
) -> TagCloudTemplateFunctions:
    return services.templates
