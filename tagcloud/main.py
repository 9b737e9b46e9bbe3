"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, routers. No business logic
here. See tagcloud.core.lifespan and tagcloud.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
optionally clear get_settings cache) before calling create_app().
"""

from fastapi import FastAPI

from tagcloud.api.v1 import api_router
from tagcloud.core.composition import TagCloudServices
from tagcloud.core.config import get_settings
from tagcloud.core.exception_handlers import register_exception_handlers
from tagcloud.core.lifespan import create_lifespan
from tagcloud.shared.telemetry import setup_logging


def create_app(services: TagCloudServices | None = None) -> FastAPI:
    """Build and return the FastAPI application.

    Args:
        services: Prebuilt services (tests); when None the lifespan builds them.
    """
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    app.state.services = services

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()
