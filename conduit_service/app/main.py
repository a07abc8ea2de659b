"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from conduit_service.app.exception_handlers import configure_exception_handlers
from conduit_service.app.lifespan import lifespan
from conduit_service.app.middleware import RequestIDMiddleware
from conduit_service.app.router import setup_routers
from conduit_service.core.settings import get_settings


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()
    app_settings = settings.app

    app = FastAPI(
        title=app_settings.title,
        description=app_settings.description,
        version=app_settings.version,
        docs_url=app_settings.get_docs_url(),
        redoc_url=None,
        openapi_url=app_settings.get_openapi_url(),
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    # Exception handlers before middleware
    configure_exception_handlers(app)
    app.add_middleware(RequestIDMiddleware)
    setup_routers(app, app_settings, settings.graphql)

    return app


# Application instance for uvicorn
app = create_app()
