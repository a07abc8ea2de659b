"""Application lifespan: logging setup and shutdown."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from conduit_service.core.settings import get_settings
from conduit_service.infra.logging import setup_logging, shutdown

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    setup_logging(settings.logging)
    logger.info(
        "Application starting",
        extra={
            "service": settings.app.service_name,
            "version": settings.app.version,
            "environment": settings.app.environment,
            "graphql_enabled": settings.graphql.enabled,
        },
    )
    try:
        yield
    finally:
        logger.info("Application shutting down")
        shutdown()
