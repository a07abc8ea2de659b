"""Router registration."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from conduit_service.core.settings.app import AppSettings
from conduit_service.core.settings.graphql import GraphQLSettings
from conduit_service.features.articles.router import router as articles_router

logger = logging.getLogger(__name__)


def setup_routers(
    app: FastAPI,
    app_settings: AppSettings,
    graphql_settings: GraphQLSettings,
) -> None:
    """Mount REST routers under the API prefix and GraphQL at its path."""
    app.include_router(articles_router, prefix=app_settings.api_prefix)

    if graphql_settings.enabled:
        from conduit_service.features.graphql.router import create_graphql_router

        app.include_router(
            create_graphql_router(),
            prefix=graphql_settings.path,
            tags=["graphql"],
        )
        logger.debug("GraphQL endpoint mounted", extra={"path": graphql_settings.path})
