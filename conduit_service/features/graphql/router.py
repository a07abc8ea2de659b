"""GraphQL router for FastAPI integration.

Provides the GraphQL endpoint (mounted at the configured path by
app/router.py) with an optional in-browser IDE.
"""

from __future__ import annotations

from typing import Annotated, Any, cast

from fastapi import APIRouter, BackgroundTasks, Depends, Request, Response
from strawberry.fastapi import GraphQLRouter

from conduit_service.core.settings import get_graphql_settings
from conduit_service.features.articles.dependencies import get_article_service
from conduit_service.features.articles.service import ArticleService
from conduit_service.features.graphql.context import GraphQLContext
from conduit_service.features.graphql.schema import schema


async def get_graphql_context(
    request: Request,
    response: Response,
    background_tasks: BackgroundTasks,
    articles: Annotated[ArticleService, Depends(get_article_service)],
) -> GraphQLContext:
    """Create GraphQL context from FastAPI dependencies."""
    return GraphQLContext(
        articles=articles,
        request=request,
        response=response,
        background_tasks=background_tasks,
        request_id=getattr(request.state, "request_id", None),
    )


def create_graphql_router() -> APIRouter:
    """Create GraphQL router with settings-based configuration."""
    settings = get_graphql_settings()
    graphql_app = GraphQLRouter(
        schema,
        context_getter=cast("Any", get_graphql_context),
        graphql_ide=settings.graphql_ide or None,
        path="/",  # mounted prefix adds the actual path
    )

    router = APIRouter()
    router.include_router(graphql_app, prefix="")
    return router


__all__ = ["create_graphql_router", "get_graphql_context"]
