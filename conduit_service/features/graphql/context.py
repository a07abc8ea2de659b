"""GraphQL context for request-scoped dependencies.

Following Strawberry's FastAPI integration pattern:
https://strawberry.rocks/docs/integrations/fastapi#context_getter
"""

from __future__ import annotations

from dataclasses import dataclass

from starlette.background import BackgroundTasks
from starlette.requests import Request
from starlette.responses import Response
from starlette.websockets import WebSocket
from strawberry.fastapi import BaseContext

from conduit_service.features.articles.service import ArticleService


@dataclass
class GraphQLContext(BaseContext):
    """Request context for GraphQL operations.

    Standard fields (per Strawberry docs): request, response,
    background_tasks. Custom fields: the article service and the request
    id used for log correlation.

    Example usage in resolver:
        @strawberry.field
        def article(self, info: Info[GraphQLContext, None], slug: str) -> ArticleType:
            return ArticleType.from_article(info.context.articles.get_article(slug))
    """

    articles: ArticleService
    request: Request | WebSocket | None = None
    response: Response | None = None
    background_tasks: BackgroundTasks | None = None
    request_id: str | None = None
