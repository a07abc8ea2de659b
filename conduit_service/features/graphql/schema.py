"""GraphQL schema: article queries with Relay cursor pagination."""

from __future__ import annotations

import logging
from typing import Annotated

import strawberry
from strawberry.types import Info

from conduit_service.core.pagination import Direction, PageRequest
from conduit_service.core.settings import get_pagination_settings
from conduit_service.features.graphql.context import GraphQLContext
from conduit_service.features.graphql.types import (
    ArticleConnection,
    ArticleType,
    CreateArticleInput,
    UpdateArticleInput,
)

logger = logging.getLogger(__name__)

FirstArg = Annotated[
    int | None,
    strawberry.argument(description="Number of items to return (forward pagination)"),
]
AfterArg = Annotated[
    str | None,
    strawberry.argument(description="Cursor to start after (forward pagination)"),
]
LastArg = Annotated[
    int | None,
    strawberry.argument(description="Number of items to return (backward pagination)"),
]
BeforeArg = Annotated[
    str | None,
    strawberry.argument(description="Cursor to end before (backward pagination)"),
]


def page_request_from_connection_args(
    first: int | None = None,
    after: str | None = None,
    last: int | None = None,
    before: str | None = None,
) -> PageRequest:
    """Map Relay connection arguments onto a page request.

    ``first`` selects forward paging from ``after``; otherwise ``last``
    selects backward paging from ``before``. With neither, the first page
    is returned forward at the default size.
    """
    if first is None and last is not None:
        return PageRequest.of(cursor=before, limit=last, direction=Direction.PREV)
    if last is not None or before is not None:
        logger.debug(
            "Ignoring backward connection arguments alongside forward ones",
            extra={"first": first, "last": last, "has_before": before is not None},
        )
    return PageRequest.of(cursor=after, limit=first, direction=Direction.NEXT)


@strawberry.type
class Query:
    @strawberry.field(description="List articles with cursor pagination, newest first")
    def articles(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
        with_tag: Annotated[
            str | None, strawberry.argument(description="Only articles with this tag")
        ] = None,
        authored_by: Annotated[
            str | None, strawberry.argument(description="Only articles by this author")
        ] = None,
    ) -> ArticleConnection:
        """List articles with Relay-style cursor pagination."""
        service = info.context.articles
        request = page_request_from_connection_args(first, after, last, before)
        page = service.list_articles(request, tag=with_tag, author=authored_by)

        total_count = None
        if get_pagination_settings().include_total_count:
            total_count = service.count_articles(tag=with_tag, author=authored_by)

        return ArticleConnection.from_page(page, total_count)

    @strawberry.field(description="Get a single article by slug")
    def article(self, info: Info[GraphQLContext, None], slug: str) -> ArticleType:
        return ArticleType.from_article(info.context.articles.get_article(slug))


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Publish an article")
    def create_article(
        self, info: Info[GraphQLContext, None], input: CreateArticleInput
    ) -> ArticleType:
        article = info.context.articles.create_article(
            title=input.title,
            description=input.description,
            body=input.body,
            author=input.author,
            tag_list=input.tag_list,
        )
        return ArticleType.from_article(article)

    @strawberry.mutation(description="Change an article; a new title changes its slug")
    def update_article(
        self, info: Info[GraphQLContext, None], slug: str, changes: UpdateArticleInput
    ) -> ArticleType:
        article = info.context.articles.update_article(
            slug,
            title=changes.title,
            description=changes.description,
            body=changes.body,
        )
        return ArticleType.from_article(article)

    @strawberry.mutation(description="Delete an article; true once it is gone")
    def delete_article(self, info: Info[GraphQLContext, None], slug: str) -> bool:
        info.context.articles.delete_article(slug)
        return True


schema = strawberry.Schema(query=Query, mutation=Mutation)

__all__ = ["Mutation", "Query", "page_request_from_connection_args", "schema"]
