"""Strawberry types for the GraphQL schema."""

from __future__ import annotations

from datetime import datetime

import strawberry

from conduit_service.core.pagination import Page
from conduit_service.features.articles.models import Article, article_cursor


@strawberry.type(description="Pagination metadata following GraphQL Relay specification")
class PageInfoType:
    """GraphQL Relay PageInfo for cursor-based pagination.

    Mirrors conduit_service.core.pagination.schemas.PageInfo.
    """

    has_previous_page: bool = strawberry.field(description="Whether previous items exist")
    has_next_page: bool = strawberry.field(description="Whether more items exist")
    start_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the first item",
    )
    end_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the last item",
    )
    total_count: int | None = strawberry.field(
        default=None,
        description="Total count (optional)",
    )


@strawberry.type(name="Article", description="A published article")
class ArticleType:
    slug: str
    title: str
    description: str
    body: str
    tag_list: list[str]
    author: str
    favorites_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_article(cls, article: Article) -> ArticleType:
        return cls(
            slug=article.slug,
            title=article.title,
            description=article.description,
            body=article.body,
            tag_list=list(article.tag_list),
            author=article.author,
            favorites_count=article.favorites_count,
            created_at=article.created_at,
            updated_at=article.updated_at or article.created_at,
        )


@strawberry.input(description="Fields of a new article")
class CreateArticleInput:
    title: str
    description: str
    body: str
    author: str
    tag_list: list[str] = strawberry.field(default_factory=list)


@strawberry.input(description="Article fields to change; omitted fields are kept")
class UpdateArticleInput:
    title: str | None = None
    description: str | None = None
    body: str | None = None


@strawberry.type(name="ArticleEdge", description="Edge containing an Article node and cursor")
class ArticleEdge:
    node: ArticleType = strawberry.field(description="The article")
    cursor: str = strawberry.field(description="Opaque cursor for this edge")


@strawberry.type(
    name="ArticleConnection",
    description="Relay connection for articles with cursor-based pagination",
)
class ArticleConnection:
    edges: list[ArticleEdge] = strawberry.field(
        description="List of edges containing nodes and their cursors"
    )
    page_info: PageInfoType = strawberry.field(
        description="Pagination information including hasNextPage, hasPreviousPage, etc."
    )

    @classmethod
    def from_page(cls, page: Page[Article], total_count: int | None = None) -> ArticleConnection:
        connection = page.to_connection(article_cursor, total_count)
        info = connection.page_info
        return cls(
            edges=[
                ArticleEdge(node=ArticleType.from_article(edge.node), cursor=edge.cursor)
                for edge in connection.edges
            ],
            page_info=PageInfoType(
                has_previous_page=info.has_previous_page,
                has_next_page=info.has_next_page,
                start_cursor=info.start_cursor,
                end_cursor=info.end_cursor,
                total_count=info.total_count,
            ),
        )


__all__ = [
    "ArticleConnection",
    "ArticleEdge",
    "ArticleType",
    "CreateArticleInput",
    "PageInfoType",
    "UpdateArticleInput",
]
