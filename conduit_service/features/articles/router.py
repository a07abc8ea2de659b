"""API router for the articles feature."""
from __future__ import annotations

from fastapi import APIRouter, status

from conduit_service.core.dependencies.pagination import CursorPagination
from conduit_service.core.settings import get_pagination_settings
from conduit_service.features.articles.dependencies import ArticleServiceDep
from conduit_service.features.articles.schemas import (
    ArticleCreate,
    ArticleCursorPage,
    ArticleResponse,
    ArticleUpdate,
)

router = APIRouter(prefix="/articles", tags=["articles"])


@router.get(
    "",
    response_model=ArticleCursorPage,
    summary="List articles",
    description="List articles newest first with cursor-based pagination.",
)
async def list_articles(
    page_request: CursorPagination,
    service: ArticleServiceDep,
    tag: str | None = None,
    author: str | None = None,
) -> ArticleCursorPage:
    """List articles with cursor-based pagination.

    Args:
        page_request: Normalized cursor, limit and direction
        service: Article service
        tag: Only articles with this tag
        author: Only articles by this author

    Returns:
        CursorPage with items, cursors, and has_more flag
    """
    page = service.list_articles(page_request, tag=tag, author=author)

    total_count = None
    if get_pagination_settings().include_total_count:
        total_count = service.count_articles(tag=tag, author=author)

    return page.map(ArticleResponse.from_article).to_cursor_page(total_count)


@router.get(
    "/{slug}",
    response_model=ArticleResponse,
    summary="Get article",
    description="Fetch a single article by slug.",
)
async def get_article(slug: str, service: ArticleServiceDep) -> ArticleResponse:
    return ArticleResponse.from_article(service.get_article(slug))


@router.post(
    "",
    response_model=ArticleResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create article",
    description="Publish an article. The slug is derived from the title.",
    responses={422: {"description": "Blank field or duplicate title"}},
)
async def create_article(payload: ArticleCreate, service: ArticleServiceDep) -> ArticleResponse:
    article = service.create_article(
        title=payload.title,
        description=payload.description,
        body=payload.body,
        author=payload.author,
        tag_list=payload.tag_list,
    )
    return ArticleResponse.from_article(article)


@router.put(
    "/{slug}",
    response_model=ArticleResponse,
    summary="Update article",
    description="Change title, description or body. A new title changes the slug.",
    responses={404: {"description": "Article not found"}},
)
async def update_article(
    slug: str, payload: ArticleUpdate, service: ArticleServiceDep
) -> ArticleResponse:
    article = service.update_article(
        slug,
        title=payload.title,
        description=payload.description,
        body=payload.body,
    )
    return ArticleResponse.from_article(article)


@router.delete(
    "/{slug}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete article",
    responses={404: {"description": "Article not found"}},
)
async def delete_article(slug: str, service: ArticleServiceDep) -> None:
    service.delete_article(slug)
