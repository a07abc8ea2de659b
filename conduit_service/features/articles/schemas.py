"""API schemas for the articles feature."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from conduit_service.core.pagination import CursorPage
from conduit_service.features.articles.models import Article


class ArticleCreate(BaseModel):
    """Payload for publishing an article."""

    title: str = Field(max_length=200)
    description: str = Field(max_length=500)
    body: str
    author: str = Field(max_length=100, description="Author username")
    tag_list: list[str] = Field(default_factory=list)


class ArticleUpdate(BaseModel):
    """Payload for editing an article; omitted fields are left unchanged."""

    title: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=500)
    body: str | None = None


class ArticleResponse(BaseModel):
    """Article as returned by the REST API."""

    slug: str = Field(description="URL-safe identifier")
    title: str
    description: str
    body: str
    tag_list: list[str] = Field(default_factory=list)
    author: str = Field(description="Author username")
    favorites_count: int = Field(default=0, ge=0)
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_article(cls, article: Article) -> ArticleResponse:
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


ArticleCursorPage = CursorPage[ArticleResponse]

__all__ = ["ArticleCreate", "ArticleCursorPage", "ArticleResponse", "ArticleUpdate"]
