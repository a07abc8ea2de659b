"""FastAPI dependencies for the articles feature."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from conduit_service.core.settings import get_app_settings, get_pagination_settings
from conduit_service.features.articles.repository import ArticleRepository
from conduit_service.features.articles.seed import demo_articles
from conduit_service.features.articles.service import ArticleService

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_article_repository() -> ArticleRepository:
    """Process-wide article store, seeded when APP_SEED_DEMO_DATA is on."""
    articles = demo_articles() if get_app_settings().seed_demo_data else []
    repository = ArticleRepository(
        articles,
        strict_cursors=get_pagination_settings().strict_cursors,
    )
    logger.info("Article repository ready", extra={"article_count": len(articles)})
    return repository


def get_article_service(
    repository: Annotated[ArticleRepository, Depends(get_article_repository)],
) -> ArticleService:
    return ArticleService(repository)


ArticleServiceDep = Annotated[ArticleService, Depends(get_article_service)]
