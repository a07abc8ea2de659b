"""Pytest configuration and shared fixtures.

Organization:
    - Settings Fixtures: environment and settings cache handling
    - Article Fixtures: in-memory repository and service with demo data
    - Application Fixtures: FastAPI app and HTTP client
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator, Iterator

import pytest
from httpx import ASGITransport, AsyncClient

# Keep tests hermetic: no file logging, no demo seeding in the global store
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("APP_SEED_DEMO_DATA", "false")
os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("GRAPHQL_ENABLED", "true")

from conduit_service.core.settings import clear_all_caches  # noqa: E402
from conduit_service.features.articles.models import Article  # noqa: E402
from conduit_service.features.articles.repository import ArticleRepository  # noqa: E402
from conduit_service.features.articles.seed import demo_articles  # noqa: E402
from conduit_service.features.articles.service import ArticleService  # noqa: E402


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def clean_settings() -> Iterator[None]:
    """Clear settings caches before and after a test that changes env vars."""
    clear_all_caches()
    yield
    clear_all_caches()


# ============================================================================
# Article Fixtures
# ============================================================================


@pytest.fixture
def articles() -> list[Article]:
    """Thirty demo articles, oldest first, one hour apart."""
    return demo_articles(30)


@pytest.fixture
def article_repository(articles: list[Article]) -> ArticleRepository:
    """Strict in-memory repository seeded with the demo articles."""
    return ArticleRepository(articles, strict_cursors=True)


@pytest.fixture
def article_service(article_repository: ArticleRepository) -> ArticleService:
    return ArticleService(article_repository)


@pytest.fixture
def newest_first(articles: list[Article]) -> list[Article]:
    """Demo articles in canonical listing order."""
    return sorted(articles, key=lambda a: a.sort_key, reverse=True)


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def app(article_repository: ArticleRepository, clean_settings: None):
    """Fresh FastAPI app whose article store is the seeded test repository."""
    from conduit_service.app.main import create_app
    from conduit_service.features.articles.dependencies import get_article_repository

    application = create_app()
    application.dependency_overrides[get_article_repository] = lambda: article_repository
    return application


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client bound to the app through ASGITransport."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
