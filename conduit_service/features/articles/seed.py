"""Demo articles for local development."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from uuid import UUID

from conduit_service.features.articles.models import Article

_TOPICS = [
    ("How to train your dragon", ("dragons", "training")),
    ("Building cursor pagination", ("python", "api")),
    ("Why keyset beats offset", ("databases", "api")),
    ("A field guide to GraphQL connections", ("graphql", "api")),
    ("Writing FastAPI dependencies", ("python", "fastapi")),
    ("Notes on immutable value objects", ("python", "design")),
]
_AUTHORS = ("jake", "johnjacob", "celeb_101")


def demo_articles(count: int = 30) -> list[Article]:
    """Deterministic demo articles, one hour apart, oldest first."""
    base = datetime(2025, 1, 1, 9, 0, tzinfo=UTC)
    articles = []
    for index in range(count):
        title, tags = _TOPICS[index % len(_TOPICS)]
        articles.append(
            Article(
                title=f"{title} (part {index + 1})",
                description=f"Part {index + 1} of the {title.lower()} series",
                body=f"Body of part {index + 1}.",
                author=_AUTHORS[index % len(_AUTHORS)],
                tag_list=tags,
                id=UUID(int=index + 1),
                created_at=base + timedelta(hours=index),
                favorites_count=index % 7,
            )
        )
    return articles
