"""Article domain model."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

from conduit_service.core.pagination import CursorCodec

# Ordering key for every article listing: newest first, id breaks ties.
SORT_FIELDS = ["created_at", "id"]

_SLUG_STRIP = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """Turn a title into a URL slug ("How to train" -> "how-to-train")."""
    return _SLUG_STRIP.sub("-", title.lower()).strip("-")


@dataclass(frozen=True, slots=True)
class Article:
    """A published article.

    ``created_at`` plus ``id`` form a total order over articles and are
    what cursors encode.
    """

    title: str
    description: str
    body: str
    author: str
    tag_list: tuple[str, ...] = ()
    slug: str = ""
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None
    favorites_count: int = 0

    def __post_init__(self) -> None:
        if not self.slug:
            object.__setattr__(self, "slug", slugify(self.title))
        if self.updated_at is None:
            object.__setattr__(self, "updated_at", self.created_at)

    @property
    def sort_key(self) -> tuple[datetime, str]:
        return (self.created_at, str(self.id))

    @property
    def cursor(self) -> str:
        """Opaque cursor pointing at this article."""
        return article_cursor(self)


def article_cursor(article: Article) -> str:
    """Encode the ordering key of an article as an opaque cursor."""
    return CursorCodec.create_cursor(article, SORT_FIELDS)
