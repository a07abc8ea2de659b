"""In-memory article storage.

``ArticleRepository`` is the storage side of cursor pagination. Given a
``PageRequest`` it decodes the cursor into an ordering key, filters to the
rows strictly after (NEXT) or before (PREV) that key, and returns at most
``request.effective_fetch_size()`` rows ordered in the travel direction.
Trimming and page metadata are left to ``CursorPager``.

Canonical order is newest first: ``(created_at, id)`` descending.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from threading import RLock

from conduit_service.core.exceptions import (
    ConflictException,
    InvalidCursorException,
    NotFoundException,
)
from conduit_service.core.pagination import CursorCodec, PageRequest
from conduit_service.features.articles.models import Article

logger = logging.getLogger(__name__)

SortKey = tuple[datetime, str]


class ArticleRepository:
    """Thread-safe in-memory article store.

    Args:
        articles: Initial articles.
        strict_cursors: Raise ``InvalidCursorException`` for cursors that
            cannot be decoded. When False such cursors are ignored and the
            listing restarts from the beginning (or end) of the sequence.
    """

    def __init__(
        self,
        articles: Iterable[Article] = (),
        *,
        strict_cursors: bool = True,
    ) -> None:
        self._articles: dict[str, Article] = {}
        self._lock = RLock()
        self.strict_cursors = strict_cursors
        for article in articles:
            self.add(article)

    def add(self, article: Article) -> Article:
        """Store a new article.

        Raises:
            ConflictException: If the slug is already taken.
        """
        with self._lock:
            if article.slug in self._articles:
                raise _conflict(article.slug)
            self._articles[article.slug] = article
        return article

    def replace(self, slug: str, article: Article) -> Article:
        """Swap the article stored under ``slug`` for ``article``.

        The slug may change along with the title.

        Raises:
            NotFoundException: If nothing is stored under ``slug``.
            ConflictException: If the new slug belongs to another article.
        """
        with self._lock:
            if slug not in self._articles:
                raise _not_found(slug)
            if article.slug != slug and article.slug in self._articles:
                raise _conflict(article.slug)
            del self._articles[slug]
            self._articles[article.slug] = article
        return article

    def remove(self, slug: str) -> Article:
        """Delete and return the article stored under ``slug``.

        Raises:
            NotFoundException: If nothing is stored under ``slug``.
        """
        with self._lock:
            article = self._articles.pop(slug, None)
        if article is None:
            raise _not_found(slug)
        return article

    def get_by_slug(self, slug: str) -> Article | None:
        return self._articles.get(slug)

    def count(self, *, tag: str | None = None, author: str | None = None) -> int:
        """Number of articles matching the filters."""
        return len(self._filtered(tag, author))

    def resolve_request(self, request: PageRequest) -> PageRequest:
        """Return the request a window will actually be served for.

        A lenient repository drops a cursor it cannot decode and serves the
        first page instead, so the returned request carries no cursor and
        page flags computed from it describe the rows returned.

        Raises:
            InvalidCursorException: If the cursor cannot be decoded and
                ``strict_cursors`` is set.
        """
        if request.cursor and self._decode_cursor(request.cursor) is None:
            return PageRequest.of(limit=request.limit, direction=request.direction)
        return request

    def find_window(
        self,
        request: PageRequest,
        *,
        tag: str | None = None,
        author: str | None = None,
    ) -> list[Article]:
        """Fetch up to ``request.effective_fetch_size()`` articles past the cursor.

        Args:
            request: Normalized page request
            tag: Only articles carrying this tag
            author: Only articles by this author

        Returns:
            Articles ordered in the request's direction: newest first for
            NEXT, oldest first for PREV.

        Raises:
            InvalidCursorException: If the cursor cannot be decoded and
                ``strict_cursors`` is set.
        """
        position = self._decode_cursor(request.cursor)
        rows = sorted(self._filtered(tag, author), key=_sort_key, reverse=True)
        forward = request.is_forward()

        if position is not None:
            if forward:
                rows = [row for row in rows if row.sort_key < position]
            else:
                rows = [row for row in rows if row.sort_key > position]

        if not forward:
            rows.reverse()

        return rows[: request.effective_fetch_size()]

    def _filtered(self, tag: str | None, author: str | None) -> list[Article]:
        with self._lock:
            rows = list(self._articles.values())
        if tag is not None:
            rows = [row for row in rows if tag in row.tag_list]
        if author is not None:
            rows = [row for row in rows if row.author == author]
        return rows

    def _decode_cursor(self, cursor: str) -> SortKey | None:
        if not cursor:
            return None
        try:
            values = CursorCodec.decode(cursor).values
            created_at = datetime.fromisoformat(values["created_at"])
            article_id = str(values["id"])
        except (KeyError, TypeError, ValueError) as e:
            if self.strict_cursors:
                raise InvalidCursorException(cursor=cursor) from e
            logger.warning(
                "Ignoring undecodable pagination cursor",
                extra={"cursor": cursor, "error": str(e)},
            )
            return None
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=UTC)
        return (created_at, article_id)


def _sort_key(article: Article) -> SortKey:
    return article.sort_key


def _conflict(slug: str) -> ConflictException:
    return ConflictException(
        detail=f"Article with slug '{slug}' already exists",
        type="article-exists",
        extra={"slug": slug},
    )


def _not_found(slug: str) -> NotFoundException:
    return NotFoundException(
        detail=f"Article with slug '{slug}' not found",
        type="article-not-found",
        extra={"slug": slug},
    )
