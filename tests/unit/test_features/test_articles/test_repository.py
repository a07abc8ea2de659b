"""Unit tests for the in-memory ArticleRepository."""
from __future__ import annotations

import logging
from dataclasses import replace
from datetime import UTC, datetime

import pytest

from conduit_service.core.exceptions import (
    ConflictException,
    InvalidCursorException,
    NotFoundException,
)
from conduit_service.core.pagination import CursorCodec, CursorData, Direction, PageRequest
from conduit_service.features.articles.models import Article, slugify
from conduit_service.features.articles.repository import ArticleRepository


@pytest.mark.unit
class TestArticleModel:
    def test_slug_derived_from_title(self):
        article = Article(title="How to Train: Dragons!", description="", body="", author="jake")

        assert article.slug == "how-to-train-dragons"

    def test_updated_at_defaults_to_created_at(self):
        created = datetime(2025, 1, 1, tzinfo=UTC)
        article = Article(title="t", description="", body="", author="a", created_at=created)

        assert article.updated_at == created

    def test_cursor_encodes_sort_key(self, articles):
        article = articles[0]

        values = CursorCodec.decode(article.cursor).values

        assert values == {"created_at": article.created_at.isoformat(), "id": str(article.id)}

    def test_slugify_collapses_separators(self):
        assert slugify("  A -- B  ") == "a-b"


@pytest.mark.unit
class TestStorage:
    def test_add_and_get(self, article_repository, articles):
        assert article_repository.get_by_slug(articles[3].slug) is articles[3]
        assert article_repository.get_by_slug("missing") is None

    def test_duplicate_slug_conflicts(self, article_repository, articles):
        with pytest.raises(ConflictException) as exc_info:
            article_repository.add(articles[0])

        assert exc_info.value.type == "article-exists"

    def test_count_with_filters(self, article_repository, articles):
        assert article_repository.count() == 30
        assert article_repository.count(author="jake") == sum(a.author == "jake" for a in articles)
        assert article_repository.count(tag="api") == sum("api" in a.tag_list for a in articles)
        assert article_repository.count(tag="nope") == 0

    def test_replace_moves_slug(self, article_repository, articles):
        renamed = replace(articles[0], title="Renamed", slug="renamed")

        article_repository.replace(articles[0].slug, renamed)

        assert article_repository.get_by_slug("renamed") is renamed
        assert article_repository.get_by_slug(articles[0].slug) is None
        assert article_repository.count() == 30

    def test_replace_onto_taken_slug_conflicts(self, article_repository, articles):
        clash = replace(articles[0], slug=articles[1].slug)

        with pytest.raises(ConflictException):
            article_repository.replace(articles[0].slug, clash)

        assert article_repository.get_by_slug(articles[0].slug) is articles[0]

    def test_replace_missing(self, article_repository, articles):
        with pytest.raises(NotFoundException):
            article_repository.replace("missing", articles[0])

    def test_remove(self, article_repository, articles):
        assert article_repository.remove(articles[0].slug) is articles[0]
        assert article_repository.count() == 29

        with pytest.raises(NotFoundException):
            article_repository.remove(articles[0].slug)


@pytest.mark.unit
class TestFindWindow:
    def test_first_page_is_newest_first(self, article_repository, newest_first):
        request = PageRequest.of(limit=5, direction=Direction.NEXT)

        rows = article_repository.find_window(request)

        assert rows == newest_first[:6]

    def test_next_after_cursor(self, article_repository, newest_first):
        cursor = newest_first[4].cursor
        request = PageRequest.of(cursor=cursor, limit=5, direction=Direction.NEXT)

        rows = article_repository.find_window(request)

        assert rows == newest_first[5:11]

    def test_prev_before_cursor_is_in_travel_order(self, article_repository, newest_first):
        cursor = newest_first[10].cursor
        request = PageRequest.of(cursor=cursor, limit=5, direction=Direction.PREV)

        rows = article_repository.find_window(request)

        # Nearest to the cursor first, walking back toward the newest article
        assert rows == [newest_first[i] for i in (9, 8, 7, 6, 5, 4)]

    def test_prev_without_cursor_starts_at_the_oldest(self, article_repository, newest_first):
        request = PageRequest.of(limit=3, direction=Direction.PREV)

        rows = article_repository.find_window(request)

        assert rows == newest_first[::-1][:4]

    def test_window_never_exceeds_fetch_size(self, article_repository):
        request = PageRequest.of(limit=1000, direction=Direction.NEXT)

        assert len(article_repository.find_window(request)) == 30

    def test_filters_apply_before_windowing(self, article_repository, newest_first):
        request = PageRequest.of(limit=2, direction=Direction.NEXT)

        rows = article_repository.find_window(request, author="jake")

        expected = [a for a in newest_first if a.author == "jake"][:3]
        assert rows == expected

    def test_cursor_of_deleted_row_still_positions(self, newest_first):
        # A cursor only carries the ordering key; the row itself need not exist
        missing = newest_first[5]
        repository = ArticleRepository([a for a in newest_first if a is not missing])
        request = PageRequest.of(cursor=missing.cursor, limit=2, direction=Direction.NEXT)

        assert repository.find_window(request) == newest_first[6:9]

    def test_ties_on_created_at_are_broken_by_id(self):
        created = datetime(2025, 3, 1, tzinfo=UTC)
        twins = [
            Article(title=f"Twin {i}", description="", body="", author="a", created_at=created)
            for i in range(4)
        ]
        repository = ArticleRepository(twins)
        ordered = sorted(twins, key=lambda a: str(a.id), reverse=True)

        first = repository.find_window(PageRequest.of(limit=2, direction="next"))
        second = repository.find_window(
            PageRequest.of(cursor=ordered[1].cursor, limit=2, direction="next")
        )

        assert first == ordered[:3]
        assert second == ordered[2:]


@pytest.mark.unit
class TestCursorDecoding:
    @pytest.mark.parametrize(
        "cursor",
        [
            "garbage",
            CursorCodec.encode(CursorData(values={"id": "x"})),
            CursorCodec.encode(CursorData(values={"created_at": "yesterday", "id": "x"})),
        ],
    )
    def test_strict_repository_rejects_bad_cursor(self, article_repository, cursor):
        request = PageRequest.of(cursor=cursor, direction=Direction.NEXT)

        with pytest.raises(InvalidCursorException) as exc_info:
            article_repository.find_window(request)

        assert exc_info.value.cursor == cursor
        assert exc_info.value.status_code == 400

    def test_lenient_repository_restarts_sequence(self, articles, newest_first, caplog):
        repository = ArticleRepository(articles, strict_cursors=False)
        request = PageRequest.of(cursor="garbage", limit=3, direction=Direction.NEXT)

        with caplog.at_level(logging.WARNING):
            rows = repository.find_window(request)

        assert rows == newest_first[:4]
        assert "Ignoring undecodable pagination cursor" in caplog.text

    def test_lenient_resolve_drops_bad_cursor(self, articles):
        repository = ArticleRepository(articles, strict_cursors=False)
        request = PageRequest.of(cursor="garbage", limit=3, direction=Direction.PREV)

        resolved = repository.resolve_request(request)

        assert resolved == PageRequest.of(limit=3, direction=Direction.PREV)

    def test_resolve_keeps_good_cursor(self, article_repository, newest_first):
        request = PageRequest.of(cursor=newest_first[3].cursor, direction=Direction.NEXT)

        assert article_repository.resolve_request(request) is request

    def test_strict_resolve_rejects_bad_cursor(self, article_repository):
        with pytest.raises(InvalidCursorException):
            article_repository.resolve_request(PageRequest.of(cursor="garbage"))

    def test_naive_timestamp_is_read_as_utc(self, article_repository, newest_first):
        pivot = newest_first[2]
        naive = pivot.created_at.replace(tzinfo=None).isoformat()
        cursor = CursorCodec.encode(CursorData(values={"created_at": naive, "id": str(pivot.id)}))

        rows = article_repository.find_window(
            PageRequest.of(cursor=cursor, limit=2, direction=Direction.NEXT)
        )

        assert rows == newest_first[3:6]
