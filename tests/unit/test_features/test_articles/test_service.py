"""Unit tests for ArticleService: repository window plus cursor pager."""
from __future__ import annotations

import pytest

from conduit_service.core.exceptions import (
    InvalidCursorException,
    NotFoundException,
    ValidationException,
)
from conduit_service.core.pagination import Direction, PageRequest


def slugs(page) -> list[str]:
    return [article.slug for article in page.items]


@pytest.mark.unit
class TestListArticles:
    def test_first_page(self, article_service, newest_first):
        page = article_service.list_articles(PageRequest.of(limit=10, direction="next"))

        assert list(page.items) == newest_first[:10]
        assert page.has_next is True
        assert page.has_previous is False
        assert page.start_cursor == newest_first[0].cursor
        assert page.end_cursor == newest_first[9].cursor

    def test_walk_forward_visits_every_article_once(self, article_service, newest_first):
        seen = []
        cursor = ""
        while True:
            page = article_service.list_articles(
                PageRequest.of(cursor=cursor, limit=7, direction=Direction.NEXT)
            )
            seen.extend(page.items)
            if not page.has_next:
                break
            cursor = page.end_cursor

        assert seen == newest_first

    def test_walk_backward_from_the_end(self, article_service, newest_first):
        pages = []
        cursor = ""
        while True:
            page = article_service.list_articles(
                PageRequest.of(cursor=cursor, limit=8, direction=Direction.PREV)
            )
            pages.insert(0, list(page.items))
            if not page.has_previous:
                break
            cursor = page.start_cursor

        assert [a for chunk in pages for a in chunk] == newest_first
        # The last window fetched is the short one holding the newest articles
        assert pages[0] == newest_first[:6]

    def test_prev_from_second_page_returns_first_page(self, article_service, newest_first):
        second = article_service.list_articles(
            PageRequest.of(cursor=newest_first[4].cursor, limit=5, direction="next")
        )

        back = article_service.list_articles(
            PageRequest.of(cursor=second.start_cursor, limit=5, direction="prev")
        )

        assert list(back.items) == newest_first[:5]
        assert back.has_next is True
        # Exactly five rows precede the cursor, so no extra row was fetched
        assert back.has_previous is False

    def test_last_page(self, article_service, newest_first):
        page = article_service.list_articles(
            PageRequest.of(cursor=newest_first[24].cursor, limit=10, direction="next")
        )

        assert list(page.items) == newest_first[25:]
        assert page.has_next is False
        assert page.has_previous is True

    def test_filtered_listing(self, article_service, newest_first):
        page = article_service.list_articles(
            PageRequest.of(limit=100, direction="next"), tag="graphql"
        )

        assert list(page.items) == [a for a in newest_first if "graphql" in a.tag_list]
        assert page.has_next is False

    def test_empty_store(self):
        from conduit_service.features.articles.repository import ArticleRepository
        from conduit_service.features.articles.service import ArticleService

        page = ArticleService(ArticleRepository()).list_articles(PageRequest.of(direction="next"))

        assert page.items == ()
        assert page.start_cursor == page.end_cursor == ""
        assert page.has_next is False
        assert page.has_previous is False

    def test_bad_cursor_propagates(self, article_service):
        with pytest.raises(InvalidCursorException):
            article_service.list_articles(PageRequest.of(cursor="@@@", direction="next"))

    def test_lenient_fallback_reports_first_page_flags(self, articles, newest_first):
        from conduit_service.features.articles.repository import ArticleRepository
        from conduit_service.features.articles.service import ArticleService

        service = ArticleService(ArticleRepository(articles, strict_cursors=False))

        page = service.list_articles(
            PageRequest.of(cursor="not-a-cursor", limit=5, direction="next")
        )

        assert list(page.items) == newest_first[:5]
        assert page.has_next is True
        assert page.has_previous is False

    def test_listing_is_logged(self, article_service, caplog):
        with caplog.at_level("INFO", logger="conduit_service.features.articles.service"):
            article_service.list_articles(PageRequest.of(limit=3, direction="next"))

        record = next(r for r in caplog.records if r.getMessage() == "Listed articles")
        assert record.returned == 3
        assert record.has_next is True


@pytest.mark.unit
class TestGetArticle:
    def test_found(self, article_service, articles):
        assert article_service.get_article(articles[0].slug) is articles[0]

    def test_missing_raises(self, article_service):
        with pytest.raises(NotFoundException) as exc_info:
            article_service.get_article("nope")

        assert exc_info.value.type == "article-not-found"
        assert exc_info.value.extra == {"slug": "nope"}

    def test_count_articles(self, article_service):
        assert article_service.count_articles() == 30
        assert article_service.count_articles(author="nobody") == 0


@pytest.mark.unit
class TestCreateArticle:
    def test_create_lists_first(self, article_service):
        article = article_service.create_article(
            title="Fresh Take",
            description="d",
            body="b",
            author="jake",
            tag_list=["python", " python ", "", "api"],
        )

        assert article.slug == "fresh-take"
        assert article.tag_list == ("python", "api")
        assert article_service.get_article("fresh-take") is article
        page = article_service.list_articles(PageRequest.of(limit=1, direction="next"))
        assert page.items == (article,)

    def test_blank_fields_are_rejected(self, article_service):
        with pytest.raises(ValidationException) as exc_info:
            article_service.create_article(title="t", description="d", body="  ", author="")

        assert exc_info.value.status_code == 422
        assert exc_info.value.extra == {
            "errors": {"body": ["can't be empty"], "author": ["can't be empty"]}
        }
        assert article_service.count_articles() == 30

    def test_duplicate_title_is_rejected(self, article_service, articles):
        with pytest.raises(ValidationException) as exc_info:
            article_service.create_article(
                title=articles[0].title, description="d", body="b", author="jake"
            )

        assert exc_info.value.extra["errors"] == {"title": ["article name exists"]}

    def test_title_without_letters_is_rejected(self, article_service):
        with pytest.raises(ValidationException):
            article_service.create_article(title="!!!", description="d", body="b", author="jake")


@pytest.mark.unit
class TestUpdateArticle:
    def test_new_title_changes_slug(self, article_service, articles):
        original = articles[0]

        updated = article_service.update_article(original.slug, title="Renamed Piece")

        assert updated.slug == "renamed-piece"
        assert updated.id == original.id
        assert updated.created_at == original.created_at
        assert updated.updated_at > original.updated_at
        assert updated.body == original.body
        assert article_service.repository.get_by_slug(original.slug) is None

    def test_blank_fields_keep_their_value(self, article_service, articles):
        original = articles[1]

        updated = article_service.update_article(
            original.slug, title="", description="  ", body="new body"
        )

        assert updated.title == original.title
        assert updated.description == original.description
        assert updated.body == "new body"

    def test_nothing_to_change_returns_article(self, article_service, articles):
        assert article_service.update_article(articles[2].slug) is articles[2]

    def test_cursor_position_survives_update(self, article_service, newest_first):
        article_service.update_article(newest_first[0].slug, body="edited")

        page = article_service.list_articles(
            PageRequest.of(cursor=newest_first[0].cursor, limit=2, direction="next")
        )

        assert list(page.items) == newest_first[1:3]

    def test_title_of_another_article_is_rejected(self, article_service, articles):
        with pytest.raises(ValidationException):
            article_service.update_article(articles[0].slug, title=articles[1].title)

    def test_missing_article(self, article_service):
        with pytest.raises(NotFoundException):
            article_service.update_article("nope", body="x")


@pytest.mark.unit
class TestDeleteArticle:
    def test_delete(self, article_service, articles):
        article_service.delete_article(articles[0].slug)

        assert article_service.count_articles() == 29
        with pytest.raises(NotFoundException):
            article_service.get_article(articles[0].slug)

    def test_delete_missing(self, article_service):
        with pytest.raises(NotFoundException):
            article_service.delete_article("nope")
