"""Article use cases on top of the repository and the cursor pager."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from datetime import UTC, datetime

from conduit_service.core.exceptions import NotFoundException, ValidationException
from conduit_service.core.pagination import CursorPager, Page, PageRequest
from conduit_service.features.articles.models import Article, article_cursor, slugify
from conduit_service.features.articles.repository import ArticleRepository

logger = logging.getLogger(__name__)

CANT_BE_EMPTY = "can't be empty"
NAME_EXISTS = "article name exists"


class ArticleService:
    """Operations over articles.

    Listing follows the over-fetch pattern: the repository is asked for
    ``limit + 1`` rows and the pager trims the extra one, so no separate
    count query is needed to know whether more pages exist.
    """

    def __init__(self, repository: ArticleRepository) -> None:
        self.repository = repository
        self._pager: CursorPager[Article] = CursorPager(article_cursor)

    def list_articles(
        self,
        request: PageRequest,
        *,
        tag: str | None = None,
        author: str | None = None,
    ) -> Page[Article]:
        """Return one page of articles, newest first.

        Raises:
            InvalidCursorException: If the repository rejects the cursor.
        """
        request = self.repository.resolve_request(request)
        rows = self.repository.find_window(request, tag=tag, author=author)
        page = self._pager.paginate(request, rows)
        logger.info(
            "Listed articles",
            extra={
                "returned": len(page.items),
                "has_next": page.has_next,
                "has_previous": page.has_previous,
                "tag": tag,
                "author": author,
            },
        )
        return page

    def count_articles(self, *, tag: str | None = None, author: str | None = None) -> int:
        return self.repository.count(tag=tag, author=author)

    def get_article(self, slug: str) -> Article:
        """Look up one article by slug.

        Raises:
            NotFoundException: If no article has this slug.
        """
        article = self.repository.get_by_slug(slug)
        if article is None:
            raise NotFoundException(
                detail=f"Article with slug '{slug}' not found",
                type="article-not-found",
                extra={"slug": slug},
            )
        return article

    def create_article(
        self,
        *,
        title: str,
        description: str,
        body: str,
        author: str,
        tag_list: Iterable[str] = (),
    ) -> Article:
        """Publish a new article; its slug is derived from the title.

        Raises:
            ValidationException: If a field is blank or another article
                already uses the title.
        """
        errors = _blank_fields(title=title, description=description, body=body, author=author)
        if "title" not in errors:
            self._check_title_free(title, errors)
        if errors:
            raise _invalid(errors)

        article = self.repository.add(
            Article(
                title=title.strip(),
                description=description.strip(),
                body=body,
                author=author.strip(),
                tag_list=_clean_tags(tag_list),
            )
        )
        logger.info("Created article", extra={"slug": article.slug, "author": article.author})
        return article

    def update_article(
        self,
        slug: str,
        *,
        title: str | None = None,
        description: str | None = None,
        body: str | None = None,
    ) -> Article:
        """Change an article; blank or missing fields keep their value.

        A new title re-derives the slug.

        Raises:
            NotFoundException: If no article has this slug.
            ValidationException: If the new title clashes with another article.
        """
        article = self.get_article(slug)
        changes: dict[str, object] = {}
        if title and title.strip() and title.strip() != article.title:
            errors: dict[str, list[str]] = {}
            self._check_title_free(title, errors, current_slug=slug)
            if errors:
                raise _invalid(errors)
            changes["title"] = title.strip()
            changes["slug"] = slugify(title)
        if description and description.strip():
            changes["description"] = description.strip()
        if body and body.strip():
            changes["body"] = body
        if not changes:
            return article

        updated = self.repository.replace(
            slug, replace(article, **changes, updated_at=datetime.now(UTC))
        )
        logger.info(
            "Updated article",
            extra={"slug": updated.slug, "previous_slug": slug, "fields": sorted(changes)},
        )
        return updated

    def delete_article(self, slug: str) -> None:
        """Remove an article.

        Raises:
            NotFoundException: If no article has this slug.
        """
        self.repository.remove(slug)
        logger.info("Deleted article", extra={"slug": slug})

    def _check_title_free(
        self,
        title: str,
        errors: dict[str, list[str]],
        current_slug: str | None = None,
    ) -> None:
        new_slug = slugify(title)
        if not new_slug:
            errors.setdefault("title", []).append("must contain letters or digits")
        elif new_slug != current_slug and self.repository.get_by_slug(new_slug) is not None:
            errors.setdefault("title", []).append(NAME_EXISTS)


def _blank_fields(**fields: str) -> dict[str, list[str]]:
    return {name: [CANT_BE_EMPTY] for name, value in fields.items() if not value.strip()}


def _clean_tags(tags: Iterable[str]) -> tuple[str, ...]:
    # Order is kept, duplicates and blanks are dropped.
    return tuple(dict.fromkeys(tag.strip() for tag in tags if tag.strip()))


def _invalid(errors: dict[str, list[str]]) -> ValidationException:
    return ValidationException(
        detail="Article is invalid: " + ", ".join(sorted(errors)),
        extra={"errors": errors},
    )
