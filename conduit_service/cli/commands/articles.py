"""Article browsing commands.

Pages through the article store with the same cursor semantics as the
REST API, which makes it handy for checking cursors by hand:

    conduit-service articles list --limit 5
    conduit-service articles list --limit 5 --cursor <next_cursor>
    conduit-service articles list --limit 5 --cursor <prev_cursor> --direction prev
"""

import json
import sys

import click

from conduit_service.cli.utils import error, info
from conduit_service.core.exceptions import AppException
from conduit_service.core.pagination import PageRequest
from conduit_service.features.articles.dependencies import get_article_repository
from conduit_service.features.articles.schemas import ArticleResponse
from conduit_service.features.articles.service import ArticleService


@click.group(name="articles")
def articles() -> None:
    """Browse articles."""


@articles.command(name="list")
@click.option("--cursor", default=None, help="Cursor from a previous page")
@click.option("--limit", default=None, type=int, help="Page size (clamped to 1-1000)")
@click.option(
    "--direction",
    default="next",
    type=click.Choice(["next", "prev"], case_sensitive=False),
    help="Traversal direction relative to the cursor",
)
@click.option("--tag", default=None, help="Only articles with this tag")
@click.option("--author", default=None, help="Only articles by this author")
@click.option("--json", "as_json", is_flag=True, help="Print the page as JSON")
def list_articles(
    cursor: str | None,
    limit: int | None,
    direction: str,
    tag: str | None,
    author: str | None,
    as_json: bool,
) -> None:
    """List one page of articles, newest first."""
    service = ArticleService(get_article_repository())
    request = PageRequest.of(cursor=cursor, limit=limit, direction=direction)

    try:
        page = service.list_articles(request, tag=tag, author=author)
    except AppException as e:
        error(e.detail)
        sys.exit(1)

    cursor_page = page.map(ArticleResponse.from_article).to_cursor_page()
    if as_json:
        click.echo(json.dumps(cursor_page.model_dump(mode="json"), indent=2))
        return

    if not cursor_page.items:
        info("No articles found")
    for item in cursor_page.items:
        click.echo(f"{item.created_at:%Y-%m-%d %H:%M}  {item.author:<12} {item.slug}")

    if cursor_page.prev_cursor:
        click.echo(f"prev: {cursor_page.prev_cursor}")
    if cursor_page.next_cursor:
        click.echo(f"next: {cursor_page.next_cursor}")


@articles.command(name="show")
@click.argument("slug")
def show_article(slug: str) -> None:
    """Print one article as JSON."""
    service = ArticleService(get_article_repository())
    try:
        article = service.get_article(slug)
    except AppException as e:
        error(e.detail)
        sys.exit(1)
    click.echo(ArticleResponse.from_article(article).model_dump_json(indent=2))
