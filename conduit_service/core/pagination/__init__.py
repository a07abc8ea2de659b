"""Cursor-based pagination.

Two cooperating pieces:

- ``PageRequest`` normalizes untrusted cursor/limit/direction input into a
  bounded, immutable request.
- ``CursorPager`` turns the ``limit + 1`` rows fetched for that request into
  a ``Page`` with next/previous flags and edge cursors.

Storage layers receive ``(request.cursor, request.effective_fetch_size(),
request.is_forward())``, decode the cursor with ``CursorCodec`` and return
rows ordered in the requested direction.

REST style:
    @router.get("/articles", response_model=CursorPage[ArticleResponse])
    async def list_articles(page_request: CursorPagination, ...):
        page = service.list_articles(page_request)
        return page.map(ArticleResponse.from_article).to_cursor_page()

GraphQL style:
    page.to_connection(cursor_fn)
"""

from conduit_service.core.pagination.cursor import CursorCodec, CursorData
from conduit_service.core.pagination.pager import CursorPager, Page
from conduit_service.core.pagination.params import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    Direction,
    PageRequest,
)
from conduit_service.core.pagination.schemas import (
    Connection,
    CursorPage,
    Edge,
    PageInfo,
)

__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    # GraphQL-style schemas
    "Connection",
    # Cursor utilities
    "CursorCodec",
    "CursorData",
    # REST-style schemas
    "CursorPage",
    # Core
    "CursorPager",
    "Direction",
    "Edge",
    "Page",
    "PageInfo",
    "PageRequest",
]
