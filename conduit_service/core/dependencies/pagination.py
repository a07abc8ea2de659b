"""Reusable cursor pagination dependency for FastAPI routes.

Query parameters are taken as-is, without ``ge``/``le`` bounds: a limit of
``-5`` or ``50000`` is not a client error, it is normalized by
``PageRequest``. Only the absent-direction default comes from settings.

Usage:
    from conduit_service.core.dependencies.pagination import CursorPagination

    @router.get("/articles")
    async def list_articles(page_request: CursorPagination) -> ...:
        rows = repo.find_window(page_request)
        ...
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query

from conduit_service.core.pagination import PageRequest
from conduit_service.core.settings import get_pagination_settings


def get_page_request(
    cursor: Annotated[
        str | None,
        Query(description="Opaque cursor from a previous page (next_cursor or prev_cursor)"),
    ] = None,
    limit: Annotated[
        int | None,
        Query(description="Items per page; clamped to 1-1000, default 20"),
    ] = None,
    direction: Annotated[
        str | None,
        Query(description="Traversal direction relative to the cursor: next or prev"),
    ] = None,
) -> PageRequest:
    """Build a normalized page request from query parameters.

    Args:
        cursor: Opaque cursor, absent for the first (or last) page.
        limit: Requested page size, any integer.
        direction: ``next`` or ``prev``; settings default when omitted.

    Returns:
        PageRequest with bounded limit and non-null cursor.
    """
    if direction is None:
        direction = get_pagination_settings().default_direction
    return PageRequest.of(cursor=cursor, limit=limit, direction=direction)


CursorPagination = Annotated[PageRequest, Depends(get_page_request)]
