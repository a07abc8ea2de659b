"""Cursor pager: trims an over-fetched window and annotates it.

The storage layer is asked for ``request.effective_fetch_size()`` rows,
already filtered by the cursor and ordered in the requested direction.
``CursorPager`` turns that list into a ``Page``:

- More rows than ``limit`` means another page exists in the travel
  direction. The extra row is dropped.
- Backward fetches arrive in reverse order and are flipped so items are
  always presented in forward order.
- The flag for the side the caller came from is inferred from the input
  cursor: a non-empty cursor means there is content behind it. This is a
  heuristic and is not re-checked against storage.
- Start and end cursors are taken from the first and last items.

Usage:
    pager = CursorPager(lambda article: article.cursor)
    rows = repo.find_window(request)
    page = pager.paginate(request, rows)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from conduit_service.core.pagination.params import PageRequest
from conduit_service.core.pagination.schemas import (
    Connection,
    CursorPage,
    Edge,
    PageInfo,
)

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """One window of items plus navigation metadata.

    Attributes:
        items: At most ``limit`` items in forward order.
        has_next: Whether items exist after the last item.
        has_previous: Whether items exist before the first item.
        start_cursor: Cursor of the first item, empty if no items.
        end_cursor: Cursor of the last item, empty if no items.
    """

    items: tuple[T, ...]
    has_next: bool
    has_previous: bool
    start_cursor: str = ""
    end_cursor: str = ""

    def map(self, fn: Callable[[T], U]) -> Page[U]:
        """Return the same window with every item transformed."""
        return Page(
            items=tuple(fn(item) for item in self.items),
            has_next=self.has_next,
            has_previous=self.has_previous,
            start_cursor=self.start_cursor,
            end_cursor=self.end_cursor,
        )

    def page_info(self, total_count: int | None = None) -> PageInfo:
        """Relay-style page info. Empty cursors are reported as None."""
        return PageInfo(
            has_previous_page=self.has_previous,
            has_next_page=self.has_next,
            start_cursor=self.start_cursor or None,
            end_cursor=self.end_cursor or None,
            total_count=total_count,
        )

    def to_connection(
        self,
        cursor_fn: Callable[[T], str],
        total_count: int | None = None,
    ) -> Connection[T]:
        """Convert to the GraphQL Connection shape.

        Args:
            cursor_fn: Returns the cursor for a single item
            total_count: Optional total size of the filtered collection
        """
        return Connection(
            edges=[Edge(node=item, cursor=cursor_fn(item)) for item in self.items],
            page_info=self.page_info(total_count),
        )

    def to_cursor_page(self, total_count: int | None = None) -> CursorPage[T]:
        """Convert to the REST cursor page shape."""
        return CursorPage(
            items=list(self.items),
            next_cursor=self.end_cursor if self.has_next and self.end_cursor else None,
            prev_cursor=(
                self.start_cursor if self.has_previous and self.start_cursor else None
            ),
            has_more=self.has_next,
            has_previous=self.has_previous,
            total_count=total_count,
        )


class CursorPager(Generic[T]):
    """Build pages from over-fetched, direction-ordered rows.

    The pager is stateless; one instance can serve concurrent requests.

    Args:
        cursor_fn: Returns the opaque cursor for an item. Used for the
            start and end cursors of each page.
    """

    def __init__(self, cursor_fn: Callable[[T], str]) -> None:
        self._cursor_fn = cursor_fn

    def paginate(self, request: PageRequest, rows: Sequence[T]) -> Page[T]:
        """Trim ``rows`` to ``request.limit`` and compute page metadata.

        Args:
            request: Normalized page request the rows were fetched for
            rows: Up to ``request.effective_fetch_size()`` rows, ordered in
                the request's direction

        Returns:
            Page with items in forward order
        """
        has_extra = len(rows) > request.limit
        window = list(rows[: request.limit])
        came_from_cursor = request.cursor != ""

        if request.is_forward():
            has_next = has_extra
            has_previous = came_from_cursor
        else:
            window.reverse()
            has_previous = has_extra
            has_next = came_from_cursor

        if window:
            start_cursor = self._cursor_fn(window[0])
            end_cursor = self._cursor_fn(window[-1])
        else:
            start_cursor = end_cursor = ""

        logger.debug(
            "Built cursor page",
            extra={
                "direction": request.direction,
                "limit": request.limit,
                "fetched": len(rows),
                "returned": len(window),
                "has_next": has_next,
                "has_previous": has_previous,
            },
        )

        return Page(
            items=tuple(window),
            has_next=has_next,
            has_previous=has_previous,
            start_cursor=start_cursor,
            end_cursor=end_cursor,
        )


__all__ = ["CursorPager", "Page"]
