"""Pagination response schemas for cursor-based pagination.

Two wire shapes are provided:

1. GraphQL Connection pattern (Relay specification):
   - Edges with cursors and nodes
   - PageInfo with navigation metadata

2. Simple REST style:
   - Items, next/previous cursors and has_more flag

Both are produced from the same ``Page`` (see ``pager.py``).
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageInfo(BaseModel):
    """Pagination metadata following GraphQL Relay specification.

    Attributes:
        has_previous_page: Whether there are items before the current page
        has_next_page: Whether there are items after the current page
        start_cursor: Cursor of the first item in this page
        end_cursor: Cursor of the last item in this page
        total_count: Total number of items (optional, costs a count)
    """

    has_previous_page: bool = Field(description="Whether previous items exist")
    has_next_page: bool = Field(description="Whether more items exist")
    start_cursor: str | None = Field(
        default=None,
        description="Cursor of the first item",
    )
    end_cursor: str | None = Field(
        default=None,
        description="Cursor of the last item",
    )
    total_count: int | None = Field(
        default=None,
        description="Total count (optional)",
    )


class Edge(BaseModel, Generic[T]):
    """Edge wrapper for paginated items (Relay pattern)."""

    node: T = Field(description="The data item")
    cursor: str = Field(description="Cursor for this item")


class Connection(BaseModel, Generic[T]):
    """GraphQL Connection pattern for cursor pagination.

    Client navigation:
        # First page
        { articles(first: 10) { ... } }

        # Next page (end_cursor from previous response)
        { articles(first: 10, after: "eyJ2Ijp7...") { ... } }

        # Previous page (start_cursor)
        { articles(last: 10, before: "eyJ2Ijp7...") { ... } }
    """

    edges: list[Edge[T]] = Field(
        default_factory=list,
        description="List of edges (items with cursors)",
    )
    page_info: PageInfo = Field(description="Pagination metadata")

    @property
    def nodes(self) -> list[T]:
        """Get just the nodes without edge wrappers."""
        return [edge.node for edge in self.edges]

    def to_cursor_page(self) -> CursorPage[T]:
        """Convert to simple REST-style pagination."""
        return CursorPage(
            items=self.nodes,
            next_cursor=self.page_info.end_cursor if self.page_info.has_next_page else None,
            prev_cursor=(
                self.page_info.start_cursor if self.page_info.has_previous_page else None
            ),
            has_more=self.page_info.has_next_page,
            has_previous=self.page_info.has_previous_page,
            total_count=self.page_info.total_count,
        )


class CursorPage(BaseModel, Generic[T]):
    """Simple REST-style cursor pagination response.

    Usage:
        GET /api/v1/articles?limit=10
        GET /api/v1/articles?limit=10&cursor=<next_cursor>&direction=next
        GET /api/v1/articles?limit=10&cursor=<prev_cursor>&direction=prev

    Attributes:
        items: List of data items
        next_cursor: Cursor for the next page (None if no more)
        prev_cursor: Cursor for the previous page (None if at start)
        has_more: Whether more items exist after this page
        has_previous: Whether items exist before this page
        total_count: Total count (optional)
    """

    items: list[T] = Field(default_factory=list, description="List of items")
    next_cursor: str | None = Field(
        default=None,
        description="Cursor to fetch next page",
    )
    prev_cursor: str | None = Field(
        default=None,
        description="Cursor to fetch previous page",
    )
    has_more: bool = Field(default=False, description="Whether more items exist")
    has_previous: bool = Field(
        default=False,
        description="Whether earlier items exist",
    )
    total_count: int | None = Field(
        default=None,
        description="Total count (optional)",
    )


__all__ = [
    "Connection",
    "CursorPage",
    "Edge",
    "PageInfo",
]
