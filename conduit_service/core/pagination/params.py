"""Normalized pagination request parameters.

Clients send a cursor, a limit and a direction through REST query
parameters or GraphQL arguments. None of these are trusted: a limit may be
negative, zero or absurdly large, the cursor may be missing and the
direction may be absent or unknown. ``PageRequest`` turns all of that into a
bounded, immutable descriptor that the storage layer and the pager can use
without re-validating.

Normalization rules:
    - limit > MAX_LIMIT      -> MAX_LIMIT
    - 0 < limit <= MAX_LIMIT -> limit
    - otherwise              -> DEFAULT_LIMIT
    - cursor None            -> ""
    - direction              -> Direction member, or None when absent/unknown

Usage:
    request = PageRequest.of(cursor=None, limit=5000, direction="next")
    request.limit                   # 1000
    request.cursor                  # ""
    request.is_forward()            # True
    request.effective_fetch_size()  # 1001
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

MAX_LIMIT = 1000
DEFAULT_LIMIT = 20


class Direction(StrEnum):
    """Traversal direction relative to the canonical ordering."""

    NEXT = "next"
    PREV = "prev"

    @classmethod
    def parse(cls, value: Any) -> Direction | None:
        """Map a raw direction token to a member.

        Accepts members, their values in any case, and ``"previous"``.
        Returns None for absent or unrecognised tokens.
        """
        if isinstance(value, Direction):
            return value
        if not isinstance(value, str):
            return None
        token = value.strip().lower()
        if token == "previous":
            return cls.PREV
        try:
            return cls(token)
        except ValueError:
            return None


def normalize_limit(limit: Any) -> int:
    """Clamp high, accept positive, default on non-positive."""
    if isinstance(limit, bool) or not isinstance(limit, int):
        return DEFAULT_LIMIT
    if limit > MAX_LIMIT:
        return MAX_LIMIT
    if limit > 0:
        return limit
    return DEFAULT_LIMIT


class PageRequest(BaseModel):
    """Immutable, bounded pagination request.

    Construction never fails: every combination of cursor, limit and
    direction normalizes to a valid request.

    Attributes:
        cursor: Opaque position token. Empty means start of sequence
            (NEXT) or end of sequence (PREV).
        limit: Number of items the caller wants, in [1, MAX_LIMIT].
        direction: Traversal direction, None when absent.
    """

    cursor: str = Field(default="", description="Opaque position token")
    limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=1,
        le=MAX_LIMIT,
        description="Requested page size",
    )
    direction: Direction | None = Field(
        default=None,
        description="Traversal direction",
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        normalized = dict(data)
        cursor = normalized.get("cursor")
        normalized["cursor"] = cursor if isinstance(cursor, str) else ""
        normalized["limit"] = normalize_limit(normalized.get("limit"))
        normalized["direction"] = Direction.parse(normalized.get("direction"))
        return normalized

    @classmethod
    def of(
        cls,
        cursor: str | None = None,
        limit: int | None = None,
        direction: Direction | str | None = None,
    ) -> PageRequest:
        """Build a request from raw client input."""
        return cls(cursor=cursor, limit=limit, direction=direction)

    def is_forward(self) -> bool:
        """True exactly when the direction is NEXT."""
        return self.direction is Direction.NEXT

    def effective_fetch_size(self) -> int:
        """Rows to ask the storage layer for: one more than ``limit``.

        The extra row only signals that another page exists; it is never
        returned to the caller.
        """
        return self.limit + 1


__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "Direction",
    "PageRequest",
    "normalize_limit",
]
