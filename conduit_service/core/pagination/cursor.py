"""Cursor encoding and decoding.

A cursor holds the ordering-key values of one row, so the next query can
seek directly past it. The format is:

1. JSON object with the sort field values
2. Base64 URL-safe encoded for use in URLs and GraphQL arguments

Example cursor payload:
    {"v": {"created_at": "2025-01-15T10:30:00+00:00", "id": "abc-123"}}

Clients treat cursors as opaque strings and pass them back unchanged.
Decoding is the storage layer's job; the pager only ever sees the raw
string.
"""

from __future__ import annotations

import base64
import binascii
import json
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, ValidationError


class CursorData(BaseModel):
    """Decoded cursor contents.

    Attributes:
        values: Mapping of sort field names to their values
    """

    values: dict[str, Any] = Field(description="Sort field values for seeking")

    model_config = {"frozen": True}


class CursorCodec:
    """Encode and decode pagination cursors.

    Usage:
        cursor = CursorCodec.encode(CursorData(
            values={"created_at": article.created_at, "id": article.id}
        ))
        data = CursorCodec.decode(cursor)
        data.values["id"]
    """

    @staticmethod
    def encode(data: CursorData) -> str:
        """Encode cursor data to an opaque string.

        Args:
            data: Cursor data with sort field values

        Returns:
            URL-safe base64 encoded string
        """
        payload = {"v": CursorCodec._serialize_values(data.values)}
        json_str = json.dumps(payload, separators=(",", ":"), sort_keys=True)
        return base64.urlsafe_b64encode(json_str.encode()).decode()

    @staticmethod
    def decode(cursor: str) -> CursorData:
        """Decode a cursor string to cursor data.

        Args:
            cursor: URL-safe base64 encoded cursor string

        Returns:
            CursorData with sort field values

        Raises:
            ValueError: If cursor is invalid or corrupted
        """
        try:
            json_str = base64.urlsafe_b64decode(cursor.encode()).decode()
            payload = json.loads(json_str)
            if not isinstance(payload, dict):
                raise ValueError("cursor payload is not an object")
            return CursorData(values=payload.get("v", {}))
        except (
            binascii.Error,
            RecursionError,
            UnicodeError,
            ValidationError,
            ValueError,
        ) as e:
            raise ValueError(f"Invalid cursor: {e}") from e

    @staticmethod
    def _serialize_values(values: dict[str, Any]) -> dict[str, Any]:
        """Serialize values to JSON-compatible form (datetime, UUID)."""
        result = {}
        for key, value in values.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, UUID):
                result[key] = str(value)
            else:
                result[key] = value
        return result

    @staticmethod
    def create_cursor(row: Any, sort_fields: list[str]) -> str:
        """Create a cursor from a row's sort field attributes.

        Args:
            row: Any object exposing the sort fields as attributes
            sort_fields: Attribute names to include in cursor

        Returns:
            Encoded cursor string
        """
        values = {field: getattr(row, field, None) for field in sort_fields}
        return CursorCodec.encode(CursorData(values=values))


__all__ = ["CursorCodec", "CursorData"]
