"""Pagination settings for API responses.

Page size bounds are fixed by ``conduit_service.core.pagination.params``
(MAX_LIMIT, DEFAULT_LIMIT) and are deliberately not configurable here.
These settings only tune how the transport and storage layers around the
pager behave.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_STRICT_CURSORS=false
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination configuration settings.

    Attributes:
        default_direction: Direction applied by REST endpoints when the
            client does not send one.
        strict_cursors: Reject undecodable cursors with a 400 instead of
            treating them as the start (or end) of the sequence.
        include_total_count: Report the filtered collection size on list
            responses. Costs one extra count per request.
    """

    default_direction: Literal["next", "prev"] = Field(
        default="next",
        description="Direction used when the client omits one",
    )
    strict_cursors: bool = Field(
        default=True,
        description="Reject malformed cursors instead of restarting the sequence",
    )
    include_total_count: bool = Field(
        default=False,
        description="Include total_count in paginated responses",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
