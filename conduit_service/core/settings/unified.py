"""Unified settings aggregating every domain."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from .app import AppSettings
from .graphql import GraphQLSettings
from .loader import (
    get_app_settings,
    get_graphql_settings,
    get_logging_settings,
    get_pagination_settings,
)
from .logs import LoggingSettings
from .pagination import PaginationSettings


@dataclass(frozen=True)
class Settings:
    """All settings domains in one object.

    Example:
        settings = get_settings()
        settings.app.api_prefix
        settings.pagination.strict_cursors
    """

    app: AppSettings
    logging: LoggingSettings
    graphql: GraphQLSettings
    pagination: PaginationSettings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached unified settings built from the per-domain loaders."""
    return Settings(
        app=get_app_settings(),
        logging=get_logging_settings(),
        graphql=get_graphql_settings(),
        pagination=get_pagination_settings(),
    )
