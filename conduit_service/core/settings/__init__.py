"""Modular Pydantic Settings v2 configuration.

One frozen settings model per domain (app, logging, graphql, pagination),
read from environment variables and an optional .env file, and cached by
the loaders in ``loader``.

    from conduit_service.core.settings import get_pagination_settings

    settings = get_pagination_settings()
"""

from __future__ import annotations

from .loader import (
    clear_all_caches,
    get_app_settings,
    get_graphql_settings,
    get_logging_settings,
    get_pagination_settings,
)
from .unified import Settings, get_settings

__all__ = [
    "Settings",
    "clear_all_caches",
    "get_app_settings",
    "get_graphql_settings",
    "get_logging_settings",
    "get_pagination_settings",
    "get_settings",
]
