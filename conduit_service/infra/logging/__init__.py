"""Logging infrastructure.

Structured logging on top of the standard library:
- JSONL format for Loki/Elasticsearch ingestion
- Automatic context injection (request_id, ...)
- QueueHandler + QueueListener for non-blocking I/O

Basic usage:
    import logging

    from conduit_service.infra.logging import set_log_context

    logger = logging.getLogger(__name__)

    set_log_context(request_id="abc-123")
    logger.info("Listing articles")  # record includes request_id
"""

from conduit_service.infra.logging.config import (
    configure_logging,
    setup_logging,
    shutdown,
)
from conduit_service.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from conduit_service.infra.logging.formatters import JSONFormatter

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "clear_log_context",
    "configure_logging",
    "get_log_context",
    "set_log_context",
    "setup_logging",
    "shutdown",
]
