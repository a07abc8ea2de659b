"""CLI output helpers."""

from conduit_service.cli.utils.formatters import error, info, success, warning

__all__ = ["error", "info", "success", "warning"]
