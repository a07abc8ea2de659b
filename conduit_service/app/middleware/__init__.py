"""ASGI middleware."""

from conduit_service.app.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
