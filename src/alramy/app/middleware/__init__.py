"""ASGI middleware."""

from alramy.app.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
