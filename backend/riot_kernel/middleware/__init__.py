"""HTTP middleware for the gateway application."""

from .request_logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
