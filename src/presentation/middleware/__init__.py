"""Middleware for request processing."""

from .error_handler import error_handler_middleware, normalize_exception
from .request_context import RequestContextMiddleware
from .logging import LoggingMiddleware

__all__ = [
    "error_handler_middleware",
    "normalize_exception",
    "RequestContextMiddleware",
    "LoggingMiddleware",
]
