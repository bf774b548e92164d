"""Middleware package for request handling."""

from src.middleware.access_log import AccessLogMiddleware

__all__ = [
    "AccessLogMiddleware",
]
