"""
Middleware modules for the IntelliQ API.
"""

from .request_timing import RequestTimingMiddleware

__all__ = ["RequestTimingMiddleware"]
