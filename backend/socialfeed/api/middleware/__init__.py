"""
API Middleware

Custom middleware for the FastAPI application.

Components:
===========
- error_handler: Global exception handling
- request_context: Per-request log context and access logging

Usage:
======
    from socialfeed.api.middleware import setup_exception_handlers, RequestContextMiddleware

    app = FastAPI()
    setup_exception_handlers(app)
    app.add_middleware(RequestContextMiddleware)
"""

from socialfeed.api.middleware.error_handler import setup_exception_handlers
from socialfeed.api.middleware.request_context import RequestContextMiddleware

__all__ = [
    "setup_exception_handlers",
    "RequestContextMiddleware",
]
