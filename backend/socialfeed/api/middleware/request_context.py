"""
Request Context Middleware

Binds per-request log context and logs each completed request.

Every log line emitted while a request is handled carries:

    request_id=3f2a9c...  method=PUT  path=/posts/.../like

The request id is taken from an incoming X-Request-ID header when present
and echoed back on the response.

Usage:
======
    from socialfeed.api.middleware.request_context import RequestContextMiddleware

    app.add_middleware(RequestContextMiddleware)
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from socialfeed.shared.core.logging import clear_log_context, get_logger, log_context


REQUEST_ID_HEADER = "X-Request-ID"

logger = get_logger("request")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Attach request id, method and path to the log context."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        clear_log_context()
        log_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_log_context()
