"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Post not found",
            "details": {}
        }
    }

Exception Handling:
===================
1. SocialFeedException subclasses → Use their status_code and to_dict()
2. Request validation errors     → 400 with validation details
3. HTTPException                 → Its status code, same error envelope
4. Other exceptions              → 500 with generic message (details hidden)

Usage:
======
    from socialfeed.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any, Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from socialfeed.shared.core.exceptions import SocialFeedException
from socialfeed.shared.core.logging import logger


# Error codes for statuses raised as HTTPException by handlers or routing
HTTP_ERROR_CODES = {
    400: "VALIDATION_ERROR",
    401: "AUTHENTICATION_ERROR",
    403: "AUTHORIZATION_ERROR",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
}


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Build a JSON response in the shared error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": message, "details": details or {}}},
        headers=headers,
    )


def describe_validation_errors(errors: Sequence[dict[str, Any]]) -> str:
    """
    One-line summary of the first validation error.

    Example:
        [{"loc": ("query", "limit"), "msg": "Input should be ..."}]
        → "limit: Input should be ..."
    """
    if not errors:
        return "Request validation failed"
    first = errors[0]
    # Drop the "body"/"query"/"path" source marker from the location
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    return f"{field}: {first['msg']}" if field else first["msg"]


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register the exception handlers on the application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(SocialFeedException)
    async def socialfeed_exception_handler(
        request: Request,
        exc: SocialFeedException,
    ) -> JSONResponse:
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Malformed path id, query parameter or body.

        Reported as 400 rather than FastAPI's default 422.
        """
        errors = jsonable_encoder(exc.errors())
        logger.warning("Validation error", errors=errors, path=request.url.path)
        return error_response(
            400,
            "VALIDATION_ERROR",
            describe_validation_errors(errors),
            details={"errors": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """HTTPException raised by handlers, or by routing (404/405)."""
        logger.warning(
            "HTTP error",
            status_code=exc.status_code,
            message=str(exc.detail),
            path=request.url.path,
        )
        return error_response(
            exc.status_code,
            HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
            str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Anything else: log with traceback, answer with a generic 500.

        The exception text never reaches the client.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return error_response(500, "INTERNAL_ERROR", "An unexpected error occurred")
