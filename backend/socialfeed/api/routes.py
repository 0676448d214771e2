"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live    → Health check endpoints (never prefixed)
    {API_PREFIX}/auth         → Signup, login, current user, follow
    {API_PREFIX}/posts        → Feed, search, posts, likes, comments

API_PREFIX is empty by default; set it to "/api" to serve the same paths
the web client's dev proxy forwards.

Usage:
======
    from socialfeed.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from socialfeed.api.handlers import (
    auth_handler,
    post_handler,
    health_handler,
)
from socialfeed.config.settings import settings


def register_routes(app: FastAPI) -> None:
    """Mount the health, auth and post routers on the application."""
    prefix = settings.API_PREFIX

    # Probes stay at the root so load balancers need no prefix
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Authentication and follow endpoints
    app.include_router(
        auth_handler.router,
        prefix=f"{prefix}/auth",
        tags=["Authentication"],
    )

    # Feed and post endpoints
    app.include_router(
        post_handler.router,
        prefix=f"{prefix}/posts",
        tags=["Posts"],
    )
