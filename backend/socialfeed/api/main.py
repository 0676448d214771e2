"""
SocialFeed API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Request Flow:
=============
    client
      │  Authorization: Bearer <token>      multipart / JSON body
      ▼
    CORSMiddleware
      ▼
    RequestContextMiddleware ── binds request_id, logs "Request completed"
      ▼
    router ─┬─ /health /ready /live          health_handler
            ├─ {API_PREFIX}/auth/...         auth_handler  → AuthService, UserService
            ├─ {API_PREFIX}/posts/...        post_handler  → PostService, FeedService
            └─ {UPLOAD_URL_PREFIX}/<file>    StaticFiles over UPLOAD_DIR
      ▼
    SocialFeedException / HTTPException / validation errors
      └─ rendered by setup_exception_handlers as {"error": {...}}

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connection initialized (tables created if configured)
3. Application serves requests
4. Application stops → lifespan shutdown
5. Database connection closed

Usage:
======
    # Run with uvicorn (from backend/)
    uvicorn socialfeed.api.main:app --host 0.0.0.0 --port 8000 --reload

    # Or programmatically
    from socialfeed.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from socialfeed.config.settings import settings
from socialfeed.shared.db import init_db, close_db
from socialfeed.shared.core.logging import logger
from socialfeed.api.middleware import RequestContextMiddleware, setup_exception_handlers
from socialfeed.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Initialize database connection pool

    Shutdown:
    - Close database connections
    """
    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting SocialFeed API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    await init_db()

    logger.info("SocialFeed API started successfully")

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down SocialFeed API")

    await close_db()

    logger.info("SocialFeed API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Adds middleware (CORS, request context)
    3. Sets up exception handlers
    4. Registers all routes and the uploads directory
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Social feed backend: posts, likes, comments and follows",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        # Use lifespan for startup/shutdown
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(RequestContextMiddleware)

    # CORS Middleware - added last so it wraps everything else
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # UPLOADED IMAGES
    # ═══════════════════════════════════════════════════════════════════════════

    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount(
        settings.UPLOAD_URL_PREFIX,
        StaticFiles(directory=upload_dir),
        name="uploads",
    )

    return app


# Create the application instance
app = create_application()
