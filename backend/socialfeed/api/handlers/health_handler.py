"""
Health Check Handler

Liveness, readiness and version endpoints for load balancers.

    /live    process is up
    /ready   database answers and the upload directory is writable (else 503)
    /health  service name, version and server time
"""

import os

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from socialfeed.api.dependencies.database import DbSession
from socialfeed.config.settings import settings
from socialfeed.shared.core.logging import logger
from socialfeed.shared.schemas.common import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/ready")
async def readiness_check(db: DbSession):
    """
    Ready once the database answers a trivial query and new post images
    can be written.
    """
    checks = {"database": "ok", "uploads": "ok"}

    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Readiness check failed: database", error=str(e))
        checks["database"] = "unavailable"

    if not os.access(settings.UPLOAD_DIR, os.W_OK):
        logger.error("Readiness check failed: uploads", upload_dir=settings.UPLOAD_DIR)
        checks["uploads"] = "unavailable"

    if any(value != "ok" for value in checks.values()):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "checks": checks},
        )
    return {"status": "ready", "checks": checks}


@router.get("/live")
async def liveness_check():
    return {"status": "alive"}
