"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from swipefeed.config.settings import settings
from swipefeed.api.dependencies.database import DbSession
from swipefeed.shared.core.exceptions import ServiceUnavailableError
from swipefeed.shared.schemas.common import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with service status
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/ready")
async def readiness_check(db: DbSession):
    """
    Readiness check for Kubernetes/load balancers.

    Ready means the database answers a trivial query.
    """
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        raise ServiceUnavailableError("Database is not reachable") from e
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    """
    Liveness check for Kubernetes.

    Returns:
        Simple alive status
    """
    return {"status": "alive"}
