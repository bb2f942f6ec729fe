"""
Health check endpoints for the application.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.config.database import get_db_session
from marketplace.config.settings import settings
from marketplace.infrastructure.monitoring.health_checks import HealthChecker
from marketplace.infrastructure.monitoring.metrics import (
    get_metrics,
    get_metrics_content_type,
)

router = APIRouter(prefix="/health", tags=["health"])


async def get_health_checker(
    db: AsyncSession = Depends(get_db_session),
) -> HealthChecker:
    """Get health checker instance."""
    return HealthChecker(db)


@router.get("/")
async def health_check() -> Dict[str, Any]:
    """Liveness check. Does not touch the database."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/ready")
async def readiness_check(
    health_checker: HealthChecker = Depends(get_health_checker),
) -> Dict[str, Any]:
    """Readiness check: the database answers."""
    readiness = await health_checker.check_readiness()

    if readiness["status"] != "ready":
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not ready",
        )
    return readiness


@router.get("/metrics")
async def prometheus_metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.ENABLE_METRICS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Metrics are disabled"
        )

    return Response(content=get_metrics(), media_type=get_metrics_content_type())
