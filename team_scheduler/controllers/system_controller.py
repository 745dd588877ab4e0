# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints, health, readiness, metrics.
Pure HTTP layer, no business logic.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from team_scheduler.core.config import settings
from team_scheduler.core.dependencies import get_store
from team_scheduler.repositories.store import SchedulerStore

router = APIRouter(tags=["System"])


@router.get("/api/health")
def health_check(store: SchedulerStore = Depends(get_store)):
    """Liveness probe."""
    return {
        "status": "OK",
        "message": "Server is running",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "users_count": store.users.count(),
        "temporary_overrides": store.temporary_availability.count(),
    }


@router.get("/api/health/ready")
def readiness_check(store: SchedulerStore = Depends(get_store)):
    """Readiness probe: the directory has been loaded."""
    return {
        "status": "ready",
        "service": settings.SERVICE_NAME,
        "users_loaded": store.users.count() > 0,
    }


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
