"""
Health check endpoints.

Provides the liveness probe and the Prometheus metrics endpoint.
"""

from fastapi import APIRouter, Response, status

from src.infrastructure.config import get_settings
from src.infrastructure.observability.metrics import get_metrics_content

router = APIRouter()


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    description="Check if the service is alive",
    tags=["Health"],
)
async def liveness() -> dict:
    """
    Liveness probe - check if the process is running.

    This endpoint always returns 200 if the process is alive. The engine
    holds no connections of its own, so there is no separate readiness check.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.observability.service_name,
        "history_backend": settings.history.backend,
    }


@router.get(
    "/metrics",
    status_code=status.HTTP_200_OK,
    summary="Prometheus metrics",
    description="Export Prometheus metrics in exposition format",
    tags=["Observability"],
    response_class=Response,
)
async def metrics() -> Response:
    """
    Prometheus metrics endpoint.

    Metrics include:
    - HTTP request counts and durations
    - Uptime timeline computations and their duration per range
    - Outage history pages, records and errors per backend
    """
    metrics_bytes, content_type = get_metrics_content()

    return Response(
        content=metrics_bytes,
        media_type=content_type,
    )
