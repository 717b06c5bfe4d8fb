"""Health-check endpoint, used by load balancers and container probes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ...config import AppConfig
from ..dependencies import get_app_config
from ..schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health/status", response_model=HealthResponse, summary="Health check")
def health_status(config: AppConfig = Depends(get_app_config)) -> HealthResponse:
    """Returns 200 OK when the service is running."""
    return HealthResponse(status="healthy", service=config.service_name)
