"""
Health check endpoints.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from ...core.config import get_settings
from ..schemas.common import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns the current status of the service.
    """
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.app_version,
        service=settings.app_name,
    )
