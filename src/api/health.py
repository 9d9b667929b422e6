"""Health check endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter

from src.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health/live")
async def health_check() -> Dict[str, Any]:
    """Check basic service health."""
    settings = get_settings()
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "ethiopian-date-service",
        "version": settings.app_version,
        "environment": settings.environment,
    }
