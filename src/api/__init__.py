"""API module for the Ethiopian Date Service."""

from .calendar_endpoints import router as calendar_router
from .health import router as health_router

__all__ = ["calendar_router", "health_router"]
