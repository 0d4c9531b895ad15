"""API router package for endpoint composition."""

from .decision import api_create_decision_router
from .health import api_create_health_router

__all__ = ["api_create_decision_router", "api_create_health_router"]
