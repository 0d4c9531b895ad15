"""FastAPI application factory for the preliminary check service."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from credit_decision.config import AppSettings
from credit_decision.pipeline import PreliminaryCheckPipeline

from .routers import api_create_decision_router, api_create_health_router

logger = logging.getLogger(__name__)


def create_api_application(settings: AppSettings, pipeline: PreliminaryCheckPipeline) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        pipeline: Preliminary check pipeline shared read-only across requests.

    Returns:
        FastAPI: Framework application instance with routers and error handling.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    application = FastAPI(title="Credit Decision Preliminary Checks")

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return a minimal foundation response for bootstrap verification."""

        return {
            "service": "credit-decision",
            "status": "ready",
            "environment": settings.environment_name,
        }

    @application.exception_handler(Exception)
    async def api_unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Map unexpected failures to a response that never leaks internal details."""

        logger.error(
            "Unhandled exception on %s: %s",
            request.url.path,
            exc,
            exc_info=exc,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            content={"status": "error", "code": "INTERNAL_ERROR", "message": "An unexpected error occurred"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    application.include_router(api_create_health_router(pipeline=pipeline))
    application.include_router(api_create_decision_router(pipeline=pipeline))

    return application
