"""Health endpoint router composition for app and check registry status."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from credit_decision.pipeline import PreliminaryCheckPipeline


def api_create_health_router(pipeline: PreliminaryCheckPipeline) -> APIRouter:
    """Create health-check router reporting app state and registered checks.

    Args:
        pipeline: Pipeline whose registered check labels are reported.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when pipeline is invalid.
    """

    if pipeline is None:
        raise ValueError("pipeline must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application health state.

        Returns:
            JSONResponse: Deterministic health payload for operational checks.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        payload = {
            "status": "ok",
            "app": "up",
            "checks": list(pipeline.pipeline_check_labels()),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
