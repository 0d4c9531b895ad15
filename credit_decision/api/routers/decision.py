"""Decision API router exposing the preliminary check pipeline."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse

from credit_decision.domain import ContractViolationError, ValidationError
from credit_decision.pipeline import PreliminaryCheckPipeline

logger = logging.getLogger(__name__)


def api_create_decision_router(pipeline: PreliminaryCheckPipeline) -> APIRouter:
    """Create decision router with the preliminary check endpoint.

    Args:
        pipeline: Preliminary check pipeline executed per request.

    Returns:
        APIRouter: Router exposing decision APIs.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if pipeline is None:
        raise ValueError("pipeline must not be None")

    router = APIRouter(prefix="/application", tags=["decision"])

    @router.post("/preliminary-checks")
    def api_application_preliminary_checks(payload: dict[str, Any] = Body(...)) -> JSONResponse:
        """Run every registered preliminary check against the posted application.

        Args:
            payload: Generic application/information payload.

        Returns:
            JSONResponse: Rendered check results, or a structured error payload.

        Raises:
            RuntimeError: Raised when execution fails unexpectedly.
        """

        try:
            rendered_payload = pipeline.pipeline_evaluate(payload)
        except ValidationError as error:
            error_payload = {
                "status": "error",
                "code": "VALIDATION_ERROR",
                "field": error.field_name,
                "message": error.message,
            }
            return JSONResponse(content=error_payload, status_code=status.HTTP_400_BAD_REQUEST)
        except ContractViolationError:
            logger.error("check contract violated", exc_info=True)
            error_payload = {
                "status": "error",
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
            }
            return JSONResponse(content=error_payload, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return JSONResponse(content=rendered_payload, status_code=status.HTTP_200_OK)

    return router
