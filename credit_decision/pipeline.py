"""Preliminary check pipeline composing ingestion, check execution, and rendering."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from credit_decision.checks import DEFAULT_CHECK_REGISTRY, CheckRegistry, checks_run_all
from credit_decision.domain import ValidationError
from credit_decision.ingestion import UNKNOWN_FIELD_POLICIES, UnknownFieldPolicy, ingestion_ingest_payload
from credit_decision.rendering import render_check_results

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreliminaryCheckPipelineConfig:
    """Configuration values for pipeline execution.

    Attributes:
        unknown_field_policy: Handling of unknown payload keys (`ignore` or `fail`).
    """

    unknown_field_policy: UnknownFieldPolicy = "ignore"


class PreliminaryCheckPipeline:
    """Stateless generic-map-in, generic-map-out check pipeline."""

    def __init__(
        self,
        registry: CheckRegistry = DEFAULT_CHECK_REGISTRY,
        config: PreliminaryCheckPipelineConfig | None = None,
    ):
        """Initialize pipeline dependencies.

        Args:
            registry: Read-only check registry shared across requests.
            config: Pipeline configuration; defaults apply when omitted.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when dependencies or config values are invalid.
        """

        if registry is None:
            raise ValueError("registry must not be None")
        resolved_config = config or PreliminaryCheckPipelineConfig()
        if resolved_config.unknown_field_policy not in UNKNOWN_FIELD_POLICIES:
            raise ValueError(f"unsupported unknown_field_policy={resolved_config.unknown_field_policy}")

        self._registry = registry
        self._config = resolved_config

    def pipeline_check_labels(self) -> tuple[str, ...]:
        """Return labels of the checks this pipeline runs, in order."""

        return self._registry.check_registry_labels()

    def pipeline_evaluate(self, payload: Mapping[str, Any]) -> dict[str, list[dict[str, str]]]:
        """Ingest one payload, run every registered check, and render the results.

        Args:
            payload: Parsed request body.

        Returns:
            dict[str, list[dict[str, str]]]: Rendered `check_result_list` structure.

        Raises:
            ValidationError: Raised when the payload cannot be ingested.
            ContractViolationError: Raised when a check breaks its result contract.
        """

        try:
            ingested_payload = ingestion_ingest_payload(
                payload,
                unknown_field_policy=self._config.unknown_field_policy,
            )
        except ValidationError as error:
            logger.warning(
                "payload rejected: %s",
                error,
                extra={"field_name": error.field_name},
            )
            raise

        application = ingested_payload.application
        check_results = checks_run_all(
            application=application,
            information=ingested_payload.information,
            registry=self._registry,
        )
        passed_count = sum(1 for check_result in check_results if check_result.check_result_passed())
        logger.info(
            "preliminary checks evaluated: passed=%d failed=%d",
            passed_count,
            len(check_results) - passed_count,
            extra={"application_id": application.application_id},
        )
        return render_check_results(check_results)


__all__ = ["PreliminaryCheckPipeline", "PreliminaryCheckPipelineConfig"]
