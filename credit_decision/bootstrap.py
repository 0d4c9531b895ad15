"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from credit_decision.api import create_api_application
from credit_decision.checks import DEFAULT_CHECK_REGISTRY
from credit_decision.config import AppSettings, config_load_settings
from credit_decision.observability import observability_setup_logging
from credit_decision.pipeline import PreliminaryCheckPipeline, PreliminaryCheckPipelineConfig


def bootstrap_create_pipeline(settings: AppSettings) -> PreliminaryCheckPipeline:
    """Build the preliminary check pipeline from validated settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        PreliminaryCheckPipeline: Pipeline over the default check registry.

    Raises:
        ValueError: Raised when configured policy values are invalid.
    """

    return PreliminaryCheckPipeline(
        registry=DEFAULT_CHECK_REGISTRY,
        config=PreliminaryCheckPipelineConfig(
            unknown_field_policy=settings.ingestion_unknown_field_policy,
        ),
    )


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    observability_setup_logging(level=resolved_settings.log_level, fmt=resolved_settings.log_format)
    return create_api_application(
        settings=resolved_settings,
        pipeline=bootstrap_create_pipeline(resolved_settings),
    )
