"""Regression tests for logging setup and JSON formatting."""

import json
import logging

from credit_decision.observability import JSONFormatter, observability_setup_logging


def test_observability_json_formatter_includes_known_extra_fields() -> None:
    """Emit one JSON object with core and extra fields.

    Returns:
        None: Assertions validate JSON log shape.

    Raises:
        AssertionError: Raised when formatted payload is unexpected.
    """

    record = logging.LogRecord(
        name="credit_decision.pipeline",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="payload rejected: %s",
        args=("application.applied_at",),
        exc_info=None,
    )
    record.field_name = "application.applied_at"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "credit_decision.pipeline"
    assert payload["message"] == "payload rejected: application.applied_at"
    assert payload["field_name"] == "application.applied_at"
    assert "application_id" not in payload


def test_observability_setup_logging_replaces_previous_handler() -> None:
    """Install exactly one service handler across repeated setup calls.

    Returns:
        None: Assertions validate idempotent setup.

    Raises:
        AssertionError: Raised when handlers accumulate.
    """

    root_logger = logging.getLogger()
    original_level = root_logger.level
    try:
        first_handler = observability_setup_logging(level="debug", fmt="json")
        second_handler = observability_setup_logging(level="warning", fmt="text")

        assert first_handler not in root_logger.handlers
        assert second_handler in root_logger.handlers
        assert root_logger.level == logging.WARNING
        assert not isinstance(second_handler.formatter, JSONFormatter)
    finally:
        for handler in list(root_logger.handlers):
            if handler.get_name() == "credit_decision":
                root_logger.removeHandler(handler)
        root_logger.setLevel(original_level)
