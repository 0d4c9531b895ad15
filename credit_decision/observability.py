"""Logging setup for runtime entrypoints.

`observability_setup_logging` is called once by bootstrap. JSON output emits
one object per line; text output is meant for local development.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

_OBSERVABILITY_EXTRA_FIELDS = ("application_id", "field_name", "check_label", "path")
_OBSERVABILITY_HANDLER_NAME = "credit_decision"


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _OBSERVABILITY_EXTRA_FIELDS:
            value = record.__dict__.get(key)
            if value is not None:
                log_payload[key] = value
        if record.exc_info:
            log_payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_payload, ensure_ascii=False)


def observability_setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Install the service log handler on the root logger.

    Repeated calls replace the previously installed handler instead of adding
    another one.

    Args:
        level: Root logger level name.
        fmt: `json` for JSON lines, anything else for plain text.

    Returns:
        logging.Handler: Installed handler.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    root_logger = logging.getLogger()
    for existing_handler in list(root_logger.handlers):
        if existing_handler.get_name() == _OBSERVABILITY_HANDLER_NAME:
            root_logger.removeHandler(existing_handler)

    handler = logging.StreamHandler()
    handler.set_name(_OBSERVABILITY_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


__all__ = ["JSONFormatter", "observability_setup_logging"]
