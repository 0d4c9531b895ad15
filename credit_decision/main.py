"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either launches the FastAPI
service or evaluates one payload file offline.
"""

import argparse
import json
import sys
from pathlib import Path

import uvicorn

from credit_decision.bootstrap import bootstrap_create_application, bootstrap_create_pipeline
from credit_decision.config import config_load_settings
from credit_decision.domain import ValidationError
from credit_decision.observability import observability_setup_logging


def main(argv: list[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 1 when an evaluated payload is rejected.
    """

    argument_parser = argparse.ArgumentParser(description="Credit decision preliminary checks entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "evaluate"),
        help="Runtime command: `api` starts server, `evaluate` runs checks on one JSON payload file",
        type=str,
    )
    argument_parser.add_argument(
        "payload_path",
        nargs="?",
        type=Path,
        help="Path to a JSON payload file for `evaluate`",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    settings = config_load_settings()

    if parsed_arguments.command == "evaluate":
        if parsed_arguments.payload_path is None:
            argument_parser.error("payload_path is required for `evaluate`")
        observability_setup_logging(level=settings.log_level, fmt=settings.log_format)
        payload = json.loads(parsed_arguments.payload_path.read_text(encoding="utf-8"))
        pipeline = bootstrap_create_pipeline(settings)
        try:
            rendered_payload = pipeline.pipeline_evaluate(payload)
        except ValidationError as error:
            print(f"VALIDATION_ERROR: {error}", file=sys.stderr)
            raise SystemExit(1) from error
        print(json.dumps(rendered_payload, indent=2))
        return

    application = bootstrap_create_application(settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


if __name__ == "__main__":
    main()
