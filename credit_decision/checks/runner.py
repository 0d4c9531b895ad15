"""Sequential check runner preserving registration order."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from credit_decision.domain import Application, CheckResult, ContractViolationError

from .registry import DEFAULT_CHECK_REGISTRY, CheckRegistry

logger = logging.getLogger(__name__)


def checks_run_all(
    application: Application,
    information: Mapping[str, object],
    registry: CheckRegistry = DEFAULT_CHECK_REGISTRY,
) -> tuple[CheckResult, ...]:
    """Run every registered check and collect every result.

    No check short-circuits another; exceptions raised by a check propagate.

    Args:
        application: Typed application entity.
        information: Information-source entities keyed by source name.
        registry: Registry to execute.

    Returns:
        tuple[CheckResult, ...]: One result per check, in registration order.

    Raises:
        ContractViolationError: Raised when a check returns a non-result or a mislabeled result.
    """

    check_results: list[CheckResult] = []
    for registered_check in registry.checks:
        check_result = registered_check.check_function(application, **information)
        if not isinstance(check_result, CheckResult):
            raise ContractViolationError(
                f"check {registered_check.check_label} returned {type(check_result).__name__}, expected CheckResult"
            )
        if check_result.check_label != registered_check.check_label:
            raise ContractViolationError(
                f"check {registered_check.check_label} reported label {check_result.check_label}"
            )
        logger.debug(
            "check %s -> %s",
            check_result.check_label,
            check_result.check_result.value,
            extra={"check_label": check_result.check_label, "application_id": application.application_id},
        )
        check_results.append(check_result)
    return tuple(check_results)


__all__ = ["checks_run_all"]
