"""Response projection from check results into a generic output map."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from credit_decision.domain import CheckResult

CHECK_RESULT_LIST_KEY: Final[str] = "check_result_list"


def render_check_result(check_result: CheckResult) -> dict[str, str]:
    """Project one check result into a JSON-compatible map.

    Args:
        check_result: Typed check result.

    Returns:
        dict[str, str]: Label, enumerated outcome value, and ISO-8601 run instant.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "check_label": check_result.check_label,
        "check_result": check_result.check_result.value,
        "check_run_at": check_result.check_run_at.isoformat(),
    }


def render_check_results(check_results: Iterable[CheckResult]) -> dict[str, list[dict[str, str]]]:
    """Project ordered check results into the response structure.

    Args:
        check_results: Check results in registration order.

    Returns:
        dict[str, list[dict[str, str]]]: Map with a single `check_result_list` array in input order.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {CHECK_RESULT_LIST_KEY: [render_check_result(check_result) for check_result in check_results]}


__all__ = ["CHECK_RESULT_LIST_KEY", "render_check_result", "render_check_results"]
