"""Immutable ordered registry of preliminary checks.

The default registry is built once at import time and shared read-only by every
request. Extending it returns a new registry; existing instances never change.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from .eligibility import (
    APPLICANT_IS_18_PLUS_LABEL,
    APPLICATION_NOT_EXPIRED_LABEL,
    applicant_is_18_plus,
    application_not_expired,
)
from .interfaces import CheckFunction


@dataclass(frozen=True)
class RegisteredCheck:
    """One registry entry.

    Attributes:
        check_label: Unique label the check reports in its results.
        check_function: Check implementation.
    """

    check_label: str
    check_function: CheckFunction


@dataclass(frozen=True)
class CheckRegistry:
    """Ordered, append-only collection of registered checks.

    Attributes:
        checks: Registered checks in registration order.
    """

    checks: tuple[RegisteredCheck, ...]

    def __post_init__(self) -> None:
        """Validate registry label contract.

        Returns:
            None: Raises when contract is violated.

        Raises:
            ValueError: Raised when a label is blank or registered twice.
        """

        seen_labels: set[str] = set()
        for registered_check in self.checks:
            if not isinstance(registered_check.check_label, str) or not registered_check.check_label.strip():
                raise ValueError("check_label must not be blank")
            if not callable(registered_check.check_function):
                raise ValueError(f"check_function for {registered_check.check_label} must be callable")
            if registered_check.check_label in seen_labels:
                raise ValueError(f"duplicate check_label={registered_check.check_label}")
            seen_labels.add(registered_check.check_label)

    def __len__(self) -> int:
        return len(self.checks)

    def check_registry_labels(self) -> tuple[str, ...]:
        """Return registered labels in registration order.

        Returns:
            tuple[str, ...]: Ordered check labels.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return tuple(registered_check.check_label for registered_check in self.checks)

    def check_registry_with(self, check_label: str, check_function: CheckFunction) -> CheckRegistry:
        """Return a new registry with one check appended.

        Args:
            check_label: Unique label for the new check.
            check_function: Check implementation.

        Returns:
            CheckRegistry: Extended registry; this instance is unchanged.

        Raises:
            ValueError: Raised when the label is blank or already registered.
        """

        return CheckRegistry(
            checks=self.checks + (RegisteredCheck(check_label=check_label, check_function=check_function),)
        )


def check_registry_build(checks: Iterable[tuple[str, CheckFunction]]) -> CheckRegistry:
    """Build a registry from ordered `(label, function)` pairs.

    Args:
        checks: Ordered label/function pairs.

    Returns:
        CheckRegistry: Validated registry.

    Raises:
        ValueError: Raised when labels are blank or duplicated.
    """

    return CheckRegistry(
        checks=tuple(
            RegisteredCheck(check_label=check_label, check_function=check_function)
            for check_label, check_function in checks
        )
    )


DEFAULT_CHECK_REGISTRY: Final[CheckRegistry] = check_registry_build(
    (
        (APPLICATION_NOT_EXPIRED_LABEL, application_not_expired),
        (APPLICANT_IS_18_PLUS_LABEL, applicant_is_18_plus),
    )
)


__all__ = ["DEFAULT_CHECK_REGISTRY", "CheckRegistry", "RegisteredCheck", "check_registry_build"]
