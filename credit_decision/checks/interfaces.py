"""Typed interfaces for check-layer responsibilities."""

from typing import Protocol

from credit_decision.domain import Application, CheckResult


class CheckFunction(Protocol):
    """Port definition for one preliminary check.

    Checks receive every information entity as a keyword argument and discard
    the ones they do not consume, so the runner can pass a uniform argument set.
    """

    def __call__(self, application: Application, **information: object) -> CheckResult:
        """Evaluate one check against the request entities.

        Args:
            application: Typed application entity.
            information: Information-source entities keyed by source name.

        Returns:
            CheckResult: Exactly one result for this check.

        Raises:
            ContractViolationError: Raised when a result cannot be constructed.
        """
