"""Preliminary eligibility checks evaluated against applicant/application data."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Final

from credit_decision.domain import Applicant, Application, CheckOutcome, CheckResult

from .interfaces import CheckFunction

APPLICATION_NOT_EXPIRED_LABEL: Final[str] = "application_not_expired"
APPLICANT_IS_18_PLUS_LABEL: Final[str] = "applicant_is_18_plus"
MINIMUM_APPLICANT_AGE_YEARS: Final[int] = 18

CheckClock = Callable[[], datetime]


def checks_utc_now() -> datetime:
    """Return the current timezone-aware UTC instant."""

    return datetime.now(timezone.utc)


def checks_build_application_not_expired(clock: CheckClock = checks_utc_now) -> CheckFunction:
    """Build the expiry check bound to one clock.

    Args:
        clock: Source of the timezone-aware instant the check runs at.

    Returns:
        CheckFunction: Expiry check reporting `application_not_expired`.

    Raises:
        ValueError: Raised when clock is invalid.
    """

    if clock is None:
        raise ValueError("clock must not be None")

    def application_not_expired(application: Application, **_information: object) -> CheckResult:
        """Pass while the application has no deadline or its deadline is still ahead.

        Args:
            application: Typed application entity.
            _information: Unused information-source entities.

        Returns:
            CheckResult: `pass` when active at check time, else `fail`.

        Raises:
            ContractViolationError: Raised when the clock returns a naive instant.
        """

        check_run_at = clock()
        outcome = CheckOutcome.PASS if application.application_is_active(check_run_at) else CheckOutcome.FAIL
        return CheckResult(
            check_label=APPLICATION_NOT_EXPIRED_LABEL,
            check_result=outcome,
            check_run_at=check_run_at,
        )

    return application_not_expired


application_not_expired: Final[CheckFunction] = checks_build_application_not_expired()


def applicant_is_18_plus(
    application: Application,
    applicant: Applicant,
    **_information: object,
) -> CheckResult:
    """Pass when the applicant turned 18 strictly before the application was created.

    A birthday beyond the last representable year is never before `created_at`.

    Args:
        application: Typed application entity; `created_at` is the reference clock.
        applicant: Typed applicant entity.
        _information: Unused information-source entities.

    Returns:
        CheckResult: `pass` when `dob + 18 years < created_at`, else `fail`.

    Raises:
        ContractViolationError: Raised when the result cannot be constructed.
    """

    adulthood_instant = applicant.applicant_adulthood_instant(years=MINIMUM_APPLICANT_AGE_YEARS)
    if adulthood_instant is not None and adulthood_instant < application.created_at:
        outcome = CheckOutcome.PASS
    else:
        outcome = CheckOutcome.FAIL
    return CheckResult(check_label=APPLICANT_IS_18_PLUS_LABEL, check_result=outcome)


__all__ = [
    "APPLICANT_IS_18_PLUS_LABEL",
    "APPLICATION_NOT_EXPIRED_LABEL",
    "MINIMUM_APPLICANT_AGE_YEARS",
    "CheckClock",
    "applicant_is_18_plus",
    "application_not_expired",
    "checks_build_application_not_expired",
    "checks_utc_now",
]
