"""Typed domain entities for preliminary credit-application checks.

Entities are immutable value objects. Each one validates its own construction
contract so no component can hold a half-valid Application, Applicant, or
CheckResult.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum

from .errors import ContractViolationError


class CheckOutcome(str, Enum):
    """Enumerated outcome of one check execution."""

    PASS = "pass"
    FAIL = "fail"


@dataclass(frozen=True)
class Application:
    """One attempt by a party to obtain a credit product.

    Attributes:
        application_id: Opaque non-blank application identifier.
        created_at: Timezone-aware submission instant.
        expiry_deadline: Optional timezone-aware deadline; None never expires.
        terminal_state: Optional final disposition label; None while in progress.
    """

    application_id: str
    created_at: datetime
    expiry_deadline: datetime | None = None
    terminal_state: str | None = None

    def __post_init__(self) -> None:
        """Validate application construction contract.

        Returns:
            None: Raises when contract is violated.

        Raises:
            ContractViolationError: Raised when identifiers, timestamps, or labels are invalid.
        """

        _domain_require_non_blank_text(self.application_id, "application_id")
        _domain_require_aware_datetime(self.created_at, "created_at")
        if self.expiry_deadline is not None:
            _domain_require_aware_datetime(self.expiry_deadline, "expiry_deadline")
        if self.terminal_state is not None:
            _domain_require_non_blank_text(self.terminal_state, "terminal_state")

    def application_is_active(self, now: datetime) -> bool:
        """Return whether the application has not yet expired at `now`.

        Args:
            now: Timezone-aware reference instant.

        Returns:
            bool: True when no deadline is set or the deadline is strictly after `now`.

        Raises:
            ContractViolationError: Raised when `now` is naive.
        """

        _domain_require_aware_datetime(now, "now")
        if self.expiry_deadline is None:
            return True
        return self.expiry_deadline > now


@dataclass(frozen=True)
class Applicant:
    """Party whose information is evaluated.

    Attributes:
        applicant_id: Opaque non-blank applicant identifier.
        dob: Date of birth.
    """

    applicant_id: str
    dob: date

    def __post_init__(self) -> None:
        """Validate applicant construction contract.

        Returns:
            None: Raises when contract is violated.

        Raises:
            ContractViolationError: Raised when identifier or date of birth is invalid.
        """

        _domain_require_non_blank_text(self.applicant_id, "applicant_id")
        if isinstance(self.dob, datetime) or not isinstance(self.dob, date):
            raise ContractViolationError("dob must be a date value")

    def applicant_adulthood_instant(self, years: int = 18) -> datetime | None:
        """Return the UTC midnight instant of the applicant's `years`-th birthday.

        A 29 February birthday resolves to 28 February in non-leap target years.

        Args:
            years: Age in whole years.

        Returns:
            datetime | None: Timezone-aware birthday instant, or None when the
                birthday falls after the last representable year.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        target_year = self.dob.year + years
        if target_year > date.max.year:
            return None
        if self.dob.month == 2 and self.dob.day == 29 and not calendar.isleap(target_year):
            birthday = date(target_year, 2, 28)
        else:
            birthday = self.dob.replace(year=target_year)
        return datetime(birthday.year, birthday.month, birthday.day, tzinfo=timezone.utc)


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one check execution.

    Attributes:
        check_label: Label of the check that produced this result.
        check_result: Enumerated pass/fail outcome.
        check_run_at: Timezone-aware instant the check executed.
    """

    check_label: str
    check_result: CheckOutcome
    check_run_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate check result construction contract.

        Raw `"pass"`/`"fail"` strings are normalized to `CheckOutcome`.

        Returns:
            None: Raises when contract is violated.

        Raises:
            ContractViolationError: Raised when label, outcome, or run instant is invalid.
        """

        _domain_require_non_blank_text(self.check_label, "check_label")
        object.__setattr__(self, "check_result", domain_coerce_check_outcome(self.check_result))
        _domain_require_aware_datetime(self.check_run_at, "check_run_at")

    def check_result_passed(self) -> bool:
        """Return whether this result is a pass."""

        return self.check_result is CheckOutcome.PASS


def domain_coerce_check_outcome(value: object) -> CheckOutcome:
    """Resolve one outcome value into `CheckOutcome`.

    Args:
        value: `CheckOutcome` member or its raw string value.

    Returns:
        CheckOutcome: Resolved outcome.

    Raises:
        ContractViolationError: Raised when the value is not `pass` or `fail`.
    """

    if isinstance(value, CheckOutcome):
        return value
    if isinstance(value, str):
        try:
            return CheckOutcome(value)
        except ValueError:
            pass
    allowed_values = ", ".join(outcome.value for outcome in CheckOutcome)
    raise ContractViolationError(f"check_result must be one of ({allowed_values}), got {value!r}")


def _domain_require_non_blank_text(value: object, field_name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ContractViolationError(f"{field_name} must be a non-blank string")


def _domain_require_aware_datetime(value: object, field_name: str) -> None:
    if not isinstance(value, datetime):
        raise ContractViolationError(f"{field_name} must be a datetime value")
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        raise ContractViolationError(f"{field_name} must be timezone-aware")


__all__ = [
    "Applicant",
    "Application",
    "CheckOutcome",
    "CheckResult",
    "domain_coerce_check_outcome",
]
