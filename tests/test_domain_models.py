"""Regression tests for domain entity construction contracts."""

from dataclasses import FrozenInstanceError
from datetime import date, datetime, timedelta, timezone

import pytest

from credit_decision.domain import (
    Applicant,
    Application,
    CheckOutcome,
    CheckResult,
    ContractViolationError,
)


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def test_domain_check_result_normalizes_raw_outcome_strings() -> None:
    """Normalize raw `pass`/`fail` strings into `CheckOutcome` members.

    Returns:
        None: Assertions validate outcome normalization.

    Raises:
        AssertionError: Raised when normalization is incorrect.
    """

    passed = CheckResult(check_label="some_check", check_result="pass")
    failed = CheckResult(check_label="some_check", check_result=CheckOutcome.FAIL)

    assert passed.check_result is CheckOutcome.PASS
    assert passed.check_result_passed()
    assert failed.check_result is CheckOutcome.FAIL
    assert not failed.check_result_passed()


def test_domain_check_result_rejects_out_of_enum_outcome() -> None:
    """Reject construction with an outcome outside `pass`/`fail`.

    Returns:
        None: Assertions validate hard failure on invalid outcome.

    Raises:
        AssertionError: Raised when invalid outcome is accepted.
    """

    with pytest.raises(ContractViolationError, match="check_result must be one of"):
        CheckResult(check_label="some_check", check_result="maybe")
    with pytest.raises(ContractViolationError):
        CheckResult(check_label="some_check", check_result=True)


def test_domain_check_result_defaults_run_instant_to_now_utc() -> None:
    """Default `check_run_at` to the current UTC instant.

    Returns:
        None: Assertions validate default timestamp behavior.

    Raises:
        AssertionError: Raised when default timestamp is missing or naive.
    """

    before = datetime.now(timezone.utc)
    check_result = CheckResult(check_label="some_check", check_result=CheckOutcome.PASS)
    after = datetime.now(timezone.utc)

    assert check_result.check_run_at.tzinfo is not None
    assert before <= check_result.check_run_at <= after


def test_domain_check_result_rejects_blank_label_and_naive_run_instant() -> None:
    """Reject blank labels and naive run timestamps.

    Returns:
        None: Assertions validate construction failures.

    Raises:
        AssertionError: Raised when invalid values are accepted.
    """

    with pytest.raises(ContractViolationError):
        CheckResult(check_label="  ", check_result=CheckOutcome.PASS)
    with pytest.raises(ContractViolationError, match="timezone-aware"):
        CheckResult(check_label="some_check", check_result=CheckOutcome.PASS, check_run_at=datetime(2020, 1, 1))


def test_domain_application_validates_construction() -> None:
    """Reject applications with blank ids, naive timestamps, or blank terminal state.

    Returns:
        None: Assertions validate application contract.

    Raises:
        AssertionError: Raised when invalid applications are accepted.
    """

    with pytest.raises(ContractViolationError):
        Application(application_id="", created_at=_utc(2020, 1, 1))
    with pytest.raises(ContractViolationError):
        Application(application_id="app-1", created_at=datetime(2020, 1, 1))
    with pytest.raises(ContractViolationError):
        Application(application_id="app-1", created_at=_utc(2020, 1, 1), expiry_deadline=datetime(2021, 1, 1))
    with pytest.raises(ContractViolationError):
        Application(application_id="app-1", created_at=_utc(2020, 1, 1), terminal_state=" ")

    application = Application(application_id="app-1", created_at=_utc(2020, 1, 1), terminal_state="rejected")
    assert application.terminal_state == "rejected"
    assert application.expiry_deadline is None


def test_domain_application_is_immutable() -> None:
    """Reject attribute assignment on constructed entities.

    Returns:
        None: Assertions validate immutability.

    Raises:
        AssertionError: Raised when entity can be mutated.
    """

    application = Application(application_id="app-1", created_at=_utc(2020, 1, 1))

    with pytest.raises(FrozenInstanceError):
        application.terminal_state = "rejected"  # type: ignore[misc]


def test_domain_application_is_active_uses_strict_deadline_comparison() -> None:
    """Treat the application as active only while the deadline is strictly ahead.

    Returns:
        None: Assertions validate deadline comparison.

    Raises:
        AssertionError: Raised when activity is computed incorrectly.
    """

    deadline = _utc(2021, 1, 1)
    application = Application(application_id="app-1", created_at=_utc(2020, 1, 1), expiry_deadline=deadline)
    open_application = Application(application_id="app-2", created_at=_utc(2020, 1, 1))

    assert application.application_is_active(deadline - timedelta(seconds=1))
    assert not application.application_is_active(deadline)
    assert not application.application_is_active(deadline + timedelta(days=1))
    assert open_application.application_is_active(_utc(2999, 1, 1))


def test_domain_applicant_validates_dob_type() -> None:
    """Reject datetime and non-date values for applicant date of birth.

    Returns:
        None: Assertions validate applicant contract.

    Raises:
        AssertionError: Raised when invalid dob is accepted.
    """

    with pytest.raises(ContractViolationError):
        Applicant(applicant_id="applicant-1", dob=datetime(2000, 1, 1))
    with pytest.raises(ContractViolationError):
        Applicant(applicant_id="applicant-1", dob="2000-01-01")  # type: ignore[arg-type]
    with pytest.raises(ContractViolationError):
        Applicant(applicant_id="", dob=date(2000, 1, 1))


def test_domain_applicant_adulthood_instant_handles_leap_day_birthdays() -> None:
    """Resolve 18th birthday instants, mapping 29 February to 28 February.

    Returns:
        None: Assertions validate birthday arithmetic.

    Raises:
        AssertionError: Raised when birthday instants are wrong.
    """

    assert Applicant(applicant_id="a", dob=date(2000, 1, 1)).applicant_adulthood_instant() == _utc(2018, 1, 1)
    assert Applicant(applicant_id="b", dob=date(2000, 2, 29)).applicant_adulthood_instant() == _utc(2018, 2, 28)
    assert Applicant(applicant_id="c", dob=date(2000, 2, 29)).applicant_adulthood_instant(years=20) == _utc(
        2020, 2, 29
    )


def test_domain_applicant_adulthood_instant_is_none_past_last_representable_year() -> None:
    """Return None when the birthday falls after the last representable year.

    Returns:
        None: Assertions validate calendar-edge birthday arithmetic.

    Raises:
        AssertionError: Raised when out-of-range birthdays raise or resolve.
    """

    assert Applicant(applicant_id="a", dob=date(9981, 12, 31)).applicant_adulthood_instant() == _utc(9999, 12, 31)
    assert Applicant(applicant_id="b", dob=date(9982, 1, 1)).applicant_adulthood_instant() is None
    assert Applicant(applicant_id="c", dob=date(9990, 1, 1)).applicant_adulthood_instant() is None
