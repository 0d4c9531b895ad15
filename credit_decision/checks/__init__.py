"""Check layer: check contract, registry, and runner."""

from .eligibility import (
    APPLICANT_IS_18_PLUS_LABEL,
    APPLICATION_NOT_EXPIRED_LABEL,
    MINIMUM_APPLICANT_AGE_YEARS,
    CheckClock,
    applicant_is_18_plus,
    application_not_expired,
    checks_build_application_not_expired,
    checks_utc_now,
)
from .interfaces import CheckFunction
from .registry import DEFAULT_CHECK_REGISTRY, CheckRegistry, RegisteredCheck, check_registry_build
from .runner import checks_run_all

__all__ = [
    "APPLICANT_IS_18_PLUS_LABEL",
    "APPLICATION_NOT_EXPIRED_LABEL",
    "DEFAULT_CHECK_REGISTRY",
    "MINIMUM_APPLICANT_AGE_YEARS",
    "CheckClock",
    "CheckFunction",
    "CheckRegistry",
    "RegisteredCheck",
    "applicant_is_18_plus",
    "application_not_expired",
    "check_registry_build",
    "checks_build_application_not_expired",
    "checks_run_all",
    "checks_utc_now",
]
