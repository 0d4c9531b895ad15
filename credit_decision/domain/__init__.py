"""Domain entities, errors, and parsing helpers shared across layers."""

from .errors import ContractViolationError, ValidationError
from .models import Applicant, Application, CheckOutcome, CheckResult, domain_coerce_check_outcome
from .parsing import (
    domain_normalize_optional_text,
    domain_normalize_timestamp_to_utc,
    domain_parse_iso_date,
    domain_parse_iso_timestamp_utc,
)

__all__ = [
    "Applicant",
    "Application",
    "CheckOutcome",
    "CheckResult",
    "ContractViolationError",
    "ValidationError",
    "domain_coerce_check_outcome",
    "domain_normalize_optional_text",
    "domain_normalize_timestamp_to_utc",
    "domain_parse_iso_date",
    "domain_parse_iso_timestamp_utc",
]
