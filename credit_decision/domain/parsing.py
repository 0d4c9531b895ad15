"""Shared ISO-8601 date and timestamp parsing helpers.

This module centralizes the normalization used by ingestion field parsers so
date and timestamp contracts remain deterministic across every entity.
"""

from __future__ import annotations

from datetime import date, datetime, timezone


def domain_normalize_optional_text(value: object | None) -> str | None:
    """Normalize one optional text value, mapping blank strings to None.

    Args:
        value: Candidate value from inbound payload.

    Returns:
        str | None: Stripped text value or None when missing/blank/non-text.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if value is None:
        return None
    if not isinstance(value, str):
        return None

    normalized_value = value.strip()
    if not normalized_value:
        return None
    return normalized_value


def domain_parse_iso_date(value: str) -> date | None:
    """Parse one strict ISO-8601 calendar date.

    Args:
        value: Candidate date text such as `2000-01-01`.

    Returns:
        date | None: Parsed date, or None when blank or malformed.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    normalized_value = value.strip()
    if not normalized_value:
        return None

    try:
        return date.fromisoformat(normalized_value)
    except ValueError:
        return None


def domain_parse_iso_timestamp_utc(value: str) -> datetime | None:
    """Parse one strict ISO-8601 date-time and normalize it to UTC.

    Values without an offset are interpreted as UTC. A date-only value resolves
    to midnight UTC of that date.

    Args:
        value: Candidate timestamp text.

    Returns:
        datetime | None: Timezone-aware UTC timestamp, or None when blank, malformed,
            or outside the representable UTC range.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    normalized_value = value.strip()
    if not normalized_value:
        return None

    try:
        parsed_value = datetime.fromisoformat(normalized_value)
    except ValueError:
        return None

    # Offsets can push values at the edges of the calendar out of the UTC range.
    try:
        return domain_normalize_timestamp_to_utc(parsed_value)
    except OverflowError:
        return None


def domain_normalize_timestamp_to_utc(value: datetime) -> datetime:
    """Normalize a datetime to a timezone-aware UTC value.

    Args:
        value: Parsed timestamp value.

    Returns:
        datetime: UTC timestamp; naive input is assumed to already be UTC.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


__all__ = [
    "domain_normalize_optional_text",
    "domain_normalize_timestamp_to_utc",
    "domain_parse_iso_date",
    "domain_parse_iso_timestamp_utc",
]
