"""Static field tables mapping external payload names to typed parsers.

Every entity field has exactly one parsing entry point that takes the external
(string/null) representation and returns the typed value, None when absent, or
raises `ValidationError`. Tables are built at import time and never mutated.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from types import MappingProxyType
from typing import Final
from uuid import uuid4

from credit_decision.domain import (
    Applicant,
    ValidationError,
    domain_normalize_optional_text,
    domain_parse_iso_date,
    domain_parse_iso_timestamp_utc,
)

FieldParser = Callable[[object, str], object | None]


@dataclass(frozen=True)
class FieldSpec:
    """Ingestion contract for one entity field.

    Attributes:
        target_name: Entity attribute name.
        external_names: Accepted payload keys, first one is canonical.
        parser: Parsing entry point for the external representation.
        required: Whether an absent value is a validation failure.
        default_factory: Optional factory used when an optional value is absent.
    """

    target_name: str
    external_names: tuple[str, ...]
    parser: FieldParser
    required: bool = False
    default_factory: Callable[[], object] | None = None


@dataclass(frozen=True)
class InformationSourceSpec:
    """Ingestion contract for one named information source.

    Attributes:
        source_name: Key under the payload `information` mapping.
        fields: Field specs for the source entity.
        builder: Entity constructor receiving parsed fields as keyword arguments.
        required: Whether the source must be present in the payload.
    """

    source_name: str
    fields: tuple[FieldSpec, ...]
    builder: Callable[..., object]
    required: bool = True


def ingestion_parse_timestamp(value: object, field_path: str) -> datetime | None:
    """Parse one ISO-8601 timestamp field into an aware UTC datetime.

    Args:
        value: External value (string or None).
        field_path: Dotted payload path used in error messages.

    Returns:
        datetime | None: Parsed timestamp or None when absent/blank.

    Raises:
        ValidationError: Raised when value is not a string or not ISO-8601.
    """

    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(field_path, "expected an ISO-8601 date-time string")
    if domain_normalize_optional_text(value) is None:
        return None

    parsed_value = domain_parse_iso_timestamp_utc(value)
    if parsed_value is None:
        raise ValidationError(field_path, f"malformed ISO-8601 date-time {value!r}")
    return parsed_value


def ingestion_parse_date(value: object, field_path: str) -> date | None:
    """Parse one ISO-8601 calendar date field.

    Args:
        value: External value (string or None).
        field_path: Dotted payload path used in error messages.

    Returns:
        date | None: Parsed date or None when absent/blank.

    Raises:
        ValidationError: Raised when value is not a string or not an ISO-8601 date.
    """

    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(field_path, "expected an ISO-8601 date string")
    if domain_normalize_optional_text(value) is None:
        return None

    parsed_value = domain_parse_iso_date(value)
    if parsed_value is None:
        raise ValidationError(field_path, f"malformed ISO-8601 date {value!r}")
    return parsed_value


def ingestion_parse_identifier(value: object, field_path: str) -> str | None:
    """Parse one opaque identifier field.

    Args:
        value: External value (string, integer, or None).
        field_path: Dotted payload path used in error messages.

    Returns:
        str | None: Stripped identifier or None when absent/blank.

    Raises:
        ValidationError: Raised when value is neither text nor an integer.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(field_path, "expected a string or integer identifier")
    if isinstance(value, int):
        return str(value)
    if not isinstance(value, str):
        raise ValidationError(field_path, "expected a string or integer identifier")
    return domain_normalize_optional_text(value)


def ingestion_parse_label(value: object, field_path: str) -> str | None:
    """Parse one enumerated label field with presence/absence check only.

    Args:
        value: External value (string or None).
        field_path: Dotted payload path used in error messages.

    Returns:
        str | None: Stripped label or None when absent/blank.

    Raises:
        ValidationError: Raised when value is not a string.
    """

    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(field_path, "expected a string label")
    return domain_normalize_optional_text(value)


def _ingestion_generate_identifier() -> str:
    return uuid4().hex


APPLICATION_FIELDS: Final[tuple[FieldSpec, ...]] = (
    FieldSpec(
        target_name="application_id",
        external_names=("application_id",),
        parser=ingestion_parse_identifier,
        default_factory=_ingestion_generate_identifier,
    ),
    FieldSpec(
        target_name="created_at",
        external_names=("applied_at", "created_at"),
        parser=ingestion_parse_timestamp,
        required=True,
    ),
    FieldSpec(
        target_name="expiry_deadline",
        external_names=("expiry_deadline",),
        parser=ingestion_parse_timestamp,
    ),
    FieldSpec(
        target_name="terminal_state",
        external_names=("terminal_state",),
        parser=ingestion_parse_label,
    ),
)

APPLICANT_FIELDS: Final[tuple[FieldSpec, ...]] = (
    FieldSpec(
        target_name="applicant_id",
        external_names=("applicant_id",),
        parser=ingestion_parse_identifier,
        default_factory=_ingestion_generate_identifier,
    ),
    FieldSpec(
        target_name="dob",
        external_names=("dob",),
        parser=ingestion_parse_date,
        required=True,
    ),
)

INFORMATION_SOURCES: Final[Mapping[str, InformationSourceSpec]] = MappingProxyType(
    {
        "applicant": InformationSourceSpec(
            source_name="applicant",
            fields=APPLICANT_FIELDS,
            builder=Applicant,
        ),
    }
)

TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset({"application", "information"})


def ingestion_field_table_known_names(fields: tuple[FieldSpec, ...]) -> frozenset[str]:
    """Return every external payload key accepted by a field table.

    Args:
        fields: Field table.

    Returns:
        frozenset[str]: Accepted external key names.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return frozenset(name for field_spec in fields for name in field_spec.external_names)


def _ingestion_validate_field_tables() -> None:
    tables = {"application": APPLICATION_FIELDS}
    tables.update({name: spec.fields for name, spec in INFORMATION_SOURCES.items()})
    for table_name, fields in tables.items():
        seen_targets: set[str] = set()
        seen_names: set[str] = set()
        for field_spec in fields:
            if not field_spec.external_names:
                raise ValueError(f"{table_name}.{field_spec.target_name} declares no external names")
            if field_spec.target_name in seen_targets:
                raise ValueError(f"{table_name}.{field_spec.target_name} declared twice")
            overlapping_names = seen_names.intersection(field_spec.external_names)
            if overlapping_names:
                raise ValueError(f"{table_name} maps {sorted(overlapping_names)} to more than one field")
            if field_spec.required and field_spec.default_factory is not None:
                raise ValueError(f"{table_name}.{field_spec.target_name} cannot be required and defaulted")
            seen_targets.add(field_spec.target_name)
            seen_names.update(field_spec.external_names)


_ingestion_validate_field_tables()


__all__ = [
    "APPLICANT_FIELDS",
    "APPLICATION_FIELDS",
    "INFORMATION_SOURCES",
    "TOP_LEVEL_KEYS",
    "FieldParser",
    "FieldSpec",
    "InformationSourceSpec",
    "ingestion_field_table_known_names",
    "ingestion_parse_date",
    "ingestion_parse_identifier",
    "ingestion_parse_label",
    "ingestion_parse_timestamp",
]
