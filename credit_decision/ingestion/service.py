"""Payload ingestion that coerces generic key/value maps into domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Final, Literal

from credit_decision.domain import Application, ValidationError

from .field_tables import (
    APPLICATION_FIELDS,
    INFORMATION_SOURCES,
    TOP_LEVEL_KEYS,
    FieldSpec,
    ingestion_field_table_known_names,
)

UnknownFieldPolicy = Literal["ignore", "fail"]

UNKNOWN_FIELD_POLICIES: Final[tuple[str, ...]] = ("ignore", "fail")


@dataclass(frozen=True)
class IngestedPayload:
    """Typed entities produced from one inbound payload.

    Attributes:
        application: Typed application entity.
        information: Read-only mapping of information-source name to entity.
    """

    application: Application
    information: Mapping[str, object]


def ingestion_ingest_payload(
    payload: Mapping[str, Any],
    unknown_field_policy: UnknownFieldPolicy = "ignore",
) -> IngestedPayload:
    """Coerce one generic payload into typed application and information entities.

    Args:
        payload: Parsed request body with `application` and `information` maps.
        unknown_field_policy: `ignore` drops unknown keys, `fail` rejects them.

    Returns:
        IngestedPayload: Fully constructed entities.

    Raises:
        ValidationError: Raised when a field is missing, malformed, or unknown under `fail` policy.
        ValueError: Raised when the policy value is unsupported.
    """

    if unknown_field_policy not in UNKNOWN_FIELD_POLICIES:
        raise ValueError(f"unsupported unknown_field_policy={unknown_field_policy}")
    if not isinstance(payload, Mapping):
        raise ValidationError("payload", "expected a mapping")

    _ingestion_apply_unknown_field_policy(
        section=payload,
        known_names=TOP_LEVEL_KEYS,
        section_path="",
        unknown_field_policy=unknown_field_policy,
    )

    application_section = _ingestion_require_section(payload, "application", "application")
    application_values = _ingestion_parse_section(
        section=application_section,
        fields=APPLICATION_FIELDS,
        section_path="application",
        unknown_field_policy=unknown_field_policy,
    )
    application = Application(**application_values)

    information_section = _ingestion_require_section(payload, "information", "information")
    information = _ingestion_parse_information(
        information_section=information_section,
        unknown_field_policy=unknown_field_policy,
    )
    return IngestedPayload(application=application, information=MappingProxyType(information))


def _ingestion_parse_information(
    information_section: Mapping[str, Any],
    unknown_field_policy: UnknownFieldPolicy,
) -> dict[str, object]:
    """Build every known information-source entity from the `information` map.

    Args:
        information_section: Payload `information` mapping.
        unknown_field_policy: Unknown key handling policy.

    Returns:
        dict[str, object]: Source name to entity, in source table order.

    Raises:
        ValidationError: Raised when a required source is absent or invalid.
    """

    _ingestion_apply_unknown_field_policy(
        section=information_section,
        known_names=frozenset(INFORMATION_SOURCES),
        section_path="information",
        unknown_field_policy=unknown_field_policy,
    )

    information: dict[str, object] = {}
    for source_name, source_spec in INFORMATION_SOURCES.items():
        source_path = f"information.{source_name}"
        if information_section.get(source_name) is None:
            if source_spec.required:
                raise ValidationError(source_path, "required information source is missing")
            continue

        source_section = _ingestion_require_section(information_section, source_name, source_path)
        source_values = _ingestion_parse_section(
            section=source_section,
            fields=source_spec.fields,
            section_path=source_path,
            unknown_field_policy=unknown_field_policy,
        )
        information[source_name] = source_spec.builder(**source_values)
    return information


def _ingestion_parse_section(
    section: Mapping[str, Any],
    fields: tuple[FieldSpec, ...],
    section_path: str,
    unknown_field_policy: UnknownFieldPolicy,
) -> dict[str, object]:
    """Parse one payload section through its field table.

    Args:
        section: Payload mapping for one entity.
        fields: Field table for the entity.
        section_path: Dotted path prefix for error messages.
        unknown_field_policy: Unknown key handling policy.

    Returns:
        dict[str, object]: Entity constructor keyword arguments.

    Raises:
        ValidationError: Raised when any field fails parsing or presence checks.
    """

    _ingestion_apply_unknown_field_policy(
        section=section,
        known_names=ingestion_field_table_known_names(fields),
        section_path=section_path,
        unknown_field_policy=unknown_field_policy,
    )

    parsed_values: dict[str, object] = {}
    for field_spec in fields:
        present_names = [name for name in field_spec.external_names if name in section]
        if len(present_names) > 1:
            raise ValidationError(
                f"{section_path}.{field_spec.external_names[0]}",
                f"conflicting keys {present_names} for one field",
            )

        external_name = present_names[0] if present_names else field_spec.external_names[0]
        field_path = f"{section_path}.{external_name}"
        parsed_value = field_spec.parser(section.get(external_name), field_path)
        if parsed_value is None:
            if field_spec.required:
                raise ValidationError(field_path, "required field is missing")
            if field_spec.default_factory is not None:
                parsed_value = field_spec.default_factory()
        parsed_values[field_spec.target_name] = parsed_value
    return parsed_values


def _ingestion_require_section(
    container: Mapping[str, Any],
    key: str,
    section_path: str,
) -> Mapping[str, Any]:
    section = container.get(key)
    if section is None:
        raise ValidationError(section_path, "required section is missing")
    if not isinstance(section, Mapping):
        raise ValidationError(section_path, "expected a mapping")
    return section


def _ingestion_apply_unknown_field_policy(
    section: Mapping[str, Any],
    known_names: frozenset[str],
    section_path: str,
    unknown_field_policy: UnknownFieldPolicy,
) -> None:
    if unknown_field_policy == "ignore":
        return

    unknown_names = sorted(str(name) for name in section if name not in known_names)
    if unknown_names:
        prefix = f"{section_path}." if section_path else ""
        raise ValidationError(f"{prefix}{unknown_names[0]}", "unknown field")


__all__ = [
    "UNKNOWN_FIELD_POLICIES",
    "IngestedPayload",
    "UnknownFieldPolicy",
    "ingestion_ingest_payload",
]
