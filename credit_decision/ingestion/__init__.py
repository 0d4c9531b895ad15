"""Ingestion layer converting generic payload maps into typed domain entities."""

from .field_tables import (
    APPLICANT_FIELDS,
    APPLICATION_FIELDS,
    INFORMATION_SOURCES,
    FieldSpec,
    InformationSourceSpec,
    ingestion_parse_date,
    ingestion_parse_identifier,
    ingestion_parse_label,
    ingestion_parse_timestamp,
)
from .service import UNKNOWN_FIELD_POLICIES, IngestedPayload, UnknownFieldPolicy, ingestion_ingest_payload

__all__ = [
    "APPLICANT_FIELDS",
    "APPLICATION_FIELDS",
    "INFORMATION_SOURCES",
    "UNKNOWN_FIELD_POLICIES",
    "FieldSpec",
    "InformationSourceSpec",
    "IngestedPayload",
    "UnknownFieldPolicy",
    "ingestion_ingest_payload",
    "ingestion_parse_date",
    "ingestion_parse_identifier",
    "ingestion_parse_label",
    "ingestion_parse_timestamp",
]
