"""Unknown-field detection for forward compatibility."""

from __future__ import annotations

from typing import Any

from schemabridge.core.models import UnknownFieldsResult
from schemabridge.translation.field_mapping import (
    CHAT_TO_RESPONSE_RULES,
    RESPONSE_TO_CHAT_RULES,
    dropped_fields,
    known_fields,
)
from schemabridge.translation.types import SCHEMA_CHAT, SCHEMA_RESPONSE


KNOWN_CHAT_FIELDS: frozenset[str] = known_fields(CHAT_TO_RESPONSE_RULES)
KNOWN_RESPONSE_FIELDS: frozenset[str] = known_fields(RESPONSE_TO_CHAT_RULES)

# known to the message-array schema, no single-input equivalent
DROPPED_FIELDS: frozenset[str] = dropped_fields(CHAT_TO_RESPONSE_RULES)

# sub-keys of the single-input ``text`` object the engine understands
KNOWN_TEXT_FIELDS: frozenset[str] = frozenset({"format"})


def detect_unknown_chat_fields(payload: dict[str, Any]) -> UnknownFieldsResult:
    unknown = [key for key in payload if key not in KNOWN_CHAT_FIELDS]
    return UnknownFieldsResult(unknown_fields=unknown, cleaned_payload=dict(payload))


def detect_unknown_response_fields(payload: dict[str, Any]) -> UnknownFieldsResult:
    unknown: list[str] = []
    for key, value in payload.items():
        if key == "text" and isinstance(value, dict):
            unknown.extend(f"text.{sub_key}" for sub_key in value if sub_key not in KNOWN_TEXT_FIELDS)
        elif key not in KNOWN_RESPONSE_FIELDS:
            unknown.append(key)
    return UnknownFieldsResult(unknown_fields=unknown, cleaned_payload=dict(payload))


def detect_unknown_fields(payload: dict[str, Any], schema: str) -> UnknownFieldsResult:
    if schema == SCHEMA_CHAT:
        return detect_unknown_chat_fields(payload)
    if schema == SCHEMA_RESPONSE:
        return detect_unknown_response_fields(payload)
    raise ValueError(f"unknown schema: {schema}")


def is_dropped_field(field_name: str) -> bool:
    return field_name in DROPPED_FIELDS


def get_known_chat_fields() -> list[str]:
    return sorted(KNOWN_CHAT_FIELDS)


def get_known_response_fields() -> list[str]:
    return sorted(KNOWN_RESPONSE_FIELDS)


def get_dropped_fields() -> list[str]:
    return sorted(DROPPED_FIELDS)
