"""Shape validators for the two request schemas.

Every check returns a ``ValidationSuccess`` carrying the narrowed value or a
``ValidationFailure`` carrying a debuggable message; nothing here raises on
malformed input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Union

from schemabridge.translation.types import KNOWN_MESSAGE_ROLES


@dataclass(frozen=True, slots=True)
class ValidationSuccess:
    value: Any = None
    is_valid: Literal[True] = True


@dataclass(frozen=True, slots=True)
class ValidationFailure:
    error: str
    field: str | None = None
    index: int | None = None
    is_valid: Literal[False] = False


ValidationResult = Union[ValidationSuccess, ValidationFailure]


def json_type_name(value: object) -> str:
    """Name a value the way a JSON payload author would."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def is_non_empty_string(value: object) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_boolean(value: object) -> bool:
    return isinstance(value, bool)


def is_plain_object(value: object) -> bool:
    return isinstance(value, dict)


def is_non_empty_object(value: object) -> bool:
    return isinstance(value, dict) and len(value) > 0


def is_array(value: object) -> bool:
    return isinstance(value, list)


def is_tool_choice(value: object) -> bool:
    return isinstance(value, str) or isinstance(value, dict)


def is_valid_message_role(role: object) -> bool:
    return isinstance(role, str) and role in KNOWN_MESSAGE_ROLES


def validate_is_object(value: object) -> ValidationResult:
    if not isinstance(value, dict):
        return ValidationFailure(error="Request must be a valid object")
    return ValidationSuccess(value=value)


def validate_model(model: object) -> ValidationResult:
    if not is_non_empty_string(model):
        return ValidationFailure(
            error="Model field is required and must be a non-empty string",
            field="model",
        )
    return ValidationSuccess(value=model)


def validate_message(msg: object, index: int) -> ValidationResult:
    if not isinstance(msg, dict):
        return ValidationFailure(
            error=f"Message at index {index} is invalid: got {json_type_name(msg)}",
            field="message",
            index=index,
        )

    if "role" not in msg or "content" not in msg:
        return ValidationFailure(
            error=f"Message at index {index} is invalid: must have role and content fields",
            field="message",
            index=index,
        )

    role = msg["role"]
    if not isinstance(role, str):
        return ValidationFailure(
            error=f"Message role must be a string, got {json_type_name(role)} at index {index}",
            field="role",
            index=index,
        )
    if not is_valid_message_role(role):
        return ValidationFailure(
            error=f"Invalid role '{role}' at index {index}. Must be one of: {', '.join(KNOWN_MESSAGE_ROLES)}",
            field="role",
            index=index,
        )

    content = msg["content"]
    if not isinstance(content, str):
        return ValidationFailure(
            error=f"Message content must be a string, got {json_type_name(content)} at index {index}",
            field="content",
            index=index,
        )
    return ValidationSuccess(value=msg)


def validate_messages_array(messages: object, field: str = "messages") -> ValidationResult:
    if not isinstance(messages, list) or not messages:
        return ValidationFailure(
            error="Messages array is required and must contain at least one message",
            field=field,
        )
    for index, msg in enumerate(messages):
        checked = validate_message(msg, index)
        if not checked.is_valid:
            return checked
    return ValidationSuccess(value=messages)


def validate_response_input(raw_input: object) -> ValidationResult:
    """Check a single-input ``input`` value: a non-empty string or message list."""
    if raw_input is None:
        return ValidationFailure(error="Input field is required", field="input")
    if not isinstance(raw_input, (str, list)):
        return ValidationFailure(error="Input must be a string or messages array", field="input")
    if isinstance(raw_input, str):
        if len(raw_input) == 0:
            return ValidationFailure(error="Input string cannot be empty", field="input")
        return ValidationSuccess(value=raw_input)
    if not raw_input:
        return ValidationFailure(error="Input messages array cannot be empty", field="input")
    for index, msg in enumerate(raw_input):
        checked = validate_message(msg, index)
        if not checked.is_valid:
            return checked
    return ValidationSuccess(value=raw_input)


def validate_chat_request(payload: object) -> ValidationResult:
    """Validate the message-array schema; success carries the payload dict."""
    checked = validate_is_object(payload)
    if not checked.is_valid:
        return checked
    checked = validate_model(payload.get("model"))
    if not checked.is_valid:
        return checked
    checked = validate_messages_array(payload.get("messages"))
    if not checked.is_valid:
        return checked
    return ValidationSuccess(value=payload)


def validate_response_request(payload: object) -> ValidationResult:
    """Validate the single-input schema; success carries the payload dict."""
    checked = validate_is_object(payload)
    if not checked.is_valid:
        return checked
    checked = validate_model(payload.get("model"))
    if not checked.is_valid:
        return checked
    checked = validate_response_input(payload.get("input"))
    if not checked.is_valid:
        return checked
    return ValidationSuccess(value=payload)


def is_chat_completions_request(payload: object) -> bool:
    return validate_chat_request(payload).is_valid


def is_response_api_request(payload: object) -> bool:
    return validate_response_request(payload).is_valid
