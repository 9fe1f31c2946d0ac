"""Round-trip equivalence checks for the mapping tables.

A request is translated to the other schema and back, and a comparable subset
(model, primary message content, sampling parameters) of the original and the
back-translated request is compared field by field. Not used while serving
requests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from schemabridge.core.models import RoundTripResult, SemanticEquivalence, TranslationOptions
from schemabridge.translation.chat_to_response import translate_chat_to_response
from schemabridge.translation.response_to_chat import translate_response_to_chat
from schemabridge.translation.types import SCHEMA_CHAT, SCHEMA_RESPONSE


COMPARED_PARAMETERS = ("temperature", "max_tokens", "top_p", "stream")


@dataclass(slots=True)
class ComparisonFields:
    model: str | None = None
    content: str | None = None
    parameters: dict[str, Any] = field(default_factory=dict)


def _last_message_content(messages: object) -> str | None:
    if not isinstance(messages, list) or not messages:
        return None
    last = messages[-1]
    if isinstance(last, dict) and isinstance(last.get("content"), str):
        return last["content"]
    return None


def _first_present(obj: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if obj.get(key) is not None:
            return obj[key]
    return None


def extract_chat_fields(obj: object) -> ComparisonFields:
    if not isinstance(obj, dict):
        return ComparisonFields()
    return ComparisonFields(
        model=obj["model"] if isinstance(obj.get("model"), str) else None,
        content=_last_message_content(obj.get("messages")),
        parameters={
            "temperature": obj.get("temperature"),
            "max_tokens": _first_present(obj, "max_tokens", "max_completion_tokens"),
            "top_p": obj.get("top_p"),
            "stream": obj.get("stream"),
        },
    )


def extract_response_fields(obj: object) -> ComparisonFields:
    if not isinstance(obj, dict):
        return ComparisonFields()
    raw_input = obj.get("input")
    content = raw_input if isinstance(raw_input, str) else _last_message_content(raw_input)
    return ComparisonFields(
        model=obj["model"] if isinstance(obj.get("model"), str) else None,
        content=content,
        parameters={
            "temperature": obj.get("temperature"),
            "max_tokens": obj.get("max_output_tokens"),
            "top_p": obj.get("top_p"),
            "stream": obj.get("stream"),
        },
    )


def _same(left: object, right: object) -> bool:
    # 1 == True in Python, JSON treats them as different values
    return type(left) is type(right) and left == right


def compare_semantic_equivalence(
    original: ComparisonFields,
    back_translated: ComparisonFields,
) -> tuple[SemanticEquivalence, list[str]]:
    differences: list[str] = []

    model_match = _same(original.model, back_translated.model)
    if not model_match:
        differences.append(f"model: {original.model!r} != {back_translated.model!r}")

    content_match = _same(original.content, back_translated.content)
    if not content_match:
        differences.append(f"content: {original.content!r} != {back_translated.content!r}")

    parameters_match = True
    for name in COMPARED_PARAMETERS:
        before = original.parameters.get(name)
        after = back_translated.parameters.get(name)
        if not _same(before, after):
            parameters_match = False
            differences.append(f"{name}: {before!r} != {after!r}")

    equivalence = SemanticEquivalence(model=model_match, content=content_match, parameters=parameters_match)
    return equivalence, differences


def _check(extract, original: object, translated: object, back_translated: object) -> RoundTripResult:
    try:
        equivalence, differences = compare_semantic_equivalence(extract(original), extract(back_translated))
    except Exception as exc:
        return RoundTripResult(
            success=False,
            original=original,
            translated=translated,
            back_translated=back_translated,
            differences=[f"Round-trip check failed with error: {exc}"],
        )
    return RoundTripResult(
        success=not differences,
        original=original,
        translated=translated,
        back_translated=back_translated,
        differences=differences,
        semantic_equivalence=equivalence,
    )


def check_chat_to_response_round_trip(
    original_chat: object,
    translated_response: object,
    back_translated_chat: object,
) -> RoundTripResult:
    """Compare a chat request with its chat -> response -> chat translation."""
    return _check(extract_chat_fields, original_chat, translated_response, back_translated_chat)


def check_response_to_chat_round_trip(
    original_response: object,
    translated_chat: object,
    back_translated_response: object,
) -> RoundTripResult:
    """Compare a response request with its response -> chat -> response translation."""
    return _check(extract_response_fields, original_response, translated_chat, back_translated_response)


def run_round_trip(payload: object, origin: str, request_id: str = "round-trip") -> RoundTripResult:
    """Translate ``payload`` from its ``origin`` schema and back, then compare."""
    options = TranslationOptions(request_id=request_id)
    if origin == SCHEMA_CHAT:
        forward, backward, check = translate_chat_to_response, translate_response_to_chat, check_chat_to_response_round_trip
    elif origin == SCHEMA_RESPONSE:
        forward, backward, check = translate_response_to_chat, translate_chat_to_response, check_response_to_chat_round_trip
    else:
        raise ValueError(f"unknown origin schema: {origin}")

    first = forward(payload, options)
    if not first.success:
        return RoundTripResult(success=False, original=payload, differences=[f"forward translation failed: {first.error}"])
    second = backward(first.translated, options)
    if not second.success:
        return RoundTripResult(
            success=False,
            original=payload,
            translated=first.translated,
            differences=[f"back translation failed: {second.error}"],
        )
    return check(payload, first.translated, second.translated)


def format_round_trip_result(result: RoundTripResult) -> str:
    equivalence = result.semantic_equivalence
    lines = [
        "PASS" if result.success else "FAIL",
        f"  Model: {'ok' if equivalence.model else 'mismatch'}",
        f"  Content: {'ok' if equivalence.content else 'mismatch'}",
        f"  Parameters: {'ok' if equivalence.parameters else 'mismatch'}",
    ]
    if result.differences:
        lines.append("  Differences:")
        lines.extend(f"    - {diff}" for diff in result.differences)
    return "\n".join(lines)
