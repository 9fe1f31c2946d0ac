"""Declarative field-mapping tables for both translation directions.

Each ``FieldRule`` names a source key, its destination, the kind of mapping
and the predicate the source value must satisfy. A rule whose value is absent
or fails its predicate is skipped, so optional fields that are absent in the
source stay absent in the output. The known-field and drop sets used by the
unknown-field detector are derived from these tables.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from schemabridge.translation.validation import (
    is_array,
    is_boolean,
    is_non_empty_object,
    is_non_empty_string,
    is_number,
    is_plain_object,
    is_tool_choice,
)


COPY = "copy"
RENAME = "rename"
RESTRUCTURE = "restructure"
PREPEND = "prepend"
DROP = "drop"

RULE_KINDS = (COPY, RENAME, RESTRUCTURE, PREPEND, DROP)

_DEFAULT_RESPONSE_FORMAT = "json_object"


def _always(value: object) -> bool:
    return True


@dataclass(frozen=True, slots=True)
class FieldRule:
    source: str
    dest: str | None
    kind: str
    predicate: Callable[[object], bool] = _always
    fallbacks: tuple[str, ...] = ()
    transform: Callable[[Any], Any] | None = None

    @property
    def source_keys(self) -> tuple[str, ...]:
        return (self.source, *self.fallbacks)

    def pick(self, source: dict[str, Any]) -> tuple[bool, Any]:
        """Return ``(found, value)`` for the first non-null source key."""
        for key in self.source_keys:
            value = source.get(key)
            if value is not None:
                return True, value
        return False, None


def _copy_messages(messages: list[Any]) -> list[Any]:
    return list(messages)


def _input_to_messages(raw_input: str | list[Any]) -> list[Any]:
    if isinstance(raw_input, str):
        return [{"role": "user", "content": raw_input}]
    return list(raw_input)


def _is_input(value: object) -> bool:
    return isinstance(value, (str, list))


def _instructions_to_system_message(instructions: str) -> dict[str, str]:
    return {"role": "system", "content": instructions}


def _response_format_to_text(response_format: dict[str, Any]) -> dict[str, Any]:
    fmt = response_format.get("type")
    return {"format": fmt if isinstance(fmt, str) else _DEFAULT_RESPONSE_FORMAT}


def _has_text_format(value: object) -> bool:
    return isinstance(value, dict) and isinstance(value.get("format"), (str, dict))


def _text_to_response_format(text: dict[str, Any]) -> dict[str, Any]:
    fmt = text["format"]
    if isinstance(fmt, dict):
        return dict(fmt)
    return {"type": fmt}


_SHARED_COPY_RULES: tuple[FieldRule, ...] = (
    FieldRule("temperature", "temperature", COPY, is_number),
    FieldRule("top_p", "top_p", COPY, is_number),
    FieldRule("stream", "stream", COPY, is_boolean),
    FieldRule("tools", "tools", COPY, is_array),
    FieldRule("tool_choice", "tool_choice", COPY, is_tool_choice),
    FieldRule("metadata", "metadata", COPY, is_plain_object),
)


CHAT_TO_RESPONSE_RULES: tuple[FieldRule, ...] = (
    FieldRule("model", "model", COPY, is_non_empty_string),
    FieldRule("messages", "input", RESTRUCTURE, is_array, transform=_copy_messages),
    *_SHARED_COPY_RULES,
    FieldRule("max_tokens", "max_output_tokens", RENAME, is_number, fallbacks=("max_completion_tokens",)),
    FieldRule("response_format", "text", RESTRUCTURE, is_non_empty_object, transform=_response_format_to_text),
    FieldRule("frequency_penalty", None, DROP),
    FieldRule("presence_penalty", None, DROP),
    FieldRule("n", None, DROP),
    FieldRule("stop", None, DROP),
    FieldRule("logprobs", None, DROP),
    FieldRule("top_logprobs", None, DROP),
)


RESPONSE_TO_CHAT_RULES: tuple[FieldRule, ...] = (
    FieldRule("model", "model", COPY, is_non_empty_string),
    FieldRule("input", "messages", RESTRUCTURE, _is_input, transform=_input_to_messages),
    # one-directional: a leading system message is never turned back into instructions
    FieldRule("instructions", "messages", PREPEND, is_non_empty_string, transform=_instructions_to_system_message),
    *_SHARED_COPY_RULES,
    FieldRule("max_output_tokens", "max_tokens", RENAME, is_number),
    FieldRule("text", "response_format", RESTRUCTURE, _has_text_format, transform=_text_to_response_format),
    FieldRule("previous_response_id", None, DROP),
)


def known_fields(rules: Iterable[FieldRule]) -> frozenset[str]:
    keys: set[str] = set()
    for rule in rules:
        keys.update(rule.source_keys)
    return frozenset(keys)


def dropped_fields(rules: Iterable[FieldRule]) -> frozenset[str]:
    return frozenset(rule.source for rule in rules if rule.kind == DROP)


def apply_field_rules(rules: Iterable[FieldRule], source: dict[str, Any]) -> dict[str, Any]:
    """Build the known part of a destination payload from ``source``."""
    target: dict[str, Any] = {}
    for rule in rules:
        if rule.kind == DROP or rule.dest is None:
            continue
        found, value = rule.pick(source)
        if not found or not rule.predicate(value):
            continue
        if rule.kind in (COPY, RENAME):
            target[rule.dest] = value
        elif rule.kind == RESTRUCTURE:
            target[rule.dest] = rule.transform(value) if rule.transform else value
        elif rule.kind == PREPEND:
            item = rule.transform(value) if rule.transform else value
            target[rule.dest] = [item, *target.get(rule.dest, [])]
        else:
            raise ValueError(f"unsupported field rule kind: {rule.kind}")
    return target


def pass_through_unknown_fields(
    unknown_fields: Iterable[str],
    cleaned_payload: dict[str, Any],
    target: dict[str, Any],
    is_dropped: Callable[[str], bool],
) -> None:
    """Copy unknown top-level fields verbatim into ``target``.

    Dotted paths name keys nested in a restructured object; they are not
    top-level keys of the payload and are only reported. An unknown field never
    replaces a key the rule table already produced.
    """
    for field in unknown_fields:
        if field not in cleaned_payload or field in target or is_dropped(field):
            continue
        target[field] = cleaned_payload[field]
