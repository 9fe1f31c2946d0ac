"""Single-input (response) -> message-array (chat) request translation.

``input`` given as a string becomes one user message; ``instructions`` becomes
a leading system message. ``previous_response_id`` has no message-array
equivalent and is dropped; conversation history is not fetched.
"""

from __future__ import annotations

import copy

from schemabridge.core.models import TranslationOptions, TranslationResult
from schemabridge.translation.field_mapping import (
    RESPONSE_TO_CHAT_RULES,
    apply_field_rules,
    pass_through_unknown_fields,
)
from schemabridge.translation.unknown_fields import detect_unknown_response_fields, is_dropped_field
from schemabridge.translation.validation import is_response_api_request, validate_response_request
from schemabridge.util.logger import get_logger


logger = get_logger("translation.response_to_chat")


def translate_response_to_chat(payload: object, options: TranslationOptions) -> TranslationResult:
    try:
        checked = validate_response_request(payload)
        if not checked.is_valid:
            return TranslationResult.failure(checked.error)

        response_request = checked.value
        translated = apply_field_rules(RESPONSE_TO_CHAT_RULES, response_request)
        detected = detect_unknown_response_fields(response_request)
        pass_through_unknown_fields(
            detected.unknown_fields,
            detected.cleaned_payload,
            translated,
            is_dropped_field,
        )

        return TranslationResult(
            success=True,
            translated=copy.deepcopy(translated),
            unknown_fields=detected.unknown_fields,
        )
    except Exception as exc:
        logger.debug("response_to_chat internal fault request_id=%s error=%s", getattr(options, "request_id", None), exc)
        return TranslationResult.failure(str(exc) or exc.__class__.__name__)


class ResponseToChatRequestTranslator:
    def translate_request(self, payload: object, options: TranslationOptions) -> TranslationResult:
        return translate_response_to_chat(payload, options)

    def is_valid_request(self, payload: object) -> bool:
        return is_response_api_request(payload)


def create_response_to_chat_request_translator() -> ResponseToChatRequestTranslator:
    return ResponseToChatRequestTranslator()
