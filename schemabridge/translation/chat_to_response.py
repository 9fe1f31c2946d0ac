"""Message-array (chat) -> single-input (response) request translation."""

from __future__ import annotations

import copy

from schemabridge.core.models import ChatToResponseResult, TranslationOptions
from schemabridge.translation.field_mapping import (
    CHAT_TO_RESPONSE_RULES,
    apply_field_rules,
    pass_through_unknown_fields,
)
from schemabridge.translation.unknown_fields import detect_unknown_chat_fields, is_dropped_field
from schemabridge.translation.validation import is_chat_completions_request, validate_chat_request
from schemabridge.util.logger import get_logger


logger = get_logger("translation.chat_to_response")


def translate_chat_to_response(payload: object, options: TranslationOptions) -> ChatToResponseResult:
    try:
        checked = validate_chat_request(payload)
        if not checked.is_valid:
            return ChatToResponseResult.failure(checked.error)

        chat_request = checked.value
        multi_turn_detected = len(chat_request["messages"]) > 1

        translated = apply_field_rules(CHAT_TO_RESPONSE_RULES, chat_request)
        detected = detect_unknown_chat_fields(chat_request)
        pass_through_unknown_fields(
            detected.unknown_fields,
            detected.cleaned_payload,
            translated,
            is_dropped_field,
        )

        return ChatToResponseResult(
            success=True,
            translated=copy.deepcopy(translated),
            unknown_fields=detected.unknown_fields,
            multi_turn_detected=multi_turn_detected,
        )
    except Exception as exc:
        logger.debug("chat_to_response internal fault request_id=%s error=%s", getattr(options, "request_id", None), exc)
        return ChatToResponseResult.failure(str(exc) or exc.__class__.__name__)


class ChatToResponseRequestTranslator:
    def translate_request(self, payload: object, options: TranslationOptions) -> ChatToResponseResult:
        return translate_chat_to_response(payload, options)

    def is_valid_request(self, payload: object) -> bool:
        return is_chat_completions_request(payload)


def create_chat_to_response_request_translator() -> ChatToResponseRequestTranslator:
    return ChatToResponseRequestTranslator()
