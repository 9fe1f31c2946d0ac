"""Bidirectional request translation between the chat and response schemas."""

from schemabridge.translation.chat_to_response import (
    ChatToResponseRequestTranslator,
    create_chat_to_response_request_translator,
    translate_chat_to_response,
)
from schemabridge.translation.interfaces import RequestTranslator
from schemabridge.translation.orchestrator import orchestrate_request_translation
from schemabridge.translation.response_to_chat import (
    ResponseToChatRequestTranslator,
    create_response_to_chat_request_translator,
    translate_response_to_chat,
)
from schemabridge.translation.round_trip import (
    check_chat_to_response_round_trip,
    check_response_to_chat_round_trip,
    format_round_trip_result,
    run_round_trip,
)
from schemabridge.translation.types import CHAT_TO_RESPONSE, RESPONSE_TO_CHAT

__all__ = [
    "CHAT_TO_RESPONSE",
    "RESPONSE_TO_CHAT",
    "ChatToResponseRequestTranslator",
    "RequestTranslator",
    "ResponseToChatRequestTranslator",
    "check_chat_to_response_round_trip",
    "check_response_to_chat_round_trip",
    "create_chat_to_response_request_translator",
    "create_response_to_chat_request_translator",
    "format_round_trip_result",
    "orchestrate_request_translation",
    "run_round_trip",
    "translate_chat_to_response",
    "translate_response_to_chat",
]
