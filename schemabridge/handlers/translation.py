"""Direction-tagged translation entry points for the routing layer."""

from __future__ import annotations

from typing import Any

from schemabridge.config.settings import settings
from schemabridge.core.models import TranslationHandlerResult, TranslationOptions
from schemabridge.core.registry import TranslatorRegistry, default_registry
from schemabridge.observability.logging import EventLogger
from schemabridge.translation.interfaces import RequestTranslator
from schemabridge.translation.orchestrator import orchestrate_request_translation
from schemabridge.translation.types import CHAT_TO_RESPONSE, RESPONSE_TO_CHAT


_registry: TranslatorRegistry = default_registry()


def handle_translation(
    direction: str,
    request_id: str,
    payload: Any,
    translator: RequestTranslator | None = None,
    event_logger: EventLogger | None = None,
) -> TranslationHandlerResult:
    """Translate ``payload`` in ``direction``; a stand-in ``translator`` overrides the registry."""
    actual = translator or _registry.get(direction)
    options = TranslationOptions(request_id=request_id, strict=settings.strict_unknown_fields)
    result = orchestrate_request_translation(
        actual,
        payload,
        options,
        direction=direction,
        event_logger=event_logger,
    )
    return TranslationHandlerResult(success=result.success, translated=result.translated, error=result.error)


def handle_chat_to_response_translation(
    request_id: str,
    payload: Any,
    translator: RequestTranslator | None = None,
    event_logger: EventLogger | None = None,
) -> TranslationHandlerResult:
    return handle_translation(CHAT_TO_RESPONSE, request_id, payload, translator, event_logger)


def handle_response_to_chat_translation(
    request_id: str,
    payload: Any,
    translator: RequestTranslator | None = None,
    event_logger: EventLogger | None = None,
) -> TranslationHandlerResult:
    return handle_translation(RESPONSE_TO_CHAT, request_id, payload, translator, event_logger)
