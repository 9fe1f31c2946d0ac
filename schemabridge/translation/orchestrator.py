"""Translation orchestrator: validate, translate, observe."""

from __future__ import annotations

from typing import Any

from schemabridge.core.context import TranslationContext
from schemabridge.core.errors import TranslatorContractError
from schemabridge.core.models import TranslationOptions, TranslationResult
from schemabridge.observability.logging import EventLogger, default_event_logger, emit_safely
from schemabridge.translation.events import (
    create_translation_log_entry,
    log_translation,
    log_translation_error,
    log_unknown_fields,
)
from schemabridge.translation.interfaces import RequestTranslator
from schemabridge.util.logger import logger


INVALID_REQUEST_ERROR = "Request does not match expected format"


def orchestrate_request_translation(
    translator: RequestTranslator,
    payload: Any,
    options: TranslationOptions,
    *,
    direction: str,
    event_logger: EventLogger | None = None,
) -> TranslationResult:
    """Run ``translator`` over ``payload`` and emit observability events.

    The translator's result is returned untouched on the normal path. Invalid
    payloads are rejected before translation, and any fault escaping the
    translator is normalized into a failure result.
    """
    sink = event_logger or default_event_logger
    ctx = TranslationContext(request_id=options.request_id, direction=direction, strict=options.strict)

    try:
        if not translator.is_valid_request(payload):
            emit_safely(sink, "warning", "translation_invalid_request", reason=INVALID_REQUEST_ERROR, **ctx.fields())
            return TranslationResult.failure(INVALID_REQUEST_ERROR)

        result = translator.translate_request(payload, options)
        if not isinstance(result, TranslationResult):
            raise TranslatorContractError(
                f"translator returned {type(result).__name__} instead of TranslationResult"
            )
    except Exception as exc:
        logger.warning("translation contract violation request_id=%s direction=%s error=%s", ctx.request_id, direction, exc)
        log_translation_error(sink, ctx.request_id, direction, exc)
        return TranslationResult.failure(str(exc) or "Unknown error during translation")

    multi_turn_detected = bool(getattr(result, "multi_turn_detected", False))
    entry = create_translation_log_entry(
        ctx.request_id,
        direction,
        result.unknown_fields,
        result.success,
        result.error,
        mode=ctx.mode,
    )
    log_translation(sink, entry, multi_turn_detected=multi_turn_detected)
    log_unknown_fields(sink, ctx.request_id, direction, result.unknown_fields)

    if ctx.strict and result.unknown_fields:
        emit_safely(
            sink,
            "warning",
            "strict_mode_not_enforced",
            unknown_fields=list(result.unknown_fields),
            **ctx.fields(),
        )

    if multi_turn_detected:
        emit_safely(
            sink,
            "info",
            "multi_turn_conversation_detected",
            message="Multi-turn conversation detected; full message history passed through",
            **ctx.fields(),
        )

    logger.debug("translation finished request_id=%s direction=%s elapsed_ms=%s", ctx.request_id, direction, ctx.elapsed_ms())
    return result
