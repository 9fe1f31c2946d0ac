"""Structured translation events."""

from __future__ import annotations

from schemabridge.config.settings import settings
from schemabridge.core.models import TranslationLogEntry
from schemabridge.observability.logging import EventLogger, emit_safely
from schemabridge.translation.types import MODE_TRANSLATE


def create_translation_log_entry(
    request_id: str,
    direction: str,
    unknown_fields: list[str],
    success: bool,
    error: str | None = None,
    mode: str = MODE_TRANSLATE,
) -> TranslationLogEntry:
    return TranslationLogEntry(
        request_id=request_id,
        translation_direction=direction,
        mode=mode,
        unknown_fields=list(unknown_fields),
        success=success,
        error=error,
    )


def log_translation(sink: EventLogger, entry: TranslationLogEntry, multi_turn_detected: bool = False) -> None:
    if entry.success:
        fields: dict[str, object] = {
            "request_id": entry.request_id,
            "direction": entry.translation_direction,
            "mode": entry.mode,
            "unknown_fields_count": len(entry.unknown_fields),
            "multi_turn_detected": multi_turn_detected,
            "timestamp": entry.timestamp,
        }
        if settings.log_unknown_field_names:
            fields["unknown_fields"] = list(entry.unknown_fields)
        emit_safely(sink, "info", "translation_completed", **fields)
        return

    emit_safely(
        sink,
        "error",
        "translation_failed",
        request_id=entry.request_id,
        direction=entry.translation_direction,
        mode=entry.mode,
        error=entry.error,
        timestamp=entry.timestamp,
    )


def log_unknown_fields(sink: EventLogger, request_id: str, direction: str, unknown_fields: list[str]) -> None:
    if not unknown_fields:
        return
    emit_safely(
        sink,
        "debug",
        "unknown_fields_detected",
        request_id=request_id,
        direction=direction,
        count=len(unknown_fields),
        fields=list(unknown_fields),
    )


def log_translation_error(sink: EventLogger, request_id: str, direction: str, error: str | BaseException) -> None:
    message = str(error) if isinstance(error, BaseException) else error
    emit_safely(sink, "error", "translation_error", request_id=request_id, direction=direction, error=message)
