"""Structured logging bridge."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from schemabridge.util.logger import get_logger, logger


@runtime_checkable
class EventLogger(Protocol):
    """Capability set the translation engine emits events through."""

    def debug(self, event: str, **fields: object) -> None: ...

    def info(self, event: str, **fields: object) -> None: ...

    def warning(self, event: str, **fields: object) -> None: ...

    def error(self, event: str, **fields: object) -> None: ...


class StructuredEventLogger:
    """Default sink: renders events on a stdlib logger as ``event=... payload=...``."""

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or get_logger("events")

    def _emit(self, level: int, event: str, fields: dict[str, object]) -> None:
        self._logger.log(level, "event=%s payload=%s", event, fields)

    def debug(self, event: str, **fields: object) -> None:
        self._emit(logging.DEBUG, event, fields)

    def info(self, event: str, **fields: object) -> None:
        self._emit(logging.INFO, event, fields)

    def warning(self, event: str, **fields: object) -> None:
        self._emit(logging.WARNING, event, fields)

    def error(self, event: str, **fields: object) -> None:
        self._emit(logging.ERROR, event, fields)


default_event_logger = StructuredEventLogger()


def log_event(event: str, **payload: object) -> None:
    logger.info("event=%s payload=%s", event, payload)


def emit_safely(sink: EventLogger, level: str, event: str, **fields: object) -> None:
    """Send one event to ``sink``; a failing sink is reported and otherwise ignored."""
    try:
        getattr(sink, level)(event, **fields)
    except Exception as exc:
        logger.warning("event sink failed event=%s level=%s error=%s", event, level, exc)
