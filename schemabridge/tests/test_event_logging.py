import logging

from schemabridge.observability.logging import EventLogger, StructuredEventLogger, emit_safely
from schemabridge.util.logger import _normalize_level, get_logger


def test_structured_event_logger_renders_event_and_payload(caplog):
    target = logging.getLogger("schemabridge_test.events")
    sink = StructuredEventLogger(target=target)

    with caplog.at_level(logging.DEBUG, logger="schemabridge_test.events"):
        sink.info("translation_completed", request_id="r1", unknown_fields_count=0)
        sink.debug("unknown_fields_detected", count=2)

    messages = [record.getMessage() for record in caplog.records]
    assert "event=translation_completed payload={'request_id': 'r1', 'unknown_fields_count': 0}" in messages
    assert caplog.records[1].levelno == logging.DEBUG


def test_sinks_satisfy_the_event_logger_protocol():
    assert isinstance(StructuredEventLogger(), EventLogger)
    assert not isinstance(object(), EventLogger)


def test_emit_safely_swallows_sink_failures():
    class Broken:
        def info(self, event: str, **fields: object) -> None:
            raise RuntimeError("boom")

    emit_safely(Broken(), "info", "translation_completed", request_id="r2")


def test_log_level_normalization_and_child_loggers():
    assert _normalize_level("debug") == logging.DEBUG
    assert _normalize_level("warn") == logging.WARNING
    assert _normalize_level("nonsense") == logging.INFO
    assert get_logger("orchestrator").name == "schemabridge.orchestrator"
