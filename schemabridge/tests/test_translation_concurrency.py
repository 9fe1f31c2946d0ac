from concurrent.futures import ThreadPoolExecutor

from schemabridge.core.models import TranslationOptions
from schemabridge.handlers import translation as translation_handlers
from schemabridge.translation.chat_to_response import create_chat_to_response_request_translator
from schemabridge.translation.orchestrator import orchestrate_request_translation
from schemabridge.translation.response_to_chat import create_response_to_chat_request_translator


class SilentEventLogger:
    def debug(self, event: str, **fields: object) -> None:
        pass

    def info(self, event: str, **fields: object) -> None:
        pass

    def warning(self, event: str, **fields: object) -> None:
        pass

    def error(self, event: str, **fields: object) -> None:
        pass


def test_parallel_translations_are_independent():
    chat_translator = create_chat_to_response_request_translator()
    response_translator = create_response_to_chat_request_translator()
    sink = SilentEventLogger()
    total = 200

    def run_case(i: int) -> tuple[int, int]:
        request_id = f"req-{i}"
        payload = {
            "model": f"model-{i}",
            "input": f"message {i}",
            "max_output_tokens": i,
            f"extra_{i}": i,
        }
        chat = orchestrate_request_translation(
            response_translator,
            payload,
            TranslationOptions(request_id=request_id),
            direction="response_to_chat",
            event_logger=sink,
        )
        assert chat.success is True
        assert chat.unknown_fields == [f"extra_{i}"]

        back = orchestrate_request_translation(
            chat_translator,
            chat.translated,
            TranslationOptions(request_id=request_id),
            direction="chat_to_response",
            event_logger=sink,
        )
        assert back.success is True
        assert back.translated["input"] == [{"role": "user", "content": f"message {i}"}]
        return back.translated["max_output_tokens"], back.translated[f"extra_{i}"]

    with ThreadPoolExecutor(max_workers=32) as pool:
        outputs = list(pool.map(run_case, range(total)))

    for i, (tokens, extra) in enumerate(outputs):
        assert tokens == i
        assert extra == i


def test_parallel_handler_calls_share_one_registry():
    registry = translation_handlers._registry
    sink = SilentEventLogger()

    def run_case(i: int) -> bool:
        result = translation_handlers.handle_response_to_chat_translation(
            f"h-{i}",
            {"model": "m", "input": f"message {i}"},
            event_logger=sink,
        )
        return result.success

    with ThreadPoolExecutor(max_workers=16) as pool:
        outcomes = list(pool.map(run_case, range(64)))

    assert all(outcomes)
    assert translation_handlers._registry is registry
    assert registry.directions == ["chat_to_response", "response_to_chat"]
