"""Translator registry keyed by direction tag."""

from __future__ import annotations

from schemabridge.core.errors import UnknownDirectionError
from schemabridge.translation.chat_to_response import create_chat_to_response_request_translator
from schemabridge.translation.interfaces import RequestTranslator
from schemabridge.translation.response_to_chat import create_response_to_chat_request_translator
from schemabridge.translation.types import CHAT_TO_RESPONSE, RESPONSE_TO_CHAT
from schemabridge.util.logger import logger


class TranslatorRegistry:
    def __init__(self) -> None:
        self._translators: dict[str, RequestTranslator] = {}

    def register(self, direction: str, translator: RequestTranslator) -> None:
        self._translators[direction] = translator
        logger.info("registered translator direction=%s translator=%s", direction, type(translator).__name__)

    def get(self, direction: str) -> RequestTranslator:
        try:
            return self._translators[direction]
        except KeyError:
            raise UnknownDirectionError(f"no translator registered for direction: {direction}") from None

    @property
    def directions(self) -> list[str]:
        return sorted(self._translators)


def default_registry() -> TranslatorRegistry:
    registry = TranslatorRegistry()
    registry.register(CHAT_TO_RESPONSE, create_chat_to_response_request_translator())
    registry.register(RESPONSE_TO_CHAT, create_response_to_chat_request_translator())
    return registry
