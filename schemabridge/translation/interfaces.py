"""Translator capability set."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from schemabridge.core.models import TranslationOptions, TranslationResult


@runtime_checkable
class RequestTranslator(Protocol):
    """Anything that can shape-check and translate one request schema.

    Callers depend only on these two methods, so a stand-in object works
    wherever a real translator does.
    """

    def is_valid_request(self, payload: object) -> bool: ...

    def translate_request(self, payload: object, options: TranslationOptions) -> TranslationResult: ...
