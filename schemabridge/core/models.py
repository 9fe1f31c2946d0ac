"""Translation transport models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator


class TranslationOptions(BaseModel):
    request_id: str
    # not enforced: unknown fields are always passed through
    strict: bool = False


class TranslationResult(BaseModel):
    success: bool
    translated: dict[str, Any] | None = None
    error: str | None = None
    unknown_fields: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_outcome(self) -> "TranslationResult":
        if self.success:
            if self.translated is None or self.error is not None:
                raise ValueError("successful result requires translated and no error")
        elif self.error is None or self.translated is not None:
            raise ValueError("failed result requires error and no translated")
        return self

    @classmethod
    def failure(cls, error: str, **extra: Any) -> "TranslationResult":
        return cls(success=False, error=error, unknown_fields=[], **extra)


class ChatToResponseResult(TranslationResult):
    multi_turn_detected: bool = False


class UnknownFieldsResult(BaseModel):
    unknown_fields: list[str] = Field(default_factory=list)
    cleaned_payload: dict[str, Any] = Field(default_factory=dict)


class TranslationLogEntry(BaseModel):
    request_id: str
    translation_direction: str
    mode: Literal["translate", "pass_through"] = "translate"
    unknown_fields: list[str] = Field(default_factory=list)
    timestamp: str = Field(default_factory=lambda: datetime.now(tz=timezone.utc).isoformat())
    success: bool
    error: str | None = None


class TranslationHandlerResult(BaseModel):
    success: bool
    translated: dict[str, Any] | None = None
    error: str | None = None


class SemanticEquivalence(BaseModel):
    model: bool = False
    content: bool = False
    parameters: bool = False


class RoundTripResult(BaseModel):
    success: bool
    original: Any = None
    translated: Any = None
    back_translated: Any = None
    differences: list[str] = Field(default_factory=list)
    semantic_equivalence: SemanticEquivalence = Field(default_factory=SemanticEquivalence)
