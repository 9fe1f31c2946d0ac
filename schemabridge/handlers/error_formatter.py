"""Client-facing error bodies for failed translations."""

from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse

from schemabridge.core.models import TranslationHandlerResult, TranslationResult


TRANSLATION_ERROR_TYPE = "translation_error"
DEFAULT_ERROR_SOURCE = "adapter_error"


def format_translation_error(
    message: str,
    request_id: str,
    error_type: str = TRANSLATION_ERROR_TYPE,
    source: str = DEFAULT_ERROR_SOURCE,
) -> dict[str, Any]:
    # keep a non-empty reason for the client
    detail = (message or "").strip() or error_type
    return {
        "error": {
            "type": error_type,
            "message": detail,
            "source": source,
        },
        "request_id": request_id,
    }


def translation_error_response(
    result: TranslationResult | TranslationHandlerResult,
    request_id: str,
    status_code: int = 400,
) -> JSONResponse:
    if result.success:
        raise ValueError("translation_error_response called with a successful result")
    return JSONResponse(
        status_code=status_code,
        content=format_translation_error(result.error or "", request_id),
        headers={"x-request-id": request_id},
    )
