"""Per-call translation context."""

from __future__ import annotations

from dataclasses import dataclass, field
from time import perf_counter_ns


@dataclass(slots=True)
class TranslationContext:
    request_id: str
    direction: str
    mode: str = "translate"
    strict: bool = False
    started_ns: int = field(default_factory=perf_counter_ns)

    def elapsed_ms(self) -> float:
        return round((perf_counter_ns() - self.started_ns) / 1_000_000, 3)

    def fields(self) -> dict[str, object]:
        return {"request_id": self.request_id, "direction": self.direction}
