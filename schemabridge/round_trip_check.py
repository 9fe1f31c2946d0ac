"""
Run round-trip equivalence cases from a YAML file against the mapping tables.

    python -m schemabridge.round_trip_check [cases.yaml]

File format::

    cases:
      - name: plain string input
        origin: response        # response | chat
        request: {model: m, input: Hi}
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import yaml

from schemabridge.config.settings import settings
from schemabridge.core.errors import RoundTripCaseError
from schemabridge.observability.logging import log_event
from schemabridge.translation.round_trip import format_round_trip_result, run_round_trip
from schemabridge.translation.types import SCHEMA_CHAT, SCHEMA_RESPONSE
from schemabridge.util.logger import logger


_APP_ROOT_DIR = Path(__file__).resolve().parent.parent
_ORIGINS = (SCHEMA_CHAT, SCHEMA_RESPONSE)


def _resolve_path(path_str: str) -> Path:
    path = Path(path_str)
    if path.is_absolute():
        return path
    for candidate in (Path.cwd() / path, _APP_ROOT_DIR / path):
        if candidate.exists():
            return candidate.resolve()
    return path


def load_cases(path: Path) -> list[dict[str, Any]]:
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise RoundTripCaseError(f"cannot read round-trip cases from {path}: {exc}") from exc

    cases = loaded.get("cases") if isinstance(loaded, dict) else None
    if not isinstance(cases, list):
        raise RoundTripCaseError(f"invalid round-trip case file (expected a 'cases' list): {path}")

    normalized: list[dict[str, Any]] = []
    for position, case in enumerate(cases):
        if not isinstance(case, dict):
            raise RoundTripCaseError(f"case #{position} must be a mapping")
        origin = str(case.get("origin", "")).strip().lower()
        if origin not in _ORIGINS:
            raise RoundTripCaseError(f"case #{position} has unsupported origin: {case.get('origin')!r}")
        if "request" not in case:
            raise RoundTripCaseError(f"case #{position} has no request")
        normalized.append(
            {
                "name": str(case.get("name") or f"case-{position}"),
                "origin": origin,
                "request": case["request"],
            }
        )
    return normalized


def run_cases(cases: list[dict[str, Any]]) -> list[tuple[str, bool, str]]:
    outcomes: list[tuple[str, bool, str]] = []
    for case in cases:
        result = run_round_trip(case["request"], case["origin"], request_id=f"round-trip:{case['name']}")
        outcomes.append((case["name"], result.success, format_round_trip_result(result)))
    return outcomes


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check chat/response request round trips")
    parser.add_argument("cases", nargs="?", default=settings.round_trip_cases_path, help="YAML case file")
    args = parser.parse_args(argv)

    path = _resolve_path(args.cases)
    try:
        cases = load_cases(path)
    except RoundTripCaseError as exc:
        logger.error("round_trip_check: %s", exc)
        return 2

    outcomes = run_cases(cases)
    failed = 0
    for name, success, rendered in outcomes:
        print(f"[{name}] {rendered}")
        if not success:
            failed += 1

    log_event("round_trip_check_finished", path=str(path), total=len(outcomes), failed=failed)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
