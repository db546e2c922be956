"""Validate parsed Gemini JSON into typed enrichment / match records.

The model is treated as untrusted: list fields are coerced leniently (a
non-list becomes ``[]``) while the summary fields are mandatory and raise
``SchemaError`` when missing or blank.
"""

import math
import re
from typing import Any

from models.schemas.enrichment import EnrichmentResult
from models.schemas.llm_match import LLMMatchResult
from services.exceptions import SchemaError

# Leading decimal number, like "5", "4.5 years", "-1e2"
_LEADING_NUMBER_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def normalize_string_list(value: Any) -> list[str]:
    """Trimmed, non-empty, deduplicated strings; anything but a list gives []."""
    if not isinstance(value, list):
        return []
    seen: dict[str, None] = {}
    for item in value:
        if isinstance(item, str) and item.strip():
            seen.setdefault(item.strip(), None)
    return list(seen)


def to_number_or_none(value: Any) -> float | None:
    """Coerce a finite number or a numeric-looking string; otherwise None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
        return number if math.isfinite(number) else None
    if isinstance(value, str) and value.strip():
        match = _LEADING_NUMBER_RE.match(value)
        if match:
            parsed = float(match.group(0))
            if math.isfinite(parsed):
                return parsed
    return None


def clamp_score(score: float) -> int:
    if not math.isfinite(score):
        return 0
    return max(0, min(100, int(math.floor(score + 0.5))))


def _require_object(data: Any, label: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise SchemaError(f"Invalid {label} payload.")
    return data


def _required_text(obj: dict[str, Any], key: str, label: str) -> str:
    value = obj.get(key)
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise SchemaError(f"Invalid {label} payload: {key} is required.", field=key)
    return text


def validate_enrichment(data: Any) -> EnrichmentResult:
    obj = _require_object(data, "enrichment")
    return EnrichmentResult(
        summary=_required_text(obj, "llm_summary", "enrichment"),
        skills=normalize_string_list(obj.get("llm_skills")),
        roles=normalize_string_list(obj.get("llm_roles")),
        experience_years=to_number_or_none(obj.get("llm_experience_years")),
    )


def validate_match(data: Any) -> LLMMatchResult:
    obj = _require_object(data, "match")
    summary = _required_text(obj, "match_summary", "match")
    raw_score = to_number_or_none(obj.get("match_score"))
    return LLMMatchResult(
        score=clamp_score(raw_score if raw_score is not None else 0),
        matched_skills=normalize_string_list(obj.get("matched_skills")),
        missing_skills=normalize_string_list(obj.get("missing_skills")),
        summary=summary,
    )
