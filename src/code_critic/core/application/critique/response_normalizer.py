"""Extraction and coercion of untrusted model output into a CriticismResult.

The model is treated as an opaque text generator: its reply may hold prose,
markdown fences or partial JSON. Every field is parsed on its own and falls
back to a safe default, so normalization itself never raises.
"""

from __future__ import annotations

import json
import math
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, TypeVar

from code_critic.core.application.critique.fallback_synthesizer import FallbackSynthesizer
from code_critic.core.domain.analysis import (
    Alternative,
    AnalysisMetadata,
    ContextAlignment,
    CriticismResult,
    Issue,
    Suggestion,
)
from code_critic.core.domain.analysis.criticism_result import LineRange
from code_critic.core.domain.analysis.value_objects import IssueSeverity, IssueType

_E = TypeVar("_E", bound=StrEnum)
_T = TypeVar("_T")

MIN_SCORE = 1
MAX_SCORE = 10
DEFAULT_SCORE = 5
DEFAULT_LINE_RANGE: LineRange = (1, 1)
MAX_LINE = sys.maxsize
DEFAULT_GOAL_ANALYSIS = "Analysis not available"


@dataclass(frozen=True)
class JsonExtracted:
    payload: dict[str, Any]


@dataclass(frozen=True)
class JsonMissing:
    reason: str


ExtractionResult = JsonExtracted | JsonMissing


def extract_json_object(raw: str) -> ExtractionResult:
    """Take the first '{' through the last '}' of *raw* and parse it as a JSON object."""
    start = raw.find("{")
    end = raw.rfind("}")
    if start == -1 or end <= start:
        return JsonMissing(reason="No JSON object found in response")
    try:
        parsed = json.loads(raw[start : end + 1])
    except (ValueError, RecursionError) as exc:
        # ValueError also covers integer literals past the int/str digit limit
        return JsonMissing(reason=f"Invalid JSON in response: {exc}")
    if not isinstance(parsed, dict):
        return JsonMissing(reason="Response JSON is not an object")
    return JsonExtracted(payload=parsed)


@dataclass(frozen=True)
class ResponseNormalizer:
    fallback: FallbackSynthesizer = field(default_factory=FallbackSynthesizer)

    def process(self, raw: str, code: str, metadata: AnalysisMetadata) -> CriticismResult:
        """Normalize *raw* model text, or synthesize the fallback when no JSON object exists."""
        return self.resolve(extract_json_object(raw), code, metadata)

    def resolve(
        self, extraction: ExtractionResult, code: str, metadata: AnalysisMetadata
    ) -> CriticismResult:
        if isinstance(extraction, JsonExtracted):
            return self.normalize(extraction.payload, metadata)
        return self.fallback.synthesize(code, metadata)

    def normalize(self, payload: dict[str, Any], metadata: AnalysisMetadata) -> CriticismResult:
        return CriticismResult(
            overall_score=_score(payload.get("overall_score")),
            critical_issues=_items(payload.get("critical_issues"), _issue),
            suggestions=_items(payload.get("suggestions"), _suggestion),
            alternatives=_items(payload.get("alternatives"), _alternative),
            context_alignment=_alignment(payload.get("context_alignment")),
            analysis_metadata=metadata,
        )


# ── Parse-or-default helpers ─────────────────────────────────────────


def _number(value: Any) -> int | float | None:
    """Numeric view of *value*; ints stay exact, infinities are kept for clamping."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return None if math.isnan(number) else number


def _clamp(number: int | float, low: int, high: int) -> int | float:
    return min(high, max(low, number))


def _score(value: Any) -> int:
    number = _number(value)
    if number is None:
        return DEFAULT_SCORE
    return int(round(_clamp(number, MIN_SCORE, MAX_SCORE)))


def _text(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) else default


def _strings(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _choice(value: Any, enum: type[_E], default: _E) -> _E:
    if isinstance(value, str):
        try:
            return enum(value.strip().lower())
        except ValueError:
            return default
    return default


def _line_range(value: Any) -> LineRange:
    if not isinstance(value, list) or len(value) != 2:
        return DEFAULT_LINE_RANGE
    start, end = _number(value[0]), _number(value[1])
    if start is None or end is None:
        return DEFAULT_LINE_RANGE
    first = int(_clamp(start, 1, MAX_LINE))
    return first, int(_clamp(end, first, MAX_LINE))


def _items(value: Any, parse: Callable[[dict[str, Any]], _T]) -> list[_T]:
    if not isinstance(value, list):
        return []
    return [parse(item) for item in value if isinstance(item, dict)]


# ── Entity parsers ───────────────────────────────────────────────────


def _issue(item: dict[str, Any]) -> Issue:
    return Issue(
        type=_choice(item.get("type"), IssueType, IssueType.READABILITY),
        severity=_choice(item.get("severity"), IssueSeverity, IssueSeverity.MEDIUM),
        line_range=_line_range(item.get("line_range")),
        description=_text(item.get("description")),
        explanation=_text(item.get("explanation")),
        fix_suggestion=_text(item.get("fix_suggestion")),
    )


def _suggestion(item: dict[str, Any]) -> Suggestion:
    return Suggestion(
        type=_choice(item.get("type"), IssueType, IssueType.READABILITY),
        description=_text(item.get("description")),
        line_range=_line_range(item.get("line_range")),
        impact=_text(item.get("impact")),
    )


def _alternative(item: dict[str, Any]) -> Alternative:
    return Alternative(
        description=_text(item.get("description")),
        code_example=_text(item.get("code_example")),
        benefits=_strings(item.get("benefits")),
        trade_offs=_strings(item.get("trade_offs")),
    )


def _alignment(value: Any) -> ContextAlignment:
    block = value if isinstance(value, dict) else {}
    return ContextAlignment(
        alignment_score=_score(block.get("alignment_score")),
        goal_analysis=_text(block.get("goal_analysis")) or DEFAULT_GOAL_ANALYSIS,
        recommendations=_strings(block.get("recommendations")),
    )
