"""Pydantic models and parsing strategies for the deception analysis output.

The model is asked for JSON in party mode and for a labeled text layout
otherwise. ``parse_result`` tries an ordered list of strategies and always
returns an ``AnalysisVerdict``; it never raises.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable, Literal, Mapping, Optional, Sequence

from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator

from .prompt_builder import (
    BREAKDOWN_MARKER,
    CONFIDENCE_LABEL,
    EXPLANATION_MARKER,
    PARTY_MODE,
    SIGNALS_MARKER,
    VERDICT_LABEL,
)

logger = logging.getLogger(__name__)

Verdict = Literal["TRUTH", "DECEPTION", "UNKNOWN"]

DEFAULT_VERDICT: Verdict = "UNKNOWN"
DEFAULT_CONFIDENCE = 50
_KNOWN_VERDICTS = {"TRUTH", "DECEPTION"}


class LieScores(BaseModel):
    deception: float = 0.0
    conviction: float = 0.0
    creativity: float = 0.0
    detail: float = 0.0
    entertainment: float = 0.0

    model_config = {"extra": "ignore"}

    @field_validator("*", mode="after")
    @classmethod
    def clamp_score(cls, value: float) -> float:
        return max(0.0, min(10.0, float(value)))


class AnalysisVerdict(BaseModel):
    """Normalized verdict handed back to the client."""

    verdict: Verdict = DEFAULT_VERDICT
    confidence: int = DEFAULT_CONFIDENCE
    scores: Optional[LieScores] = None
    total_score: Optional[float] = Field(default=None, alias="totalScore")
    breakdown: str = ""
    signals: str = ""
    explanation: str = Field(
        default="",
        validation_alias=AliasChoices("judgment", "explanation"),
    )
    tip: str = ""
    raw_text: str = Field(default="", alias="raw")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("verdict", mode="before")
    @classmethod
    def normalize_verdict(cls, value: Any) -> str:
        if value is None:
            return DEFAULT_VERDICT
        label = str(value).strip().upper()
        return label if label in _KNOWN_VERDICTS else DEFAULT_VERDICT

    @field_validator("confidence", mode="before")
    @classmethod
    def normalize_confidence(cls, value: Any) -> int:
        if value is None:
            return DEFAULT_CONFIDENCE
        if isinstance(value, str):
            value = value.strip().rstrip("%")
        try:
            number = int(round(float(value)))
        except (TypeError, ValueError, OverflowError) as exc:
            raise ValueError(f"confidence is not a finite number: {value!r}") from exc
        return max(0, min(100, number))

    @field_validator("breakdown", "signals", "explanation", "tip", "raw_text", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            return "\n".join(str(item) for item in value)
        return str(value)


ParseStrategy = Callable[[str], Optional[AnalysisVerdict]]

_FENCE_LINE = re.compile(r"^[ \t]*```[ \t]*[\w+-]*[ \t]*$", re.MULTILINE)
_VERDICT_PATTERN = re.compile(
    rf"{re.escape(VERDICT_LABEL)}\s*(TRUTH|DECEPTION)", re.IGNORECASE
)
_CONFIDENCE_PATTERN = re.compile(
    rf"{re.escape(CONFIDENCE_LABEL)}\s*(\d+)", re.IGNORECASE
)


def _section_pattern(marker: str, stops: Sequence[str]) -> re.Pattern[str]:
    """Match text after ``marker`` up to the first of ``stops`` or end of text."""

    alternatives = [re.escape(stop) for stop in stops] + [r"\Z"]
    return re.compile(
        rf"{re.escape(marker)}\s*(.*?)(?={'|'.join(alternatives)})",
        re.DOTALL,
    )


_BREAKDOWN_PATTERN = _section_pattern(BREAKDOWN_MARKER, (SIGNALS_MARKER, EXPLANATION_MARKER))
_SIGNALS_PATTERN = _section_pattern(SIGNALS_MARKER, (EXPLANATION_MARKER,))
_EXPLANATION_PATTERN = _section_pattern(EXPLANATION_MARKER, ())


def strip_code_fences(payload: str) -> str:
    """Drop Markdown fence lines (```` ``` ```` or ```` ```json ````) and trim."""

    return _FENCE_LINE.sub("", payload).strip()


def _parse_party_json(raw_text: str) -> AnalysisVerdict | None:
    try:
        data = json.loads(strip_code_fences(raw_text))
    except json.JSONDecodeError as exc:
        logger.info("JSON parse failed, falling back to text parsing: %s", exc)
        return None

    if not isinstance(data, Mapping):
        logger.info("JSON payload is not an object, falling back to text parsing")
        return None

    payload: dict[str, Any] = {"totalScore": 0}
    payload.update({key: value for key, value in data.items() if value is not None})
    payload["raw"] = raw_text

    try:
        return AnalysisVerdict.model_validate(payload)
    except ValidationError as exc:
        logger.warning("JSON verdict failed validation, falling back to text parsing: %s", exc)
        return None


def _extract_section(pattern: re.Pattern[str], raw_text: str) -> str:
    match = pattern.search(raw_text)
    return match.group(1).strip() if match else ""


def _parse_labeled_sections(raw_text: str) -> AnalysisVerdict:
    verdict_match = _VERDICT_PATTERN.search(raw_text)
    confidence_match = _CONFIDENCE_PATTERN.search(raw_text)

    return AnalysisVerdict(
        verdict=verdict_match.group(1) if verdict_match else DEFAULT_VERDICT,
        confidence=int(confidence_match.group(1)) if confidence_match else DEFAULT_CONFIDENCE,
        scores=None,
        total_score=None,
        breakdown=_extract_section(_BREAKDOWN_PATTERN, raw_text),
        signals=_extract_section(_SIGNALS_PATTERN, raw_text),
        explanation=_extract_section(_EXPLANATION_PATTERN, raw_text),
        tip="",
        raw_text=raw_text,
    )


def raw_text_fallback(raw_text: str) -> AnalysisVerdict:
    """Last resort: keep the literal model output so the client can show it."""

    return AnalysisVerdict(breakdown=raw_text, raw_text=raw_text)


def parse_strategies(mode: str) -> list[ParseStrategy]:
    """Ordered strategies for ``mode``; unknown modes take the text path."""

    strategies: list[ParseStrategy] = []
    if mode == PARTY_MODE:
        strategies.append(_parse_party_json)
    strategies.append(_parse_labeled_sections)
    return strategies


def parse_result(raw_text: str, mode: str) -> AnalysisVerdict:
    """Extract a normalized verdict from the raw model output."""

    text = raw_text or ""
    try:
        for strategy in parse_strategies(mode):
            verdict = strategy(text)
            if verdict is not None:
                return verdict
    except Exception:  # pragma: no cover - defensive
        logger.exception("Unexpected failure while parsing analysis output")
    return raw_text_fallback(text)


__all__ = [
    "AnalysisVerdict",
    "LieScores",
    "ParseStrategy",
    "Verdict",
    "parse_result",
    "parse_strategies",
    "raw_text_fallback",
    "strip_code_fences",
]
