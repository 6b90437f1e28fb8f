"""Typed containers shared across the analysis pipeline.

These dataclasses live in their own module so the other stages
(`ingestion`, `prompts`, `llm`, `orchestrator`) can import them without
creating circular dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from truth_machine.services.response_contract import AnalysisVerdict


@dataclass(frozen=True)
class AnalysisRequest:
    """One uploaded recording plus the game settings it was recorded under."""

    audio_bytes: bytes | None
    mode: str = "free"
    challenge_prompt: str | None = None


@dataclass(frozen=True)
class LlmRequest:
    """Normalized payload handed to the chat model."""

    transcript: str
    duration: float
    mode: str
    system_prompt: str
    user_prompt: str


@dataclass(frozen=True)
class LlmOutcome:
    """Parsed verdict produced by the LLM stage of the pipeline."""

    verdict: AnalysisVerdict
    raw_response: str


@dataclass(frozen=True)
class AnalysisOutcome:
    transcript: str
    duration: float
    verdict: AnalysisVerdict
