"""Prompt construction stage for the analysis pipeline.

Stage **03** turns the transcript + speech metrics into the system/user
prompts consumed by the chat model.
"""

from __future__ import annotations

import logging

from truth_machine.services.prompt_builder import SYSTEM_PROMPT, build_prompt

from .types import LlmRequest

logger = logging.getLogger("truth_machine.pipeline")


def _truncate(value: str, max_length: int = 240) -> str:
    if len(value) <= max_length:
        return value
    return value[: max_length - 3] + "..."


def build_llm_request(
    transcript: str,
    duration: float,
    *,
    mode: str,
    challenge_prompt: str | None = None,
) -> LlmRequest:
    """Assemble prompts and metadata for the LLM invocation."""

    user_prompt = build_prompt(transcript, duration, mode, challenge_prompt)

    logger.info(
        "Prompt built mode=%s\nUSER> %s",
        mode,
        _truncate(user_prompt, 500),
    )

    return LlmRequest(
        transcript=transcript,
        duration=duration,
        mode=mode,
        system_prompt=SYSTEM_PROMPT,
        user_prompt=user_prompt,
    )


__all__ = ["build_llm_request"]
