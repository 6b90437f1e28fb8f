"""Deception analysis LLM stage (Stage 04)."""

from __future__ import annotations

import logging
from typing import Protocol

from truth_machine.services.response_contract import parse_result

from .types import LlmOutcome, LlmRequest

logger = logging.getLogger("truth_machine.pipeline")


class ChatClient(Protocol):
    async def invoke(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int | None = None,
        temperature: float | None = None,
        model: str | None = None,
    ) -> str | None: ...


def _truncate(value: str, max_length: int = 500) -> str:
    if len(value) <= max_length:
        return value
    return value[: max_length - 3] + "..."


async def call_analysis_llm(
    client: ChatClient,
    request: LlmRequest,
    *,
    temperature: float,
    max_tokens: int,
) -> LlmOutcome:
    """Invoke the chat model once and parse whatever it returned."""

    raw_response = await client.invoke(
        system_prompt=request.system_prompt,
        user_prompt=request.user_prompt,
        temperature=temperature,
        max_tokens=max_tokens,
    )
    if not raw_response:
        logger.warning("LLM returned an empty response mode=%s", request.mode)
        raw_response = ""

    logger.info("Raw LLM response mode=%s: %s", request.mode, _truncate(raw_response))

    verdict = parse_result(raw_response, request.mode)
    return LlmOutcome(verdict=verdict, raw_response=raw_response)


__all__ = ["ChatClient", "call_analysis_llm"]
