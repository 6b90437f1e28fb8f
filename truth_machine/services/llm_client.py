"""Thin OpenAI chat client wrapper for the deception analysis."""

from __future__ import annotations

import logging

from openai import AsyncOpenAI

from truth_machine.config.settings import OpenAIConfig

from .errors import ExternalServiceError

logger = logging.getLogger(__name__)


class LlmInvocationError(ExternalServiceError):
    """Raised when the chat completion call fails."""


class OpenAIChatClient:
    """Invoke OpenAI chat models with standard configuration."""

    def __init__(self, client: AsyncOpenAI, config: OpenAIConfig) -> None:
        self._client = client
        self._config = config

    async def invoke(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int | None = None,
        temperature: float | None = None,
        model: str | None = None,
    ) -> str | None:
        """Run a chat completion and return the first choice's text."""

        try:
            response = await self._client.chat.completions.create(
                model=model or self._config.chat_model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=(
                    temperature
                    if temperature is not None
                    else self._config.temperature
                ),
                max_tokens=max_tokens or self._config.max_tokens,
            )
        except Exception as exc:  # pragma: no cover - external dependency
            raise LlmInvocationError(str(exc)) from exc

        if not response.choices:
            return None
        content = response.choices[0].message.content
        return content.strip() if content else None


__all__ = ["LlmInvocationError", "OpenAIChatClient"]
