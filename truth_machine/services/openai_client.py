"""Shared OpenAI helpers for service clients."""

from __future__ import annotations

from typing import Any

from openai import AsyncOpenAI

from truth_machine.config.settings import OpenAIConfig


def create_openai_client(config: OpenAIConfig) -> AsyncOpenAI | None:
    """Instantiate an async OpenAI client, or None when no credential is set."""

    if not config.configured:
        return None

    client_kwargs: dict[str, Any] = {"api_key": config.api_key.get_secret_value()}
    if config.base_url:
        client_kwargs["base_url"] = config.base_url
    return AsyncOpenAI(**client_kwargs)


__all__ = ["create_openai_client"]
