"""End-to-end choreography behind `POST /api/analyze`.

1. Guard: a transcription/chat capability must be configured.
2. Guard: an audio payload must be present.
3. Store the recording as a temporary artifact and transcribe it; the artifact
   is released as soon as the transcription block exits, success or not.
4. Build the prompts, call the chat model once, and parse the raw output.

Nothing is retried; the first failure aborts the request.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Protocol

from truth_machine.config.settings import Settings
from truth_machine.services.errors import (
    AnalysisError,
    ClientInputError,
    ConfigurationError,
    ExternalServiceError,
)
from truth_machine.services.llm_client import OpenAIChatClient
from truth_machine.services.openai_client import create_openai_client
from truth_machine.services.storage import store_audio
from truth_machine.services.transcribe import TranscriptionResult, WhisperTranscriber
from truth_machine.telemetry import record_analysis_failure, record_verdict

from .llm import ChatClient, call_analysis_llm
from .prompts import build_llm_request
from .types import AnalysisOutcome, AnalysisRequest

logger = logging.getLogger("truth_machine.pipeline")
transcript_logger = logging.getLogger("truth_machine.logs.transcript")

MISSING_CREDENTIAL_MESSAGE = (
    "OpenAI API key is not set. Please set OPENAI_API_KEY environment variable."
)


class Transcriber(Protocol):
    async def transcribe(self, audio_path: Path) -> TranscriptionResult: ...


class AnalysisService:
    """Runs one recording through transcription, analysis and parsing."""

    def __init__(
        self,
        settings: Settings,
        *,
        transcriber: Transcriber | None = None,
        llm_client: ChatClient | None = None,
    ) -> None:
        self._settings = settings
        self._transcriber = transcriber
        self._llm_client = llm_client

    @classmethod
    def from_settings(cls, settings: Settings) -> "AnalysisService":
        """Wire the OpenAI-backed clients when a credential is configured."""

        client = create_openai_client(settings.openai)
        if client is None:
            logger.warning("No OPENAI_API_KEY found - analysis is disabled until a key is provided")
            return cls(settings)

        logger.info("OpenAI API key configured")
        return cls(
            settings,
            transcriber=WhisperTranscriber(client, settings.openai.transcription_model),
            llm_client=OpenAIChatClient(client, settings.openai),
        )

    @property
    def configured(self) -> bool:
        return self._transcriber is not None and self._llm_client is not None

    @property
    def upload_dir(self) -> Path:
        return Path(self._settings.uploads.dir)

    async def analyze(self, request: AnalysisRequest) -> AnalysisOutcome:
        if not self.configured:
            record_analysis_failure(ConfigurationError.error)
            raise ConfigurationError(MISSING_CREDENTIAL_MESSAGE)
        if not request.audio_bytes:
            record_analysis_failure(ClientInputError.error)
            raise ClientInputError()

        logger.info("Received audio for analysis (mode: %s)", request.mode)

        try:
            outcome = await self._run(request)
        except AnalysisError as exc:
            logger.error("Analysis error mode=%s: %s", request.mode, exc)
            record_analysis_failure(exc.error)
            raise
        except Exception as exc:
            logger.exception("Analysis error mode=%s", request.mode)
            record_analysis_failure(ExternalServiceError.error)
            raise ExternalServiceError(str(exc)) from exc

        record_verdict(request.mode, outcome.verdict.verdict)
        return outcome

    async def _run(self, request: AnalysisRequest) -> AnalysisOutcome:
        artifact = await asyncio.to_thread(
            store_audio,
            self.upload_dir,
            request.audio_bytes,
            extension=self._settings.uploads.extension,
        )
        with artifact:
            transcription = await self._transcriber.transcribe(artifact.path)

        transcript_logger.info(
            "mode=%s | duration=%.1f | text=%s",
            request.mode,
            transcription.duration,
            transcription.text,
        )

        llm_request = build_llm_request(
            transcription.text,
            transcription.duration,
            mode=request.mode,
            challenge_prompt=request.challenge_prompt,
        )
        llm_outcome = await call_analysis_llm(
            self._llm_client,
            llm_request,
            temperature=self._settings.openai.temperature,
            max_tokens=self._settings.openai.max_tokens,
        )

        verdict = llm_outcome.verdict
        logger.info("Verdict: %s (%s%% confidence)", verdict.verdict, verdict.confidence)
        if verdict.scores is not None:
            logger.info("Scores: %s", verdict.scores.model_dump())

        return AnalysisOutcome(
            transcript=transcription.text,
            duration=transcription.duration,
            verdict=verdict,
        )


__all__ = ["AnalysisService", "MISSING_CREDENTIAL_MESSAGE", "Transcriber"]
