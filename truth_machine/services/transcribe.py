"""Whisper transcription helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from openai import AsyncOpenAI

from .errors import ExternalServiceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranscriptionResult:
    """Structured transcription outcome returned to the pipeline."""

    text: str
    duration: float = 0.0


class TranscriptionError(ExternalServiceError):
    """Raised when the transcription service fails to process audio."""


class WhisperTranscriber:
    """Send a stored recording to the OpenAI transcription endpoint."""

    def __init__(self, client: AsyncOpenAI, model: str = "whisper-1") -> None:
        self._client = client
        self._model = model

    async def transcribe(self, audio_path: Path) -> TranscriptionResult:
        """Return the transcript text and the recording duration in seconds."""

        try:
            with audio_path.open("rb") as audio_fp:
                response = await self._client.audio.transcriptions.create(
                    model=self._model,
                    file=audio_fp,
                    response_format="verbose_json",
                )
        except Exception as exc:  # pragma: no cover - external dependency
            raise TranscriptionError(str(exc)) from exc

        text = (getattr(response, "text", None) or "").strip()
        duration = getattr(response, "duration", None) or 0.0
        logger.info("Transcription complete. Length: %s, duration: %.1fs", len(text), duration)
        return TranscriptionResult(text=text, duration=float(duration))


__all__ = ["TranscriptionError", "TranscriptionResult", "WhisperTranscriber"]
