"""Request ingestion helpers (Stage 01 of the analysis pipeline)."""

from __future__ import annotations

from fastapi import UploadFile

from truth_machine.services.errors import AudioTooLargeError

from .types import AnalysisRequest

DEFAULT_MODE = "free"


async def read_audio_upload(audio_file: UploadFile | None, max_bytes: int) -> bytes | None:
    """Load the upload into memory; None when absent or empty, error when oversized."""

    if audio_file is None:
        return None

    audio_bytes = await audio_file.read(max_bytes + 1)
    await audio_file.close()

    if len(audio_bytes) > max_bytes:
        raise AudioTooLargeError(
            f"Audio uploads are limited to {max_bytes // (1024 * 1024)}MB"
        )
    return audio_bytes or None


def normalize_mode(mode: str | None) -> str:
    """Blank or missing modes default to free play; anything else passes through."""

    cleaned = (mode or "").strip()
    return cleaned or DEFAULT_MODE


def normalize_prompt(prompt: str | None) -> str | None:
    if prompt is None:
        return None
    cleaned = prompt.strip()
    return cleaned or None


async def build_analysis_request(
    audio_file: UploadFile | None,
    mode: str | None,
    prompt: str | None,
    *,
    max_bytes: int,
) -> AnalysisRequest:
    """Turn the multipart form fields into an `AnalysisRequest`."""

    return AnalysisRequest(
        audio_bytes=await read_audio_upload(audio_file, max_bytes),
        mode=normalize_mode(mode),
        challenge_prompt=normalize_prompt(prompt),
    )


__all__ = [
    "DEFAULT_MODE",
    "build_analysis_request",
    "normalize_mode",
    "normalize_prompt",
    "read_audio_upload",
]
