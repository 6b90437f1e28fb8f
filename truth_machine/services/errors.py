"""Error taxonomy for the analysis endpoint.

Each error knows the HTTP status it maps to and the public ``error`` label the
client sees; the optional message carries details (e.g. the upstream reason).
"""

from __future__ import annotations

from typing import Any


class AnalysisError(RuntimeError):
    """Base class for failures surfaced by `/api/analyze`."""

    status_code: int = 500
    error: str = "Analysis failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.error)
        self.message = message

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error}
        if self.message:
            payload["message"] = self.message
        return payload


class ConfigurationError(AnalysisError):
    """Raised when no transcription/chat credential is configured."""

    error = "API not configured"


class ClientInputError(AnalysisError):
    """Raised when the request does not carry a usable audio payload."""

    status_code = 400
    error = "No audio file provided"


class AudioTooLargeError(ClientInputError):
    error = "Audio file too large"


class ExternalServiceError(AnalysisError):
    """Raised when the transcription or generation service fails."""


__all__ = [
    "AnalysisError",
    "AudioTooLargeError",
    "ClientInputError",
    "ConfigurationError",
    "ExternalServiceError",
]
