"""Service layer helpers for external integrations."""

from .challenges import Challenge, get_challenge
from .errors import (
    AnalysisError,
    AudioTooLargeError,
    ClientInputError,
    ConfigurationError,
    ExternalServiceError,
)
from .llm_client import LlmInvocationError, OpenAIChatClient
from .openai_client import create_openai_client
from .prompt_builder import SYSTEM_PROMPT, build_prompt
from .response_contract import AnalysisVerdict, LieScores, parse_result
from .storage import AudioArtifact, StorageError, prepare_upload_dir, store_audio
from .transcribe import TranscriptionError, TranscriptionResult, WhisperTranscriber

__all__ = [
    "AnalysisError",
    "AnalysisVerdict",
    "AudioArtifact",
    "AudioTooLargeError",
    "Challenge",
    "ClientInputError",
    "ConfigurationError",
    "ExternalServiceError",
    "LieScores",
    "LlmInvocationError",
    "OpenAIChatClient",
    "SYSTEM_PROMPT",
    "StorageError",
    "TranscriptionError",
    "TranscriptionResult",
    "WhisperTranscriber",
    "build_prompt",
    "create_openai_client",
    "get_challenge",
    "parse_result",
    "prepare_upload_dir",
    "store_audio",
]
