"""Deception analysis pipeline package.

Modules are organised by the order in which `/api/analyze` executes:

1. `ingestion` – turn the multipart upload into an `AnalysisRequest`.
2. `orchestrator` – store, transcribe and release the recording.
3. `prompts` – assemble the system/user prompts.
4. `llm` – call the chat model once and parse its output.
"""

from .ingestion import build_analysis_request, normalize_mode, read_audio_upload
from .llm import call_analysis_llm
from .orchestrator import AnalysisService
from .prompts import build_llm_request
from .types import AnalysisOutcome, AnalysisRequest, LlmOutcome, LlmRequest

__all__ = [
    "AnalysisOutcome",
    "AnalysisRequest",
    "AnalysisService",
    "LlmOutcome",
    "LlmRequest",
    "build_analysis_request",
    "build_llm_request",
    "call_analysis_llm",
    "normalize_mode",
    "read_audio_upload",
]
