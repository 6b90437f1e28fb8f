"""Deception analysis endpoint.

The POST `/api/analyze` pipeline (see `truth_machine.pipelines.analysis`):

1. Read the multipart upload, rejecting recordings above the size limit.
2. Transcribe the recording; the temporary file is deleted right after.
3. Ask the chat model for a verdict and parse it into a normalized record.
"""

from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile

from truth_machine.controllers.dependencies import AnalysisServiceDep, SettingsDep
from truth_machine.pipelines.analysis import build_analysis_request
from truth_machine.views import AnalysisResponse, ErrorResponse

router = APIRouter(prefix="/api", tags=["analysis"])

_AUDIO_FILE_UPLOAD = File(None)
_MODE_FORM = Form("free")
_PROMPT_FORM = Form(None)


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze_audio(
    service: AnalysisServiceDep,
    settings: SettingsDep,
    audio: Optional[UploadFile] = _AUDIO_FILE_UPLOAD,
    mode: Optional[str] = _MODE_FORM,
    prompt: Optional[str] = _PROMPT_FORM,
) -> AnalysisResponse:
    """Transcribe an uploaded recording and deliver a lie-detector verdict."""

    request = await build_analysis_request(
        audio,
        mode,
        prompt,
        max_bytes=settings.uploads.max_bytes,
    )
    outcome = await service.analyze(request)
    return AnalysisResponse.from_outcome(outcome)
