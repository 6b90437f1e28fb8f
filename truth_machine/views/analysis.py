"""Pydantic schemas for the analysis endpoint."""

from truth_machine.pipelines.analysis.types import AnalysisOutcome
from truth_machine.services.response_contract import AnalysisVerdict


class AnalysisResponse(AnalysisVerdict):
    success: bool = True
    transcript: str
    duration: float

    @classmethod
    def from_outcome(cls, outcome: AnalysisOutcome) -> "AnalysisResponse":
        return cls(
            transcript=outcome.transcript,
            duration=outcome.duration,
            **outcome.verdict.model_dump(),
        )
