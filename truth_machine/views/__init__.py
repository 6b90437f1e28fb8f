"""Pydantic schemas used as views in the MVC architecture."""

from .analysis import AnalysisResponse
from .challenge import ChallengeRead
from .common import ErrorResponse, HealthResponse

__all__ = [
    "AnalysisResponse",
    "ChallengeRead",
    "ErrorResponse",
    "HealthResponse",
]
