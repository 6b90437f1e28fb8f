"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

import random
from typing import Annotated

from fastapi import Depends, Request

from truth_machine.config.settings import Settings
from truth_machine.pipelines.analysis import AnalysisService


def get_settings(request: Request) -> Settings:
    """Return the settings object the app was created with."""

    return request.app.state.settings


def get_analysis_service(request: Request) -> AnalysisService:
    """Return the analysis service built at startup."""

    return request.app.state.analysis_service


def get_challenge_rng() -> random.Random:
    """Fresh OS-seeded random source for challenge selection."""

    return random.Random()


SettingsDep = Annotated[Settings, Depends(get_settings)]
AnalysisServiceDep = Annotated[AnalysisService, Depends(get_analysis_service)]
ChallengeRngDep = Annotated[random.Random, Depends(get_challenge_rng)]


__all__ = [
    "AnalysisServiceDep",
    "ChallengeRngDep",
    "SettingsDep",
    "get_analysis_service",
    "get_challenge_rng",
    "get_settings",
]
