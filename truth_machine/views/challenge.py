"""Pydantic schema for party-game challenges."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from truth_machine.services.challenges import ChallengeType


class ChallengeRead(BaseModel):
    type: ChallengeType
    title: str
    instruction: str
    question: Optional[str] = None
    follow_up: Optional[str] = Field(default=None, alias="followUp")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
