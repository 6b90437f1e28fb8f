"""Random challenge controller."""

from dataclasses import asdict

from fastapi import APIRouter

from truth_machine.controllers.dependencies import ChallengeRngDep
from truth_machine.services.challenges import get_challenge
from truth_machine.views import ChallengeRead

router = APIRouter(prefix="/api", tags=["challenge"])


@router.get("/challenge", response_model=ChallengeRead, response_model_exclude_none=True)
async def random_challenge(rng: ChallengeRngDep) -> ChallengeRead:
    """Return one randomly selected party-game challenge."""

    return ChallengeRead(**asdict(get_challenge(rng)))
