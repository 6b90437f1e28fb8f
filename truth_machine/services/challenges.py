"""Random party-game challenges served by `/api/challenge`."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Literal, Sequence

ChallengeType = Literal[
    "two_truths",
    "yes_no",
    "story",
    "confession",
    "alibi",
    "never_have_i",
]

YES_NO_QUESTIONS: tuple[str, ...] = (
    "Have you ever pretended to be sick to skip work or school?",
    "Have you ever snooped through someone's phone?",
    "Have you ever lied about your age?",
    "Have you ever taken credit for someone else's work?",
    "Have you ever pretended to like a gift you actually hated?",
    "Have you ever eavesdropped on a private conversation?",
    "Have you ever blamed a fart on someone else?",
    "Have you ever lied on your resume?",
    "Have you ever secretly read someone's diary or messages?",
    "Have you ever returned an item after using it?",
)

ALIBI_QUESTIONS: tuple[str, ...] = (
    "Where were you last Saturday night at 10pm?",
    "What did you have for breakfast three days ago?",
    "Who was the last person you texted and what about?",
    "What were you doing exactly one week ago right now?",
    "Where were you when you heard the news about [that thing]?",
)

NEVER_HAVE_I_STATEMENTS: tuple[str, ...] = (
    "Have you ever ghosted someone?",
    "Have you ever lied to get out of plans?",
    "Have you ever pretended to know a song everyone else knew?",
    "Have you ever stolen something (even small)?",
    "Have you ever had a secret social media account?",
    "Have you ever blamed autocorrect for a message you meant to send?",
    "Have you ever pretended to be on a phone call to avoid someone?",
    "Have you ever re-gifted a present?",
)


@dataclass(frozen=True)
class Challenge:
    type: ChallengeType
    title: str
    instruction: str
    question: str | None = None
    follow_up: str | None = None


@dataclass(frozen=True)
class ChallengeTemplate:
    """Catalog entry; templates with a pool get a random question attached."""

    type: ChallengeType
    title: str
    instruction: str
    questions: Sequence[str] = ()
    follow_up: str | None = None

    def render(self, rng: random.Random) -> Challenge:
        question = rng.choice(self.questions) if self.questions else None
        return Challenge(
            type=self.type,
            title=self.title,
            instruction=self.instruction,
            question=question,
            follow_up=self.follow_up,
        )


CHALLENGE_TEMPLATES: tuple[ChallengeTemplate, ...] = (
    ChallengeTemplate(
        type="two_truths",
        title="🎭 Two Truths & A Lie",
        instruction=(
            "Tell us THREE things about yourself. Two must be TRUE, one must be "
            "a LIE. We'll guess which is the lie!"
        ),
        follow_up="Which statement was the lie?",
    ),
    ChallengeTemplate(
        type="yes_no",
        title="❓ Yes or No",
        instruction="Answer this question honestly... or not! We'll detect if you're lying.",
        questions=YES_NO_QUESTIONS,
    ),
    ChallengeTemplate(
        type="story",
        title="📖 Story Time",
        instruction=(
            "Tell us a short story about something that happened to you. It can "
            "be TRUE or completely MADE UP!"
        ),
    ),
    ChallengeTemplate(
        type="confession",
        title="🤫 Confession Booth",
        instruction=(
            "Confess something! It can be a real confession or a fake one. "
            "We'll judge your sincerity!"
        ),
    ),
    ChallengeTemplate(
        type="alibi",
        title="🕵️ The Alibi",
        instruction="Answer this question. Give us your alibi - truth or lies, your choice!",
        questions=ALIBI_QUESTIONS,
    ),
    ChallengeTemplate(
        type="never_have_i",
        title="🙅 Never Have I Ever",
        instruction="Have you done this? Answer truthfully... or bluff!",
        questions=NEVER_HAVE_I_STATEMENTS,
    ),
)


def get_challenge(rng: random.Random | None = None) -> Challenge:
    """Pick a template uniformly at random and render it."""

    source = rng if rng is not None else random.Random()
    template = source.choice(CHALLENGE_TEMPLATES)
    return template.render(source)


__all__ = [
    "ALIBI_QUESTIONS",
    "CHALLENGE_TEMPLATES",
    "Challenge",
    "ChallengeTemplate",
    "NEVER_HAVE_I_STATEMENTS",
    "YES_NO_QUESTIONS",
    "get_challenge",
]
