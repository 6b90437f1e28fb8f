"""Tests for the random challenge catalog."""

from __future__ import annotations

import random

from truth_machine.services.challenges import (
    ALIBI_QUESTIONS,
    CHALLENGE_TEMPLATES,
    NEVER_HAVE_I_STATEMENTS,
    YES_NO_QUESTIONS,
    get_challenge,
)

QUESTION_POOLS = {
    "yes_no": YES_NO_QUESTIONS,
    "alibi": ALIBI_QUESTIONS,
    "never_have_i": NEVER_HAVE_I_STATEMENTS,
}


def test_catalog_has_six_distinct_types():
    types = [template.type for template in CHALLENGE_TEMPLATES]

    assert len(types) == 6
    assert set(types) == {"two_truths", "yes_no", "story", "confession", "alibi", "never_have_i"}


def test_seeded_random_source_is_deterministic():
    first = [get_challenge(random.Random(1234)) for _ in range(3)]
    second = [get_challenge(random.Random(1234)) for _ in range(3)]

    assert first == second


def test_every_type_appears_given_enough_draws():
    rng = random.Random(7)

    seen = {get_challenge(rng).type for _ in range(500)}

    assert seen == {template.type for template in CHALLENGE_TEMPLATES}


def test_questions_come_from_the_matching_pool():
    rng = random.Random(99)

    for _ in range(300):
        challenge = get_challenge(rng)
        if challenge.type in QUESTION_POOLS:
            assert challenge.question in QUESTION_POOLS[challenge.type]
        else:
            assert challenge.question is None


def test_two_truths_carries_follow_up():
    template = next(t for t in CHALLENGE_TEMPLATES if t.type == "two_truths")

    challenge = template.render(random.Random(0))

    assert challenge.follow_up == "Which statement was the lie?"
    assert challenge.question is None
