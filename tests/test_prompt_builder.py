"""Unit tests for prompt construction; no network access involved."""

from __future__ import annotations

from truth_machine.pipelines.analysis import build_llm_request
from truth_machine.services.prompt_builder import (
    BREAKDOWN_MARKER,
    EXPLANATION_MARKER,
    SCORE_CRITERIA,
    SIGNALS_MARKER,
    SYSTEM_PROMPT,
    build_prompt,
    speech_metrics,
)


def test_zero_duration_counts_as_one_second():
    prompt = build_prompt("one two three four", 0, "free")

    assert "Duration: 0.0 seconds" in prompt
    assert "Approximate speaking pace: 4.0 words/second" in prompt


def test_missing_duration_is_reported_as_unknown():
    prompt = build_prompt("one two", None, "free")

    assert "Duration: unknown seconds" in prompt
    assert "2.0 words/second" in prompt


def test_speech_metrics_split_on_any_whitespace():
    word_count, pace = speech_metrics("  I   swear\tI was\nhome ", 2.5)

    assert word_count == 5
    assert pace == 2.0


def test_short_recordings_do_not_inflate_pace():
    _, pace = speech_metrics("a b c", 0.5)

    assert pace == 3.0


def test_standard_prompt_lists_every_section_marker():
    prompt = build_prompt("I was home all night.", 3.2, "free")

    assert "VERDICT: [TRUTH or DECEPTION]" in prompt
    assert "CONFIDENCE: [0-100]%" in prompt
    for marker in (BREAKDOWN_MARKER, SIGNALS_MARKER, EXPLANATION_MARKER):
        assert marker in prompt
    assert "Mode: free" in prompt
    assert '"I was home all night."' in prompt
    assert "CONTEXT:" not in prompt


def test_party_prompt_requests_strict_json():
    prompt = build_prompt("I once met a astronaut at a bus stop.", 6.0, "party")

    for key in ("verdict", "confidence", "scores", "totalScore", "breakdown", "signals", "judgment", "tip"):
        assert f'"{key}"' in prompt
    for criterion in SCORE_CRITERIA:
        assert f'"{criterion}"' in prompt
    assert "no markdown" in prompt
    assert "NEVER round numbers" in prompt
    assert "50-99" in prompt
    assert "THE CHALLENGE" not in prompt
    assert BREAKDOWN_MARKER not in prompt


def test_challenge_prompt_is_named_in_both_formats():
    challenge = "Have you ever re-gifted a present?"

    standard = build_prompt("No, never.", 1.5, "free", challenge)
    party = build_prompt("No, never.", 1.5, "party", challenge)

    assert f'CONTEXT: They were responding to this challenge: "{challenge}"' in standard
    assert f'THE CHALLENGE: "{challenge}"' in party


def test_unknown_mode_uses_standard_format():
    prompt = build_prompt("hello there", 1.0, "roast")

    assert "Mode: roast" in prompt
    assert SIGNALS_MARKER in prompt


def test_llm_request_pairs_system_persona_with_user_prompt():
    request = build_llm_request("I was home.", 2.0, mode="party", challenge_prompt=None)

    assert request.system_prompt == SYSTEM_PROMPT
    assert request.user_prompt == build_prompt("I was home.", 2.0, "party")
    assert request.mode == "party"
    assert "Hedging language" in SYSTEM_PROMPT
