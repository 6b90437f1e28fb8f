"""Helpers to construct system/user prompts for the deception analysis LLM.

Two user prompt formats exist:
* party mode asks for a strict JSON scorecard (parsed as JSON first).
* every other mode asks for a labeled plain-text layout whose section markers
  are shared with ``response_contract`` so both sides match verbatim.
"""

from __future__ import annotations

PARTY_MODE = "party"

VERDICT_LABEL = "VERDICT:"
CONFIDENCE_LABEL = "CONFIDENCE:"
BREAKDOWN_MARKER = "🎯 THE BREAKDOWN:"
SIGNALS_MARKER = "🔍 SUSPICIOUS SIGNALS:"
EXPLANATION_MARKER = "💡 THE VERDICT EXPLAINED:"

SCORE_CRITERIA: tuple[str, ...] = (
    "deception",
    "conviction",
    "creativity",
    "detail",
    "entertainment",
)

SYSTEM_PROMPT = """You are "THE TRUTH MACHINE" - a dramatic, entertaining AI lie detector for a party game.
Your job is to analyze statements and deliver verdicts with theatrical flair.

You analyze linguistic patterns that MIGHT indicate deception (for entertainment purposes):
- Hedging language ("I think", "maybe", "probably")
- Distancing language (avoiding "I", using passive voice)
- Over-explanation or excessive detail
- Lack of sensory details in stories
- Qualifying statements excessively
- Unusual pause patterns or filler words
- Inconsistencies or vague timelines
- Overly smooth, rehearsed-sounding responses

Remember: This is a PARTY GAME. Be dramatic, fun, and entertaining! Use emojis sparingly but effectively.
Your verdicts should feel like a game show reveal."""


def speech_metrics(transcript: str, duration_seconds: float | None) -> tuple[int, float]:
    """Return (word_count, words_per_second); durations below one second count as one."""

    word_count = len(transcript.split())
    pace = word_count / max(duration_seconds or 0, 1)
    return word_count, pace


def _format_duration(duration_seconds: float | None) -> str:
    if duration_seconds is None:
        return "unknown"
    return f"{duration_seconds:.1f}"


def _party_prompt(
    transcript: str,
    duration: str,
    word_count: int,
    pace: float,
    challenge_prompt: str | None,
) -> str:
    challenge_line = f'🎯 THE CHALLENGE: "{challenge_prompt}"\n\n' if challenge_prompt else ""
    return f"""You are THE TRUTH MACHINE - a dramatic game show host judging lies at a party!

{challenge_line}🎤 THE PLAYER'S LIE: "{transcript}"

📊 SPEECH DATA:
- Duration: {duration} seconds
- Words: {word_count}
- Pace: {pace:.1f} words/sec

SCORE THIS LIE on 5 criteria. Use PRECISE decimals (7.3, 8.7, 6.1 etc.) - NEVER round numbers!

Return ONLY this JSON (no markdown, no explanation before/after):
{{
  "verdict": "TRUTH" or "DECEPTION",
  "confidence": [50-99 integer, how sure you are],
  "scores": {{
    "deception": [0.0-10.0 - POKER FACE: Did they sell it? Voice steady? No nervous tells?],
    "conviction": [0.0-10.0 - CONFIDENCE: Did they sound like they believed their own lie?],
    "creativity": [0.0-10.0 - IMAGINATION: Was this a creative, original story or basic?],
    "detail": [0.0-10.0 - WORLD-BUILDING: Rich details, names, specifics? Or vague?],
    "entertainment": [0.0-10.0 - SHOWMANSHIP: Was it funny, dramatic, or entertaining?]
  }},
  "totalScore": [sum of all 5 scores],
  "breakdown": "[2-3 sentence performance review - be specific about what they did]",
  "signals": "[What linguistic/vocal patterns gave them away OR fooled you]",
  "judgment": "[DRAMATIC 1-2 sentence game show verdict with personality!]",
  "tip": "[One specific, actionable tip to become a better liar]"
}}"""


def _standard_prompt(
    transcript: str,
    duration: str,
    pace: float,
    mode: str,
    challenge_prompt: str | None,
) -> str:
    context_info = ""
    if challenge_prompt:
        context_info = f'\n\nCONTEXT: They were responding to this challenge: "{challenge_prompt}"'
    return f"""ANALYZE THIS STATEMENT FOR DECEPTION:

"{transcript}"

SPEECH METRICS:
- Duration: {duration} seconds
- Approximate speaking pace: {pace:.1f} words/second
- Mode: {mode}{context_info}

Provide your analysis in this EXACT format:

{VERDICT_LABEL} [TRUTH or DECEPTION]
{CONFIDENCE_LABEL} [0-100]%

{BREAKDOWN_MARKER}
[2-3 sentences explaining what you detected in their speech patterns]

{SIGNALS_MARKER}
[List 2-4 specific things you noticed, or "None detected" if clean]

{EXPLANATION_MARKER}
[1-2 entertaining sentences delivering your final judgment with dramatic flair]

Remember: Be entertaining! This is a party game. Ham it up!"""


def build_prompt(
    transcript: str,
    duration_seconds: float | None,
    mode: str,
    challenge_prompt: str | None = None,
) -> str:
    """Compose the user prompt for the selected mode."""

    word_count, pace = speech_metrics(transcript, duration_seconds)
    duration = _format_duration(duration_seconds)

    if mode == PARTY_MODE:
        return _party_prompt(transcript, duration, word_count, pace, challenge_prompt)
    return _standard_prompt(transcript, duration, pace, mode, challenge_prompt)


__all__ = [
    "BREAKDOWN_MARKER",
    "CONFIDENCE_LABEL",
    "EXPLANATION_MARKER",
    "PARTY_MODE",
    "SCORE_CRITERIA",
    "SIGNALS_MARKER",
    "SYSTEM_PROMPT",
    "VERDICT_LABEL",
    "build_prompt",
    "speech_metrics",
]
