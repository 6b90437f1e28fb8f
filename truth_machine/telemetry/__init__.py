"""Telemetry helpers and metrics."""

from .metrics import (
    ANALYSIS_FAILURES,
    ERROR_COUNTER,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    REQUESTS_IN_PROGRESS,
    VERDICT_COUNTER,
    observe_request,
    record_analysis_failure,
    record_verdict,
)

__all__ = [
    "ANALYSIS_FAILURES",
    "ERROR_COUNTER",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "REQUESTS_IN_PROGRESS",
    "VERDICT_COUNTER",
    "observe_request",
    "record_analysis_failure",
    "record_verdict",
]
