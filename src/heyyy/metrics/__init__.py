from __future__ import annotations

from heyyy.metrics.aggregator import aggregate, collect_outcomes, summarize_latency
from heyyy.metrics.models import ErrorType, LatencySummary, RunReport, TaskOutcome

__all__ = [
    "ErrorType",
    "LatencySummary",
    "RunReport",
    "TaskOutcome",
    "aggregate",
    "collect_outcomes",
    "summarize_latency",
]
