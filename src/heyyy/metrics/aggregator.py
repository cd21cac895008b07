from __future__ import annotations

import asyncio
import logging
from collections import Counter
from typing import Iterable, Sequence

import numpy as np

from heyyy.metrics.models import ErrorType, LatencySummary, RunReport, TaskOutcome

logger = logging.getLogger(__name__)


async def collect_outcomes(tasks: Sequence[asyncio.Task[TaskOutcome]]) -> list[TaskOutcome]:
    """Await every task in launch order, folding cancelled or crashed tasks into failures."""
    outcomes: list[TaskOutcome] = []
    for index, task in enumerate(tasks):
        await asyncio.wait([task])
        if task.cancelled():
            logger.warning("request task %d was cancelled", index)
            outcome = TaskOutcome.failed(ErrorType.CANCELLED)
        elif task.exception() is not None:
            logger.warning("request task %d crashed: %r", index, task.exception())
            outcome = TaskOutcome.failed(ErrorType.CRASHED)
        else:
            outcome = task.result()
        outcomes.append(outcome)
    return outcomes


def summarize_latency(latencies: Sequence[float]) -> LatencySummary:
    if not latencies:
        return LatencySummary()
    values = np.asarray(latencies, dtype=float)
    return LatencySummary(
        min_ms=float(values.min()),
        mean_ms=float(values.mean()),
        p50_ms=float(np.percentile(values, 50)),
        p95_ms=float(np.percentile(values, 95)),
        p99_ms=float(np.percentile(values, 99)),
        max_ms=float(values.max()),
    )


def aggregate(outcomes: Iterable[TaskOutcome], elapsed_sec: float) -> RunReport:
    successful = 0
    failed = 0
    status_codes: dict[int, int] = {}
    error_counts: Counter[ErrorType] = Counter()
    latencies: list[float] = []
    for outcome in outcomes:
        if outcome.ok:
            successful += 1
            status_codes[outcome.status_code] = status_codes.get(outcome.status_code, 0) + 1
            latencies.append(outcome.latency_ms)
        else:
            failed += 1
            error_counts[outcome.error_type or ErrorType.OTHER] += 1
    return RunReport(
        total_requests=successful + failed,
        successful=successful,
        failed=failed,
        status_codes=status_codes,
        elapsed_sec=elapsed_sec,
        error_counts=dict(error_counts),
        latency=summarize_latency(latencies),
    )
