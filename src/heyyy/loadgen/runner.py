from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass

import httpx

from heyyy.config import RunConfig
from heyyy.loadgen.client import send_request
from heyyy.metrics import RunReport, TaskOutcome, aggregate, collect_outcomes

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Dispatch:
    tasks: list[asyncio.Task[TaskOutcome]]
    started_mono: float


async def run_load_test(
    config: RunConfig,
    client: httpx.AsyncClient | None = None,
) -> RunReport:
    config.validate()
    logger.info(
        "starting run: url=%s rate=%d total=%d",
        config.url,
        config.rate,
        config.total_requests,
    )
    if client is not None:
        return await _execute_run(config, client)
    async with httpx.AsyncClient() as owned:
        return await _execute_run(config, owned)


async def _execute_run(config: RunConfig, client: httpx.AsyncClient) -> RunReport:
    dispatch = await dispatch_requests(config, client)
    outcomes = await collect_outcomes(dispatch.tasks)
    elapsed = time.perf_counter() - dispatch.started_mono
    report = aggregate(outcomes, elapsed)
    logger.info(
        "run finished in %.2fs: %d ok, %d failed",
        report.elapsed_sec,
        report.successful,
        report.failed,
    )
    return report


async def dispatch_requests(config: RunConfig, client: httpx.AsyncClient) -> Dispatch:
    """Launch one paced task per request slot; permits are taken inside each task."""
    permits = asyncio.Semaphore(config.rate)
    interval = config.interval_sec
    tasks: list[asyncio.Task[TaskOutcome]] = []
    started_mono = time.perf_counter()
    for i in range(config.total_requests):
        tasks.append(asyncio.create_task(_permitted_request(client, config.url, permits)))
        if i < config.total_requests - 1:
            await asyncio.sleep(interval)
    return Dispatch(tasks=tasks, started_mono=started_mono)


async def _permitted_request(
    client: httpx.AsyncClient,
    url: str,
    permits: asyncio.Semaphore,
) -> TaskOutcome:
    async with permits:
        return await send_request(client, url)
