from __future__ import annotations

import asyncio
import time

import httpx
import pytest

from heyyy.config import ConfigError, RunConfig
from heyyy.loadgen.runner import run_load_test
from heyyy.metrics import ErrorType, RunReport


def _run(config: RunConfig, handler) -> RunReport:
    async def scenario() -> RunReport:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await run_load_test(config, client)

    return asyncio.run(scenario())


def test_all_ok() -> None:
    report = _run(
        RunConfig(url="http://example.test/ok", rate=5, total_requests=10),
        lambda request: httpx.Response(200),
    )
    assert report.successful == 10
    assert report.failed == 0
    assert report.status_codes == {200: 10}
    # nine pacing gaps of 0.2s
    assert report.elapsed_sec >= 1.7


def test_unreachable_host() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    report = _run(RunConfig(url="http://unreachable.test/", rate=3, total_requests=5), handler)
    assert report.successful == 0
    assert report.failed == 5
    assert report.status_codes == {}
    assert report.error_counts == {ErrorType.CONNECT: 5}


def test_zero_requests() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200)

    report = _run(RunConfig(url="http://example.test/", rate=10, total_requests=0), handler)
    assert calls == []
    assert report.successful == 0
    assert report.failed == 0
    assert report.status_codes == {}
    assert report.requests_per_sec == 0.0


def test_zero_rate_rejected_before_any_request() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200)

    with pytest.raises(ConfigError):
        _run(RunConfig(url="http://example.test/", rate=0, total_requests=5), handler)
    assert calls == []


def test_mixed_responses() -> None:
    plan = iter([200] * 6 + [500] * 3 + [None])

    def handler(request: httpx.Request) -> httpx.Response:
        status = next(plan)
        if status is None:
            raise httpx.ReadTimeout("timed out", request=request)
        return httpx.Response(status)

    report = _run(RunConfig(url="http://example.test/", rate=50, total_requests=10), handler)
    assert report.successful == 9
    assert report.failed == 1
    assert report.status_codes == {200: 6, 500: 3}
    assert report.error_counts == {ErrorType.TIMEOUT: 1}


def test_crashing_request_counts_as_failure() -> None:
    plan = iter([True, False, True])

    def handler(request: httpx.Request) -> httpx.Response:
        if not next(plan):
            raise RuntimeError("worker died")
        return httpx.Response(204)

    report = _run(RunConfig(url="http://example.test/", rate=50, total_requests=3), handler)
    assert report.successful == 2
    assert report.failed == 1
    assert report.error_counts == {ErrorType.CRASHED: 1}


def test_launches_are_paced() -> None:
    started: list[float] = []

    def handler(request: httpx.Request) -> httpx.Response:
        started.append(time.perf_counter())
        return httpx.Response(200)

    rate = 20
    _run(RunConfig(url="http://example.test/", rate=rate, total_requests=6), handler)
    gaps = [b - a for a, b in zip(started, started[1:])]
    assert len(gaps) == 5
    assert all(gap >= (1.0 / rate) - 0.01 for gap in gaps)


def test_in_flight_requests_capped_at_rate() -> None:
    in_flight = 0
    peak = 0

    async def handler(request: httpx.Request) -> httpx.Response:
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(1.5)
        in_flight -= 1
        return httpx.Response(200)

    rate = 10
    report = _run(RunConfig(url="http://example.test/", rate=rate, total_requests=20), handler)
    assert report.successful == 20
    assert peak == rate
