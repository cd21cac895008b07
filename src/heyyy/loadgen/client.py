from __future__ import annotations

import logging
import time

import httpx

from heyyy.metrics import ErrorType, TaskOutcome

logger = logging.getLogger(__name__)


async def send_request(client: httpx.AsyncClient, url: str) -> TaskOutcome:
    start_mono = time.perf_counter()
    try:
        resp = await client.get(url)
        latency_ms = (time.perf_counter() - start_mono) * 1000.0
        return TaskOutcome.completed(resp.status_code, latency_ms)
    except httpx.TimeoutException:
        err = ErrorType.TIMEOUT
    except httpx.ConnectError:
        err = ErrorType.CONNECT
    except httpx.ReadError:
        err = ErrorType.READ
    except httpx.HTTPError:
        err = ErrorType.OTHER
    latency_ms = (time.perf_counter() - start_mono) * 1000.0
    logger.debug("GET %s failed with %s after %.1f ms", url, err.value, latency_ms)
    return TaskOutcome.failed(err, latency_ms)
