from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class ErrorType(str, Enum):
    TIMEOUT = "timeout"
    CONNECT = "connect"
    READ = "read"
    OTHER = "other"
    CRASHED = "crashed"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class TaskOutcome:
    status_code: int | None
    error_type: ErrorType | None
    latency_ms: float = 0.0

    @classmethod
    def completed(cls, status_code: int, latency_ms: float = 0.0) -> TaskOutcome:
        return cls(status_code=status_code, error_type=None, latency_ms=latency_ms)

    @classmethod
    def failed(cls, error_type: ErrorType, latency_ms: float = 0.0) -> TaskOutcome:
        return cls(status_code=None, error_type=error_type, latency_ms=latency_ms)

    @property
    def ok(self) -> bool:
        return self.error_type is None and self.status_code is not None


@dataclass(frozen=True, slots=True)
class LatencySummary:
    min_ms: float = 0.0
    mean_ms: float = 0.0
    p50_ms: float = 0.0
    p95_ms: float = 0.0
    p99_ms: float = 0.0
    max_ms: float = 0.0


@dataclass(frozen=True, slots=True)
class RunReport:
    total_requests: int
    successful: int
    failed: int
    status_codes: Mapping[int, int]
    elapsed_sec: float
    error_counts: Mapping[ErrorType, int] = field(default_factory=dict)
    latency: LatencySummary = field(default_factory=LatencySummary)

    @property
    def requests_per_sec(self) -> float:
        if self.total_requests == 0 or self.elapsed_sec <= 0:
            return 0.0
        return self.total_requests / self.elapsed_sec
