from __future__ import annotations

from dataclasses import dataclass

import httpx


class ConfigError(ValueError):
    """Raised when a run configuration cannot be executed."""


@dataclass(frozen=True, slots=True)
class RunConfig:
    url: str
    rate: int = 10
    total_requests: int = 100

    def validate(self) -> None:
        if self.rate <= 0:
            msg = f"rate must be a positive integer, got {self.rate}"
            raise ConfigError(msg)
        if self.total_requests < 0:
            msg = f"total requests must not be negative, got {self.total_requests}"
            raise ConfigError(msg)
        try:
            url = httpx.URL(self.url)
        except httpx.InvalidURL as exc:
            msg = f"invalid url {self.url!r}: {exc}"
            raise ConfigError(msg) from exc
        if url.scheme not in ("http", "https"):
            msg = f"unsupported url scheme {url.scheme!r} in {self.url!r}"
            raise ConfigError(msg)
        if not url.host:
            msg = f"url {self.url!r} has no host"
            raise ConfigError(msg)

    @property
    def interval_sec(self) -> float:
        return 1.0 / self.rate
