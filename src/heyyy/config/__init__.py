from __future__ import annotations

from heyyy.config.models import ConfigError, RunConfig

__all__ = ["ConfigError", "RunConfig"]
