"""Runtime configuration helpers."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"
    allowed_origin: str = "http://localhost:4200"
    cpu_sample_seconds: float = 0.1


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    host = os.getenv("WEATHER_INFO_HOST", "0.0.0.0")
    port = int(os.getenv("WEATHER_INFO_PORT", "8080"))
    log_level = os.getenv("WEATHER_INFO_LOG_LEVEL", "info").lower()
    allowed_origin = os.getenv("WEATHER_INFO_ALLOWED_ORIGIN", "http://localhost:4200")
    cpu_sample_seconds = float(os.getenv("WEATHER_INFO_CPU_SAMPLE_SECONDS", "0.1"))
    return Settings(
        host=host,
        port=port,
        log_level=log_level,
        allowed_origin=allowed_origin,
        cpu_sample_seconds=cpu_sample_seconds,
    )
