"""Command-line client that reads host info and forecasts from a running API."""
from __future__ import annotations

import logging
import os
import sys
from typing import List

import requests

from .models import SystemInfo, WeatherForecast

DEFAULT_API_URL = "http://127.0.0.1:8080"
DEFAULT_TIMEOUT_SECONDS = 10


def configure_logging() -> None:
    """Configure basic logging for the client."""
    logging_level = os.getenv("WEATHER_INFO_CLIENT_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, logging_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _get_json(url: str, timeout: float):
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.json()


def fetch_system_info(base_url: str, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> SystemInfo:
    url = f"{base_url.rstrip('/')}/api/info"
    logging.debug("Calling info endpoint at %s", url)
    return SystemInfo.model_validate(_get_json(url, timeout))


def fetch_weather_forecast(base_url: str, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> List[WeatherForecast]:
    url = f"{base_url.rstrip('/')}/api/weatherforecast"
    logging.debug("Calling weather endpoint at %s", url)
    return [WeatherForecast.model_validate(item) for item in _get_json(url, timeout)]


def run_client(base_url: str) -> int:
    try:
        info = fetch_system_info(base_url)
        logging.info(
            "Host %s (containerized=%s) on %s: %s",
            info.hostname,
            info.is_containerized,
            info.current_date_time.isoformat(),
            info.system_info,
        )
        forecasts = fetch_weather_forecast(base_url)
    except (requests.RequestException, ValueError, TypeError) as exc:
        logging.error("Failed to query %s: %s", base_url, exc)
        return 1

    logging.info("Received %d forecasts from %s", len(forecasts), base_url)
    for forecast in forecasts:
        logging.info(
            "%s %-10s %4d C %4d F",
            forecast.date.isoformat(),
            forecast.summary,
            forecast.temperature_c,
            forecast.temperature_f,
        )
    return 0


def main() -> None:
    configure_logging()
    sys.exit(run_client(os.getenv("WEATHER_INFO_API_URL", DEFAULT_API_URL)))


if __name__ == "__main__":
    main()
