"""Synthetic weather forecast generation."""
from __future__ import annotations

import datetime as dt
import random
from typing import List, Optional

from .models import WeatherForecast

SUMMARIES = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)
FORECAST_DAYS = 5
MIN_TEMPERATURE_C = -20
TEMPERATURE_SPAN = 60


def generate_forecast(
    rng: Optional[random.Random] = None,
    today: Optional[dt.date] = None,
) -> List[WeatherForecast]:
    """Return one random forecast for each of the first ``FORECAST_DAYS`` summaries.

    Dates are drawn independently per record, so they may repeat and are not
    ordered. A fresh unseeded generator is used unless ``rng`` is supplied.
    """
    rng = rng or random.Random()
    today = today or dt.date.today()
    return [
        WeatherForecast.create(
            date=today + dt.timedelta(days=rng.randrange(FORECAST_DAYS)),
            temperature_c=MIN_TEMPERATURE_C + rng.randrange(TEMPERATURE_SPAN),
            summary=summary,
        )
        for summary in SUMMARIES[:FORECAST_DAYS]
    ]
