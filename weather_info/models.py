"""Response models served by the weather info API."""
from __future__ import annotations

import datetime as dt
import math

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _ApiModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class WeatherForecast(_ApiModel):
    date: dt.date
    temperature_c: int
    summary: str
    temperature_f: int

    @classmethod
    def create(cls, date: dt.date, temperature_c: int, summary: str) -> "WeatherForecast":
        """Build a forecast, deriving the Fahrenheit value from ``temperature_c``."""
        return cls(
            date=date,
            temperature_c=temperature_c,
            summary=summary,
            temperature_f=32 + math.floor(temperature_c / 0.5556),
        )


class SystemInfo(_ApiModel):
    current_date_time: dt.date
    is_containerized: bool
    hostname: str
    system_info: str
