"""FastAPI application serving weather forecasts and host information."""
from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .forecast import generate_forecast
from .models import SystemInfo, WeatherForecast
from .sysinfo import collect_system_info


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Weather Info API",
        description="Demo service returning random weather forecasts and basic host details.",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.allowed_origin],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get(
        "/api/weatherforecast",
        response_model=List[WeatherForecast],
        summary="Return five random weather forecasts",
        tags=["weather"],
    )
    async def weather_forecast():
        return generate_forecast()

    # Blocking; served from the threadpool.
    @app.get(
        "/api/info",
        response_model=SystemInfo,
        summary="Return best-effort host information",
        tags=["system"],
    )
    def system_info():
        return collect_system_info(settings.cpu_sample_seconds)

    return app


app = create_app()
