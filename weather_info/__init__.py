"""Demo API serving random weather forecasts and best-effort host details."""
from importlib.metadata import PackageNotFoundError, version

from .api import create_app
from .forecast import generate_forecast
from .models import SystemInfo, WeatherForecast
from .sysinfo import collect_system_info

__all__ = [
    "SystemInfo",
    "WeatherForecast",
    "collect_system_info",
    "create_app",
    "generate_forecast",
    "__version__",
]

try:
    __version__ = version("weather-info-api")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.1.0"
