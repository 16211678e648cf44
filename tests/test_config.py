import pytest
from fastapi.testclient import TestClient

from weather_info.api import create_app
from weather_info.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "WEATHER_INFO_HOST",
        "WEATHER_INFO_PORT",
        "WEATHER_INFO_LOG_LEVEL",
        "WEATHER_INFO_ALLOWED_ORIGIN",
        "WEATHER_INFO_CPU_SAMPLE_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)

    assert get_settings() == Settings()


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEATHER_INFO_HOST", "127.0.0.1")
    monkeypatch.setenv("WEATHER_INFO_PORT", "9000")
    monkeypatch.setenv("WEATHER_INFO_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("WEATHER_INFO_ALLOWED_ORIGIN", "https://app.example.com")
    monkeypatch.setenv("WEATHER_INFO_CPU_SAMPLE_SECONDS", "0.5")

    settings = get_settings()

    assert settings.host == "127.0.0.1"
    assert settings.port == 9000
    assert settings.log_level == "debug"
    assert settings.allowed_origin == "https://app.example.com"
    assert settings.cpu_sample_seconds == 0.5


def test_app_uses_configured_origin() -> None:
    client = TestClient(create_app(Settings(allowed_origin="https://app.example.com", cpu_sample_seconds=0.0)))

    allowed = client.get("/api/weatherforecast", headers={"Origin": "https://app.example.com"})
    default = client.get("/api/weatherforecast", headers={"Origin": "http://localhost:4200"})

    assert allowed.headers.get("access-control-allow-origin") == "https://app.example.com"
    assert "access-control-allow-origin" not in default.headers
