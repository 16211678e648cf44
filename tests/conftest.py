import pytest
from fastapi.testclient import TestClient

from weather_info.api import create_app
from weather_info.config import Settings
from weather_info.sysinfo import CONTAINER_ENV_VARS


@pytest.fixture
def settings() -> Settings:
    return Settings(cpu_sample_seconds=0.0)


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))


@pytest.fixture
def bare_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in CONTAINER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
