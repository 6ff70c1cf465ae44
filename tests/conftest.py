from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.api import deps
from app.core.config import Settings
from app.factory import create_app
from tests.fakes import (
    FakeOpenWeatherClient,
    FakeSearchHistoryRepository,
    FakeWeatherCacheRepository,
)


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        debug=True,
        docs_enabled=False,
        log_level="DEBUG",
        cors_origins=["http://localhost"],
        trusted_hosts=["testserver", "localhost"],
        openweather_api_key="test-api-key",
        openweather_base_url="http://owm.example.com/data/2.5",
        openweather_timeout_seconds=1.0,
        influx_url="http://example.com:8086",
        influx_token="test-token-1234567890",
        influx_org="test",
        influx_bucket="test",
        influx_timeout_ms=5000,
    )


@pytest.fixture()
def cache_repo() -> FakeWeatherCacheRepository:
    return FakeWeatherCacheRepository()


@pytest.fixture()
def history_repo() -> FakeSearchHistoryRepository:
    return FakeSearchHistoryRepository()


@pytest.fixture()
def provider() -> FakeOpenWeatherClient:
    return FakeOpenWeatherClient()


@pytest.fixture()
def client(
    settings: Settings,
    cache_repo: FakeWeatherCacheRepository,
    history_repo: FakeSearchHistoryRepository,
    provider: FakeOpenWeatherClient,
) -> TestClient:
    app = create_app(settings)
    app.dependency_overrides[deps.get_cache_repository] = lambda: cache_repo
    app.dependency_overrides[deps.get_history_repository] = lambda: history_repo
    app.dependency_overrides[deps.get_openweather_client] = lambda: provider
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def now() -> datetime:
    return datetime.now(tz=timezone.utc)
