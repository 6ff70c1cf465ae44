from __future__ import annotations

from datetime import timedelta
from typing import Annotated
from zoneinfo import ZoneInfo

from fastapi import Depends, Request

from app.clients.openweather import OpenWeatherClient
from app.core.config import Settings
from app.repositories.cache import WeatherCacheRepository
from app.repositories.cache_influx import InfluxWeatherCacheRepository
from app.repositories.history import SearchHistoryRepository
from app.repositories.history_influx import InfluxSearchHistoryRepository
from app.services.weather import WeatherService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_openweather_client(request: Request) -> OpenWeatherClient:
    return request.app.state.openweather_client


def get_cache_repository(
    request: Request, settings: Annotated[Settings, Depends(get_settings)]
) -> WeatherCacheRepository:
    return InfluxWeatherCacheRepository(
        client=request.app.state.influx_client,
        org=settings.influx_org,
        bucket=settings.influx_bucket,
        measurement=settings.cache_measurement,
    )


def get_history_repository(
    request: Request, settings: Annotated[Settings, Depends(get_settings)]
) -> SearchHistoryRepository:
    return InfluxSearchHistoryRepository(
        client=request.app.state.influx_client,
        org=settings.influx_org,
        bucket=settings.influx_bucket,
        measurement=settings.history_measurement,
    )


def get_weather_service(
    settings: Annotated[Settings, Depends(get_settings)],
    cache: Annotated[WeatherCacheRepository, Depends(get_cache_repository)],
    history: Annotated[SearchHistoryRepository, Depends(get_history_repository)],
    client: Annotated[OpenWeatherClient, Depends(get_openweather_client)],
) -> WeatherService:
    return WeatherService(
        cache=cache,
        history=history,
        client=client,
        cache_ttl=timedelta(seconds=settings.cache_ttl_seconds),
        forecast_tz=ZoneInfo(settings.forecast_timezone),
        forecast_days=settings.forecast_days,
    )


WeatherServiceDep = Annotated[WeatherService, Depends(get_weather_service)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
