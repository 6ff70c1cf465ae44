from __future__ import annotations

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CORS_ORIGINS = [
    "https://weather-app-frontend-smoky.vercel.app",
    "http://localhost:3000",
    "http://localhost:5173",
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="APP_",
        case_sensitive=False,
    )

    env: str = Field(default="development")
    debug: bool = Field(default=False)
    docs_enabled: bool = Field(default=True)
    log_level: str = Field(default="INFO")

    cors_origins: list[str] = Field(default_factory=list)
    trusted_hosts: list[str] = Field(default_factory=list)

    openweather_api_key: str = Field(min_length=1)
    openweather_base_url: AnyHttpUrl = Field(default="https://api.openweathermap.org/data/2.5")
    openweather_timeout_seconds: float = Field(default=10.0, ge=1.0, le=60.0)
    country_code: str = Field(default="IN", min_length=2, max_length=2)
    units: str = Field(default="metric")

    influx_url: AnyHttpUrl = Field(default="http://influxdb:8086")
    influx_token: str = Field(min_length=10)
    influx_org: str = Field(min_length=1)
    influx_bucket: str = Field(min_length=1)
    influx_timeout_ms: int = Field(default=10_000, ge=1000, le=120_000)
    cache_measurement: str = Field(default="weather_cache", min_length=1, max_length=64)
    history_measurement: str = Field(default="search_history", min_length=1, max_length=64)

    cache_ttl_seconds: int = Field(default=600, ge=1, le=24 * 3600)
    history_limit: int = Field(default=10, ge=1, le=100)
    forecast_days: int = Field(default=7, ge=1, le=16)
    forecast_timezone: str = Field(default="Asia/Kolkata", min_length=1)
    city_search_limit: int = Field(default=5, ge=1, le=50)

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"


def load_settings() -> Settings:
    settings = Settings()
    if not settings.cors_origins:
        settings.cors_origins = list(DEFAULT_CORS_ORIGINS)
    return settings
