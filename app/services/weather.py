from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable

from app.clients.openweather import OpenWeatherClient
from app.models.weather import DailySummary, HistoryRecord, WeatherSnapshot
from app.repositories.cache import WeatherCacheRepository
from app.repositories.history import SearchHistoryRepository
from app.services.forecast import DEFAULT_MAX_DAYS, INDIA_TZ, aggregate_daily

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL = timedelta(minutes=10)


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


def dedupe_by_city(records: list[HistoryRecord]) -> list[HistoryRecord]:
    """Keep the first record per case-insensitive city, preserving order."""
    seen: set[str] = set()
    unique: list[HistoryRecord] = []
    for record in records:
        key = record.city.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(record)
    return unique


class WeatherService:
    def __init__(
        self,
        *,
        cache: WeatherCacheRepository,
        history: SearchHistoryRepository,
        client: OpenWeatherClient,
        cache_ttl: timedelta = DEFAULT_CACHE_TTL,
        forecast_tz: tzinfo = INDIA_TZ,
        forecast_days: int = DEFAULT_MAX_DAYS,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._cache = cache
        self._history = history
        self._client = client
        self._cache_ttl = cache_ttl
        self._forecast_tz = forecast_tz
        self._forecast_days = forecast_days
        self._clock = clock

    def current_weather(self, city: str) -> WeatherSnapshot:
        """Return the cached snapshot if still fresh, otherwise fetch and record it.

        Raises `CityNotFoundError` when the provider lookup fails. Cache and
        history storage errors are logged and do not fail the request.
        """
        now = self._clock()
        cached = self._read_cache(city, now)
        if cached is not None:
            logger.debug("Cache hit for %r", city)
            return cached

        logger.debug("Cache miss for %r", city)
        data = self._client.fetch_current(city)

        try:
            self._cache.put(city, data, cached_at=now)
        except Exception:
            logger.warning("Failed to cache weather for %r", city, exc_info=True)

        resolved_name = data.get("name")
        if not isinstance(resolved_name, str) or not resolved_name:
            resolved_name = city
        try:
            self._history.append(resolved_name, searched_at=now)
        except Exception:
            logger.warning("Failed to record search for %r", resolved_name, exc_info=True)
        return data

    def forecast(self, city: str) -> list[DailySummary]:
        samples = self._client.fetch_forecast(city)
        return aggregate_daily(samples, tz=self._forecast_tz, max_days=self._forecast_days)

    def recent_searches(self, *, limit: int = 10) -> list[HistoryRecord]:
        return dedupe_by_city(self._history.list_recent(limit=limit))

    def clear_history(self) -> None:
        self._history.clear()
        logger.info("Search history cleared")

    def _read_cache(self, city: str, now: datetime) -> WeatherSnapshot | None:
        try:
            entry = self._cache.get(
                city,
                since=now - self._cache_ttl,
                until=now + timedelta(seconds=1),
            )
        except Exception:
            logger.warning("Cache read failed for %r", city, exc_info=True)
            return None
        return entry.data if entry is not None else None
