from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.models.weather import CacheEntry, WeatherSnapshot


class WeatherCacheRepository(Protocol):
    def ping(self) -> None: ...

    def get(self, city: str, *, since: datetime, until: datetime) -> CacheEntry | None: ...

    def put(self, city: str, data: WeatherSnapshot, *, cached_at: datetime) -> None: ...
