from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

# Opaque current-weather payload, stored and returned exactly as the provider sent it.
WeatherSnapshot = dict[str, Any]


@dataclass(frozen=True)
class CacheEntry:
    city: str
    data: WeatherSnapshot
    cached_at: datetime


@dataclass(frozen=True)
class HistoryRecord:
    city: str
    searched_at: datetime
    user_id: str = "default"


@dataclass(frozen=True)
class ForecastSample:
    timestamp: int
    temperature: float
    humidity: float
    wind_speed: float
    description: str
    icon: str


@dataclass(frozen=True)
class DailySummary:
    date: str
    temperature: int
    humidity: int
    wind_speed: str
    description: str
    icon: str
