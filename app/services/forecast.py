from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable
from zoneinfo import ZoneInfo

from app.models.weather import DailySummary, ForecastSample

INDIA_TZ = ZoneInfo("Asia/Kolkata")
DEFAULT_MAX_DAYS = 7


@dataclass
class _DayBucket:
    description: str
    icon: str
    temps: list[float] = field(default_factory=list)
    humidity: list[float] = field(default_factory=list)
    wind: list[float] = field(default_factory=list)


def india_date_key(timestamp: int, tz: tzinfo = INDIA_TZ) -> str:
    """Render a unix timestamp as an en-IN numeric date, e.g. ``5/1/2026``."""
    d = datetime.fromtimestamp(timestamp, tz=tz)
    return f"{d.day}/{d.month}/{d.year}"


def round_half_away(value: float, places: int = 0) -> Decimal:
    exp = Decimal(1).scaleb(-places)
    return Decimal(repr(value)).quantize(exp, rounding=ROUND_HALF_UP)


def _mean(values: list[float]) -> float:
    return sum(values) / len(values)


def aggregate_daily(
    samples: Iterable[ForecastSample],
    *,
    tz: tzinfo = INDIA_TZ,
    max_days: int = DEFAULT_MAX_DAYS,
) -> list[DailySummary]:
    """Collapse 3-hourly forecast samples into per-day summaries.

    Days are emitted in the order they are first seen, capped at ``max_days``.
    The first sample of each day supplies its description and icon; the numeric
    fields are averaged over every sample of the day.
    """
    buckets: dict[str, _DayBucket] = {}
    for sample in samples:
        key = india_date_key(sample.timestamp, tz)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = _DayBucket(description=sample.description, icon=sample.icon)
            buckets[key] = bucket
        bucket.temps.append(sample.temperature)
        bucket.humidity.append(sample.humidity)
        bucket.wind.append(sample.wind_speed)

    summaries: list[DailySummary] = []
    for date, bucket in list(buckets.items())[:max_days]:
        summaries.append(
            DailySummary(
                date=date,
                temperature=int(round_half_away(_mean(bucket.temps))),
                humidity=int(round_half_away(_mean(bucket.humidity))),
                wind_speed=str(round_half_away(_mean(bucket.wind), 1)),
                description=bucket.description,
                icon=bucket.icon,
            )
        )
    return summaries
