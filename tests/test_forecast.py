from __future__ import annotations

from datetime import datetime, timedelta, timezone

from app.models.weather import ForecastSample
from app.services.forecast import INDIA_TZ, aggregate_daily, india_date_key, round_half_away


def _sample(
    when: datetime,
    temp: float = 25.0,
    humidity: float = 50.0,
    wind: float = 2.0,
    description: str = "clear sky",
    icon: str = "01d",
) -> ForecastSample:
    return ForecastSample(
        timestamp=int(when.timestamp()),
        temperature=temp,
        humidity=humidity,
        wind_speed=wind,
        description=description,
        icon=icon,
    )


def test_empty_input_yields_no_days() -> None:
    assert aggregate_daily([]) == []


def test_averages_within_one_day() -> None:
    day = datetime(2026, 10, 19, 6, 0, tzinfo=INDIA_TZ)
    samples = [
        _sample(day, temp=10, humidity=40, wind=1.0),
        _sample(day + timedelta(hours=3), temp=20, humidity=50, wind=2.0),
        _sample(day + timedelta(hours=6), temp=21, humidity=51, wind=2.2),
    ]

    [summary] = aggregate_daily(samples)

    assert summary.date == "19/10/2026"
    assert summary.temperature == 17
    assert summary.humidity == 47
    assert summary.wind_speed == "1.7"


def test_first_sample_sets_description_and_icon() -> None:
    day = datetime(2026, 3, 2, 3, 0, tzinfo=INDIA_TZ)
    samples = [
        _sample(day, description="light rain", icon="10n"),
        _sample(day + timedelta(hours=3), description="clear sky", icon="01d"),
        _sample(day + timedelta(days=1), description="haze", icon="50d"),
    ]

    days = aggregate_daily(samples)

    assert [(d.description, d.icon) for d in days] == [
        ("light rain", "10n"),
        ("haze", "50d"),
    ]


def test_caps_at_seven_days_in_first_seen_order() -> None:
    start = datetime(2026, 1, 1, 12, 0, tzinfo=INDIA_TZ)
    # Out-of-order input: insertion order wins over chronological order.
    offsets = [3, 1, 2, 0, 9, 8, 7, 6, 5, 4]
    samples = [_sample(start + timedelta(days=o)) for o in offsets]

    days = aggregate_daily(samples)

    assert len(days) == 7
    assert [d.date for d in days] == [
        "4/1/2026",
        "2/1/2026",
        "3/1/2026",
        "1/1/2026",
        "10/1/2026",
        "9/1/2026",
        "8/1/2026",
    ]


def test_max_days_is_configurable() -> None:
    start = datetime(2026, 1, 1, 12, 0, tzinfo=INDIA_TZ)
    samples = [_sample(start + timedelta(days=i)) for i in range(5)]
    assert len(aggregate_daily(samples, max_days=3)) == 3


def test_repeated_runs_are_identical() -> None:
    start = datetime(2026, 6, 1, 0, 30, tzinfo=INDIA_TZ)
    samples = [
        _sample(start + timedelta(hours=3 * i), temp=20 + i * 0.7, wind=1.0 + i * 0.13)
        for i in range(40)
    ]
    assert aggregate_daily(samples) == aggregate_daily(list(samples))


def test_buckets_follow_india_calendar_day() -> None:
    # 19:00 UTC is 00:30 the next day in India.
    late_utc = datetime(2026, 10, 19, 19, 0, tzinfo=timezone.utc)
    early_utc = datetime(2026, 10, 19, 17, 0, tzinfo=timezone.utc)

    samples = [_sample(early_utc), _sample(late_utc)]

    assert [d.date for d in aggregate_daily(samples)] == ["19/10/2026", "20/10/2026"]
    assert [d.date for d in aggregate_daily(samples, tz=timezone.utc)] == ["19/10/2026"]


def test_india_date_key_has_no_zero_padding() -> None:
    ts = int(datetime(2026, 2, 5, 9, 0, tzinfo=INDIA_TZ).timestamp())
    assert india_date_key(ts) == "5/2/2026"


def test_rounding_is_half_away_from_zero() -> None:
    assert round_half_away(2.5) == 3
    assert round_half_away(-2.5) == -3
    assert round_half_away(0.25, 1) == round_half_away(0.3, 1)
    assert str(round_half_away(2.0, 1)) == "2.0"
    assert str(round_half_away(1.05, 1)) == "1.1"


def test_rounding_uses_shortest_decimal_form() -> None:
    # 0.35 is stored as 0.34999...; the decimal form is what gets rounded.
    assert str(round_half_away(0.35, 1)) == "0.4"
    assert str(round_half_away(2.675, 2)) == "2.68"
