from __future__ import annotations

from datetime import datetime, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_rfc3339(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def flux_str(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def flux_range(start: datetime, stop: datetime) -> str:
    return (
        f"range(start: time(v: {flux_str(to_rfc3339(start))}), "
        f"stop: time(v: {flux_str(to_rfc3339(stop))}))"
    )
