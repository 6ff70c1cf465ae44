from __future__ import annotations

import json
from datetime import datetime, timezone

from influxdb_client import InfluxDBClient, Point, WritePrecision
from influxdb_client.client.write_api import SYNCHRONOUS

from app.models.weather import CacheEntry, WeatherSnapshot
from app.repositories.flux import flux_range, flux_str


class InfluxWeatherCacheRepository:
    """Current-weather cache kept as one point per fetch.

    A read takes the newest point for the lowercased city inside the requested
    window, so a newer `put` replaces an older one for every reader. Older points
    are never deleted; they simply fall out of the window.
    """

    def __init__(
        self,
        *,
        client: InfluxDBClient,
        org: str,
        bucket: str,
        measurement: str,
    ) -> None:
        self._client = client
        self._org = org
        self._bucket = bucket
        self._measurement = measurement

    def ping(self) -> None:
        if not self._client.ping():
            raise ConnectionError("InfluxDB ping failed")

    def put(self, city: str, data: WeatherSnapshot, *, cached_at: datetime) -> None:
        if cached_at.tzinfo is None:
            cached_at = cached_at.replace(tzinfo=timezone.utc)

        point = (
            Point(self._measurement)
            .tag("city", city.lower())
            .field("data", json.dumps(data, separators=(",", ":")))
            .time(cached_at, WritePrecision.NS)
        )
        write_api = self._client.write_api(write_options=SYNCHRONOUS)
        write_api.write(bucket=self._bucket, org=self._org, record=point)

    def get(self, city: str, *, since: datetime, until: datetime) -> CacheEntry | None:
        key = city.lower()
        query = f"""
from(bucket: {flux_str(self._bucket)})
  |> {flux_range(since, until)}
  |> filter(fn: (r) => r["_measurement"] == {flux_str(self._measurement)})
  |> filter(fn: (r) => r["city"] == {flux_str(key)})
  |> filter(fn: (r) => r["_field"] == "data")
  |> last()
"""
        query_api = self._client.query_api()
        tables = query_api.query(query=query, org=self._org)

        newest: CacheEntry | None = None
        for table in tables:
            for record in table.records:
                ts = record.get_time()
                raw = record.get_value()
                if ts is None or not isinstance(raw, str):
                    continue
                if newest is not None and newest.cached_at >= ts:
                    continue
                newest = CacheEntry(city=key, data=json.loads(raw), cached_at=ts)
        return newest
