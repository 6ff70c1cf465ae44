from __future__ import annotations

from datetime import datetime, timedelta, timezone

from influxdb_client import InfluxDBClient, Point, WritePrecision
from influxdb_client.client.write_api import SYNCHRONOUS

from app.models.weather import HistoryRecord
from app.repositories.flux import EPOCH, flux_range, flux_str


class InfluxSearchHistoryRepository:
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

    def append(self, city: str, *, searched_at: datetime, user_id: str = "default") -> None:
        if searched_at.tzinfo is None:
            searched_at = searched_at.replace(tzinfo=timezone.utc)

        point = (
            Point(self._measurement)
            .tag("user_id", user_id)
            .field("city", city)
            .time(searched_at, WritePrecision.NS)
        )
        write_api = self._client.write_api(write_options=SYNCHRONOUS)
        write_api.write(bucket=self._bucket, org=self._org, record=point)

    def list_recent(self, *, limit: int) -> list[HistoryRecord]:
        stop = datetime.now(tz=timezone.utc) + timedelta(days=1)
        query = f"""
from(bucket: {flux_str(self._bucket)})
  |> {flux_range(EPOCH, stop)}
  |> filter(fn: (r) => r["_measurement"] == {flux_str(self._measurement)})
  |> filter(fn: (r) => r["_field"] == "city")
  |> group()
  |> sort(columns: ["_time"], desc: true)
  |> limit(n: {int(limit)})
"""
        query_api = self._client.query_api()
        tables = query_api.query(query=query, org=self._org)

        results: list[HistoryRecord] = []
        for table in tables:
            for record in table.records:
                ts = record.get_time()
                city = record.get_value()
                if ts is None or not isinstance(city, str):
                    continue
                user_id = record.values.get("user_id")
                results.append(
                    HistoryRecord(
                        city=city,
                        searched_at=ts,
                        user_id=user_id if isinstance(user_id, str) else "default",
                    )
                )
        results.sort(key=lambda r: r.searched_at, reverse=True)
        return results[:limit]

    def clear(self) -> None:
        stop = datetime.now(tz=timezone.utc) + timedelta(days=1)
        delete_api = self._client.delete_api()
        delete_api.delete(
            start=EPOCH,
            stop=stop,
            predicate=f"_measurement={flux_str(self._measurement)}",
            bucket=self._bucket,
            org=self._org,
        )
