from __future__ import annotations

from datetime import datetime, timedelta

from fastapi.testclient import TestClient

from app.models.weather import HistoryRecord
from app.services.weather import dedupe_by_city
from tests.fakes import FakeSearchHistoryRepository


def _seed(repo: FakeSearchHistoryRepository, cities: list[str], now: datetime) -> None:
    # First city is the newest.
    for i, city in enumerate(cities):
        repo.append(city, searched_at=now - timedelta(minutes=i))


def test_dedupe_keeps_first_occurrence(now: datetime) -> None:
    records = [
        HistoryRecord(city=c, searched_at=now - timedelta(minutes=i))
        for i, c in enumerate(["Pune", "Mumbai", "pune", "Delhi"])
    ]
    assert [r.city for r in dedupe_by_city(records)] == ["Pune", "Mumbai", "Delhi"]


def test_history_is_newest_first_and_deduplicated(
    client: TestClient, history_repo: FakeSearchHistoryRepository, now: datetime
) -> None:
    _seed(history_repo, ["Pune", "Mumbai", "Pune", "Delhi"], now)

    resp = client.get("/api/history")
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert [item["city"] for item in body] == ["Pune", "Mumbai", "Delhi"]
    assert set(body[0].keys()) == {"city", "searchedAt"}


def test_limit_applies_before_dedup(
    client: TestClient, history_repo: FakeSearchHistoryRepository, now: datetime
) -> None:
    # Ten recent Pune searches push Delhi out of the window entirely.
    _seed(history_repo, ["Pune"] * 10 + ["Delhi"], now)

    resp = client.get("/api/history")
    assert [item["city"] for item in resp.json()] == ["Pune"]


def test_searches_are_recorded(client: TestClient) -> None:
    client.get("/api/weather/Delhi")
    client.get("/api/weather/Pune")

    resp = client.get("/api/history")
    assert [item["city"] for item in resp.json()] == ["Pune", "Delhi"]


def test_clear_history(
    client: TestClient, history_repo: FakeSearchHistoryRepository, now: datetime
) -> None:
    _seed(history_repo, ["Pune", "Mumbai"], now)

    resp = client.delete("/api/history")
    assert resp.status_code == 200
    assert resp.json() == {"message": "History cleared"}
    assert client.get("/api/history").json() == []


def test_storage_failures_are_500(
    client: TestClient, history_repo: FakeSearchHistoryRepository
) -> None:
    history_repo.fail = True

    listed = client.get("/api/history")
    assert listed.status_code == 500
    assert listed.json() == {"message": "Error fetching history"}

    cleared = client.delete("/api/history")
    assert cleared.status_code == 500
    assert cleared.json() == {"message": "Error clearing history"}
