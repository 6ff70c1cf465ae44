from __future__ import annotations

from datetime import datetime
from typing import Protocol

from app.models.weather import HistoryRecord


class SearchHistoryRepository(Protocol):
    def append(self, city: str, *, searched_at: datetime, user_id: str = "default") -> None: ...

    def list_recent(self, *, limit: int) -> list[HistoryRecord]: ...

    def clear(self) -> None: ...
