from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from app.api.deps import SettingsDep, WeatherServiceDep
from app.core.errors import StorageError
from app.schemas.weather import HistoryItem, MessageResponse

router = APIRouter(prefix="/history")

STORAGE_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {500: {"model": MessageResponse}}


@router.get("", response_model=list[HistoryItem], responses=STORAGE_ERROR_RESPONSES)
def list_history(service: WeatherServiceDep, settings: SettingsDep) -> list[HistoryItem]:
    try:
        records = service.recent_searches(limit=settings.history_limit)
    except Exception as e:  # noqa: BLE001 - normalize storage failures
        raise StorageError("Error fetching history") from e
    return [HistoryItem(city=r.city, searched_at=r.searched_at) for r in records]


@router.delete("", response_model=MessageResponse, responses=STORAGE_ERROR_RESPONSES)
def clear_history(service: WeatherServiceDep) -> MessageResponse:
    try:
        service.clear_history()
    except Exception as e:  # noqa: BLE001 - normalize storage failures
        raise StorageError("Error clearing history") from e
    return MessageResponse(message="History cleared")
