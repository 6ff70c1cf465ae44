from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from app.api.deps import WeatherServiceDep
from app.core.errors import NotFoundError
from app.schemas.weather import DailyForecast, MessageResponse

router = APIRouter()

NOT_FOUND_RESPONSES: dict[int | str, dict[str, Any]] = {404: {"model": MessageResponse}}


@router.get("/weather/{city}", responses=NOT_FOUND_RESPONSES)
def current_weather(city: str, service: WeatherServiceDep) -> dict[str, Any]:
    try:
        return service.current_weather(city)
    except Exception as e:  # noqa: BLE001 - every failure is reported as an unknown city
        raise NotFoundError("City not found") from e


@router.get(
    "/forecast/{city}",
    response_model=list[DailyForecast],
    responses=NOT_FOUND_RESPONSES,
)
def forecast(city: str, service: WeatherServiceDep) -> list[DailyForecast]:
    try:
        days = service.forecast(city)
    except Exception as e:  # noqa: BLE001
        raise NotFoundError("Forecast data not available") from e
    return [DailyForecast.model_validate(d.__dict__) for d in days]
