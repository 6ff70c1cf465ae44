from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DailyForecast(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str
    temperature: int
    humidity: int = Field(ge=0, le=100)
    wind_speed: str = Field(alias="windSpeed")
    description: str
    icon: str


class HistoryItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    city: str = Field(min_length=1)
    searched_at: datetime = Field(alias="searchedAt")


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    ok: bool = True
