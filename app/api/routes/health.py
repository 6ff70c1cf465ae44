from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import get_cache_repository
from app.core.errors import ServiceUnavailableError
from app.repositories.cache import WeatherCacheRepository
from app.schemas.weather import HealthResponse

router = APIRouter(prefix="/health")


@router.get("", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(ok=True)


@router.get("/ready", response_model=HealthResponse)
def ready(
    repo: Annotated[WeatherCacheRepository, Depends(get_cache_repository)],
) -> HealthResponse:
    try:
        repo.ping()
    except Exception as e:  # noqa: BLE001 - expose as 503 without leaking internals
        raise ServiceUnavailableError("Storage unavailable") from e
    return HealthResponse(ok=True)
