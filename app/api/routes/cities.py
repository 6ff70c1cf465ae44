from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query

from app.api.deps import SettingsDep
from app.services.cities import search_cities

router = APIRouter(prefix="/cities")


@router.get("/search", response_model=list[str])
def search(
    settings: SettingsDep,
    q: Annotated[str, Query()] = "",
) -> list[str]:
    return search_cities(q, limit=settings.city_search_limit)
