from __future__ import annotations

import logging
from typing import Any

import httpx

from app.core.errors import CityNotFoundError
from app.models.weather import ForecastSample, WeatherSnapshot

logger = logging.getLogger(__name__)

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"


class OpenWeatherClient:
    """OpenWeatherMap client for the current-weather and 5 day / 3 hour endpoints.

    Every failure (transport error, non-2xx status, malformed body) surfaces as
    `CityNotFoundError`; the original exception is chained and logged.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: float,
        base_url: str = OPENWEATHER_BASE_URL,
        country_code: str = "IN",
        units: str = "metric",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._country_code = country_code
        self._units = units
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def fetch_current(self, city: str) -> WeatherSnapshot:
        payload = self._get("/weather", city)
        if not isinstance(payload, dict):
            logger.warning("Unexpected current weather body for %r", city)
            raise CityNotFoundError(city)
        return payload

    def fetch_forecast(self, city: str) -> list[ForecastSample]:
        payload = self._get("/forecast", city)
        try:
            return [_parse_sample(item) for item in payload["list"]]
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning("Unexpected forecast body for %r: %s", city, e)
            raise CityNotFoundError(city) from e

    def _get(self, path: str, city: str) -> Any:
        params = {
            "q": f"{city},{self._country_code}",
            "units": self._units,
            "appid": self._api_key,
        }
        try:
            resp = self._client.get(path, params=params)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            logger.info(
                "OpenWeatherMap %s returned %s for %r", path, e.response.status_code, city
            )
            raise CityNotFoundError(city) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("OpenWeatherMap %s failed for %r: %s", path, city, e)
            raise CityNotFoundError(city) from e


def _parse_sample(item: dict[str, Any]) -> ForecastSample:
    # Example item: {"dt": 1700000000, "main": {"temp": 21.3, "humidity": 60},
    #                "wind": {"speed": 3.1}, "weather": [{"description": "...", "icon": "01d"}]}
    main = item["main"]
    condition = item["weather"][0]
    return ForecastSample(
        timestamp=int(item["dt"]),
        temperature=float(main["temp"]),
        humidity=float(main["humidity"]),
        wind_speed=float(item["wind"]["speed"]),
        description=str(condition["description"]),
        icon=str(condition["icon"]),
    )
