# ABOUTME: Service layer for Open-Meteo geocoding and current-conditions calls.
# ABOUTME: Translates httpx failures and empty results into the card's error taxonomy.

import logging
from typing import Protocol

import httpx

from weather_card.errors import NotFoundError, ServiceError
from weather_card.models import CurrentConditions, GeocodeResult

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

CURRENT_PARAMS = "temperature_2m,relative_humidity_2m,weather_code,wind_speed_10m"


class GeocodingClient(Protocol):
    async def geocode(self, city_name: str) -> GeocodeResult: ...


class WeatherClient(Protocol):
    async def fetch_current(self, latitude: float, longitude: float) -> CurrentConditions: ...


async def geocode(client: httpx.AsyncClient, city_name: str) -> GeocodeResult:
    """Geocode a city name to the first match from the Open-Meteo geocoding API.

    Ambiguous names are not disambiguated; whatever the service ranks first wins.
    """
    status, data = await _get_json(client, GEOCODING_URL, {"name": city_name, "count": 1}, service="Geocoding")

    results = data.get("results")
    if not results:
        raise NotFoundError(city_name)

    r = results[0]
    try:
        return GeocodeResult(
            latitude=r["latitude"],
            longitude=r["longitude"],
            display_name=r.get("name") or city_name,
            country=r.get("country") or "",
        )
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("Unexpected geocoding payload for %r: %s", city_name, e)
        raise ServiceError(status, service="Geocoding") from e


async def fetch_current(client: httpx.AsyncClient, latitude: float, longitude: float) -> CurrentConditions:
    """Fetch current conditions in metric units, with the timezone resolved from the coordinates."""
    params = {
        "latitude": latitude,
        "longitude": longitude,
        "current": CURRENT_PARAMS,
        "timezone": "auto",
        "temperature_unit": "celsius",
        "wind_speed_unit": "kmh",
    }
    status, data = await _get_json(client, FORECAST_URL, params, service="Weather")

    current = data.get("current") or {}
    try:
        return CurrentConditions(
            temperature_c=current["temperature_2m"],
            wind_speed_kph=current["wind_speed_10m"],
            humidity_pct=current["relative_humidity_2m"],
            condition_code=current["weather_code"],
            timezone=data.get("timezone") or "UTC",
        )
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("Unexpected forecast payload: %s", e)
        raise ServiceError(status, service="Weather") from e


async def _get_json(client: httpx.AsyncClient, url: str, params: dict, service: str) -> tuple[int, dict]:
    try:
        resp = await client.get(url, params=params)
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise ServiceError(e.response.status_code, service=service) from e
    except httpx.HTTPError as e:
        logger.warning("%s request failed: %s", service, e)
        raise ServiceError(None, service=service) from e

    try:
        data = resp.json()
    except ValueError as e:
        raise ServiceError(resp.status_code, service=service) from e
    if not isinstance(data, dict):
        raise ServiceError(resp.status_code, service=service)
    return resp.status_code, data


class OpenMeteoGeocodingClient:
    """GeocodingClient backed by a shared httpx.AsyncClient. Results are never cached."""

    def __init__(self, http_client: httpx.AsyncClient):
        self.http_client = http_client

    async def geocode(self, city_name: str) -> GeocodeResult:
        return await geocode(self.http_client, city_name)


class OpenMeteoWeatherClient:
    """WeatherClient backed by a shared httpx.AsyncClient."""

    def __init__(self, http_client: httpx.AsyncClient):
        self.http_client = http_client

    async def fetch_current(self, latitude: float, longitude: float) -> CurrentConditions:
        return await fetch_current(self.http_client, latitude, longitude)
