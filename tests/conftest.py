# ABOUTME: Shared test fixtures for the weather card test suite.
# ABOUTME: Provides in-memory geocoding, weather and profile fakes plus mock HTTP helpers.

from datetime import datetime, timezone

import httpx

from weather_card.errors import ProfileLookupError
from weather_card.models import CurrentConditions, GeocodeResult

FIXED_NOW = datetime(2026, 10, 19, 13, 4, 5, tzinfo=timezone.utc)

PARIS = GeocodeResult(latitude=48.85, longitude=2.35, display_name="Paris", country="FR")
BERLIN = GeocodeResult(latitude=52.52, longitude=13.41, display_name="Berlin", country="DE")

MILD = CurrentConditions(
    temperature_c=18.0, wind_speed_kph=12.0, humidity_pct=60, condition_code=2, timezone="Europe/Paris"
)


def json_response(json_data, status_code: int = 200) -> httpx.Response:
    """Build an httpx.Response carrying JSON, bound to a dummy request so raise_for_status works."""
    return httpx.Response(status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test"))


class FakeGeocoder:
    """GeocodingClient fake that answers calls in order, optionally waiting on a gate per call.

    Each scripted outcome is either a GeocodeResult or an exception to raise.
    """

    def __init__(self, outcomes, gates=None):
        self.outcomes = list(outcomes)
        self.gates = list(gates or [])
        self.calls: list[str] = []

    async def geocode(self, city_name: str) -> GeocodeResult:
        index = len(self.calls)
        self.calls.append(city_name)
        gate = self.gates[index] if index < len(self.gates) else None
        if gate is not None:
            await gate.wait()
        outcome = self.outcomes[min(index, len(self.outcomes) - 1)]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeWeather:
    """WeatherClient fake returning a fixed reading or raising a fixed error."""

    def __init__(self, outcome=MILD):
        self.outcome = outcome
        self.calls: list[tuple[float, float]] = []

    async def fetch_current(self, latitude: float, longitude: float) -> CurrentConditions:
        self.calls.append((latitude, longitude))
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


class FailingProfile:
    """Profile provider that always fails."""

    def __init__(self):
        self.calls: list[str] = []

    async def get_field(self, key: str) -> str | None:
        self.calls.append(key)
        raise ProfileLookupError("profile service unavailable")

