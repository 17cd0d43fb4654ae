# ABOUTME: Load controller that runs the city -> geocode -> weather pipeline as a state machine.
# ABOUTME: Applies last-call-wins ordering with generation numbers and owns the display unit toggle.

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from weather_card import conditions, units
from weather_card.city import ProfileProvider, resolve_city
from weather_card.errors import NotFoundError, ServiceError
from weather_card.models import (
    CurrentConditions,
    ErrorState,
    GeocodeResult,
    IdleState,
    LoadingState,
    LoadState,
    ReadyState,
    SnapshotLocation,
    Units,
    WeatherSnapshot,
    WidgetConfiguration,
)
from weather_card.weather_service import GeocodingClient, WeatherClient

logger = logging.getLogger(__name__)

StateListener = Callable[[LoadState], None]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_local_time(now: datetime, tz_name: str) -> str:
    """Format ``now`` in the given IANA timezone as ``10/19/2026, 3:04:05 PM``.

    Unknown timezone names fall back to UTC.
    """
    try:
        tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.debug("Unknown timezone %r, formatting local time in UTC", tz_name)
        tz = timezone.utc
    local = now.astimezone(tz)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{local.month}/{local.day}/{local.year}, {hour}:{local.minute:02d}:{local.second:02d} {meridiem}"


def build_snapshot(geo: GeocodeResult, current: CurrentConditions, now: datetime) -> WeatherSnapshot:
    """Derive the display snapshot, pre-computing both unit systems without rounding."""
    return WeatherSnapshot(
        location=SnapshotLocation(
            name=geo.display_name,
            country=geo.country,
            local_time=format_local_time(now, current.timezone),
        ),
        temperature_c=current.temperature_c,
        temperature_f=units.celsius_to_fahrenheit(current.temperature_c),
        wind_kph=current.wind_speed_kph,
        wind_mph=units.kph_to_mph(current.wind_speed_kph),
        humidity_pct=current.humidity_pct,
        condition_text=conditions.describe(current.condition_code),
    )


class WeatherLoadController:
    """Drives the weather card through Idle -> Loading -> Error | Ready.

    Every ``load()`` call takes a new generation number. A result is committed
    only while its generation is still the newest one issued and the controller
    has not been destroyed; anything else is dropped without notifying.
    ``display_units`` is separate state that loads never touch.
    """

    def __init__(
        self,
        config: WidgetConfiguration | Mapping,
        geocoder: GeocodingClient,
        weather: WeatherClient,
        profile_provider: ProfileProvider | None = None,
        on_change: StateListener | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        # Copy so later edits to the host's object cannot tear a load in progress.
        if isinstance(config, WidgetConfiguration):
            self._config = config.model_copy()
        else:
            self._config = WidgetConfiguration.model_validate(dict(config))
        self._geocoder = geocoder
        self._weather = weather
        self._profile_provider = profile_provider
        self._on_change = on_change
        self._clock = clock or _utc_now

        self._state: LoadState = IdleState()
        self._display_units = self._config.default_units
        self._generation = 0
        self._destroyed = False

    @property
    def config(self) -> WidgetConfiguration:
        return self._config

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def display_units(self) -> Units:
        return self._display_units

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    async def load(self) -> LoadState:
        """Run the load pipeline once and return the controller state afterwards.

        Safe to call while a previous load is still in flight; the most recent
        call wins.
        """
        if self._destroyed:
            return self._state

        self._generation += 1
        generation = self._generation
        config = self._config
        self._commit(generation, LoadingState())

        city = await resolve_city(config, self._profile_provider)
        logger.debug("Load %d resolved city %r", generation, city)

        try:
            geo = await self._geocoder.geocode(city)
        except (NotFoundError, ServiceError) as e:
            logger.warning("Geocoding %r failed: %s", city, e)
            self._commit(generation, ErrorState(message=str(e), step="geocode"))
            return self._state

        try:
            current = await self._weather.fetch_current(geo.latitude, geo.longitude)
        except ServiceError as e:
            logger.warning("Weather lookup for %r failed: %s", city, e)
            self._commit(generation, ErrorState(message=str(e), step="weather"))
            return self._state

        now = self._clock()
        snapshot = build_snapshot(geo, current, now)
        if self._commit(generation, ReadyState(snapshot=snapshot, fetched_at=now)):
            logger.info("Loaded weather for %s (%s)", snapshot.location.name, snapshot.condition_text)
        return self._state

    def toggle_units(self) -> Units:
        """Flip between imperial and metric display. Does not touch the load state."""
        self._display_units = self._display_units.toggled()
        return self._display_units

    def destroy(self) -> None:
        """Make the controller inert; pending loads resolve without effect."""
        self._destroyed = True

    def _commit(self, generation: int, state: LoadState) -> bool:
        if self._destroyed or generation != self._generation:
            logger.debug(
                "Discarding %s from load %d (latest %d, destroyed=%s)",
                state.kind,
                generation,
                self._generation,
                self._destroyed,
            )
            return False
        self._state = state
        if self._on_change is not None:
            self._on_change(state)
        return True
