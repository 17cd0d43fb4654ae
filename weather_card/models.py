# ABOUTME: Pydantic BaseModels for widget configuration, service readings, and load state.
# ABOUTME: Defines the snapshot the card renders and the tagged LoadState union.

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_CITY = "New York, US"
DEFAULT_LOCATION_FIELD = "location"


class Units(str, Enum):
    """Unit system used when displaying a snapshot."""

    IMPERIAL = "imperial"
    METRIC = "metric"

    def toggled(self) -> "Units":
        return Units.METRIC if self is Units.IMPERIAL else Units.IMPERIAL


class WidgetConfiguration(BaseModel):
    """Host-supplied widget settings.

    Accepts the host's camelCase keys (``useProfileLocation``) as well as the
    snake_case field names.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    use_profile_location: bool = True
    location_field_key: str = DEFAULT_LOCATION_FIELD
    fallback_city: str = DEFAULT_CITY
    default_units: Units = Units.IMPERIAL
    show_credit: bool = False


class GeocodeResult(BaseModel):
    """First match returned by the geocoding service."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    display_name: str
    country: str = ""


class CurrentConditions(BaseModel):
    """Current reading from the forecast service, always in metric units."""

    model_config = ConfigDict(frozen=True)

    temperature_c: float
    wind_speed_kph: float
    humidity_pct: int
    condition_code: int
    timezone: str = "UTC"


class SnapshotLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    country: str
    local_time: str


class WeatherSnapshot(BaseModel):
    """Fully derived reading with both unit systems pre-computed and unrounded."""

    model_config = ConfigDict(frozen=True)

    location: SnapshotLocation
    temperature_c: float
    temperature_f: float
    wind_kph: float
    wind_mph: float
    humidity_pct: int
    condition_text: str


class IdleState(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["idle"] = "idle"


class LoadingState(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["loading"] = "loading"


class ErrorState(BaseModel):
    """A user-visible failure, tagged with the pipeline step that produced it."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str
    step: Literal["geocode", "weather"]


class ReadyState(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["ready"] = "ready"
    snapshot: WeatherSnapshot
    fetched_at: datetime


LoadState = Annotated[IdleState | LoadingState | ErrorState | ReadyState, Field(discriminator="kind")]
