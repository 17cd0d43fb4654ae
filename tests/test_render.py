# ABOUTME: Tests for the plain-text card renderer.
# ABOUTME: Checks per-state output, unit-dependent rounding and the optional credit line.

from datetime import datetime, timezone

import pytest

from weather_card.models import (
    ErrorState,
    IdleState,
    LoadingState,
    ReadyState,
    SnapshotLocation,
    Units,
    WeatherSnapshot,
)
from weather_card.render import CREDIT_TEXT, render_card, round_half_up


def _ready(country: str = "FR") -> ReadyState:
    snapshot = WeatherSnapshot(
        location=SnapshotLocation(name="Paris", country=country, local_time="10/19/2026, 3:04:05 PM"),
        temperature_c=18.0,
        temperature_f=64.4,
        wind_kph=12.0,
        wind_mph=12.0 / 1.609,
        humidity_pct=60,
        condition_text="Partly cloudy",
    )
    return ReadyState(snapshot=snapshot, fetched_at=datetime(2026, 10, 19, tzinfo=timezone.utc))


class TestRoundHalfUp:
    @pytest.mark.parametrize("value, expected", [(0.5, 1), (1.5, 2), (2.5, 3), (64.4, 64), (-0.4, 0), (7.458, 7)])
    def test_rounds_halves_up(self, value, expected):
        """round_half_up rounds .5 upward instead of to even.

        Implementation: Rounds a set of halves and ordinary values.
        Passing implies: 2.5 displays as 3, unlike Python's round().
        """
        assert round_half_up(value) == expected


class TestRenderCard:
    def test_idle_is_empty(self):
        """Idle renders nothing.

        Implementation: Renders IdleState.
        Passing implies: The card stays blank before the first load.
        """
        assert render_card(IdleState(), Units.METRIC) == ""

    def test_loading(self):
        """Loading renders the loading message.

        Implementation: Renders LoadingState.
        Passing implies: Users see progress while requests are in flight.
        """
        assert render_card(LoadingState(), Units.METRIC) == "Loading weather…"

    def test_error(self):
        """Errors render as a short message replacing the card.

        Implementation: Renders an ErrorState for an unknown city.
        Passing implies: The failure reason is shown verbatim.
        """
        state = ErrorState(message="City not found: Qzxvnotacity", step="geocode")
        assert render_card(state, Units.IMPERIAL) == "Error: City not found: Qzxvnotacity"

    def test_ready_metric(self):
        """Ready renders location, time, rounded Celsius, condition and wind in kph.

        Implementation: Renders the Paris snapshot in metric units.
        Passing implies: Metric values come straight from the snapshot.
        """
        assert render_card(_ready(), Units.METRIC).splitlines() == [
            "Paris, FR",
            "10/19/2026, 3:04:05 PM",
            "18°C",
            "Partly cloudy",
            "Wind 12 kph – Humidity 60%",
        ]

    def test_ready_imperial(self):
        """Ready in imperial units shows rounded Fahrenheit and mph.

        Implementation: Renders the same snapshot in imperial units.
        Passing implies: Toggling units only changes presentation.
        """
        lines = render_card(_ready(), Units.IMPERIAL).splitlines()
        assert lines[2] == "64°F"
        assert lines[4] == "Wind 7 mph – Humidity 60%"

    def test_credit_line(self):
        """The credit line is appended only when requested.

        Implementation: Renders with show_credit on and off.
        Passing implies: The configuration's showCredit flag controls attribution.
        """
        assert render_card(_ready(), Units.METRIC, show_credit=True).splitlines()[-1] == CREDIT_TEXT
        assert CREDIT_TEXT not in render_card(_ready(), Units.METRIC)

    def test_location_without_country(self):
        """A missing country renders the name alone.

        Implementation: Renders a snapshot with an empty country.
        Passing implies: No dangling comma appears.
        """
        assert render_card(_ready(country=""), Units.METRIC).splitlines()[0] == "Paris"
