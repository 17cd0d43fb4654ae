# ABOUTME: Plain-text rendering of the weather card for a given load state and unit system.
# ABOUTME: The only place where snapshot values get rounded for display.

import math

from weather_card.models import ErrorState, LoadingState, LoadState, ReadyState, Units

LOADING_TEXT = "Loading weather…"
ERROR_PREFIX = "Error: "
CREDIT_TEXT = "Powered by Open-Meteo"


def round_half_up(value: float) -> int:
    """Round halves upward, so 2.5 displays as 3."""
    return math.floor(value + 0.5)


def render_card(state: LoadState, display_units: Units, show_credit: bool = False) -> str:
    """Render the card body as newline-separated text. Idle renders as an empty string."""
    if isinstance(state, LoadingState):
        return LOADING_TEXT
    if isinstance(state, ErrorState):
        return ERROR_PREFIX + state.message
    if not isinstance(state, ReadyState):
        return ""

    snap = state.snapshot
    imperial = display_units is Units.IMPERIAL
    location = snap.location.name
    if snap.location.country:
        location = f"{location}, {snap.location.country}"

    if imperial:
        temperature = f"{round_half_up(snap.temperature_f)}°F"
        wind = f"{round_half_up(snap.wind_mph)} mph"
    else:
        temperature = f"{round_half_up(snap.temperature_c)}°C"
        wind = f"{round_half_up(snap.wind_kph)} kph"

    lines = [
        location,
        snap.location.local_time,
        temperature,
        snap.condition_text,
        f"Wind {wind} – Humidity {snap.humidity_pct}%",
    ]
    if show_credit:
        lines.append(CREDIT_TEXT)
    return "\n".join(lines)
