# ABOUTME: WMO weather code to short display text lookup.
# ABOUTME: Unmapped codes fall back to a fixed placeholder instead of failing.

UNKNOWN_CONDITION = "Unknown"

WEATHER_CODES: dict[int, str] = {
    0: "Clear",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Freezing fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Heavy drizzle",
    61: "Light rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Light snow",
    73: "Moderate snow",
    75: "Heavy snow",
    80: "Light rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    95: "Thunderstorm",
}


def describe(code: int | None) -> str:
    """Return the display text for a weather code, or "Unknown" if it is not mapped."""
    if code is None:
        return UNKNOWN_CONDITION
    return WEATHER_CODES.get(code, UNKNOWN_CONDITION)
