# ABOUTME: Pure numeric unit conversions for temperature and wind speed.
# ABOUTME: Values are never rounded here; rounding belongs to the renderer.

KPH_PER_MPH = 1.609


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32) * 5 / 9


def kph_to_mph(kph: float) -> float:
    return kph / KPH_PER_MPH


def mph_to_kph(mph: float) -> float:
    return mph * KPH_PER_MPH
