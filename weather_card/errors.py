# ABOUTME: Exception taxonomy for the weather card load pipeline.
# ABOUTME: Only NotFoundError and ServiceError are ever shown to the user.


class WeatherCardError(Exception):
    """Base class for weather card errors."""


class ProfileLookupError(WeatherCardError):
    """Raised by profile providers when the user profile cannot be read.

    The city resolver swallows it and falls back to the configured city.
    """


class NotFoundError(WeatherCardError):
    """The geocoding service returned no match for a city name."""

    def __init__(self, city: str):
        self.city = city
        super().__init__(f"City not found: {city}")


class ServiceError(WeatherCardError):
    """An upstream service answered with a non-2xx status or could not be reached.

    ``status`` is None for transport failures (DNS, connection reset, timeouts).
    """

    def __init__(self, status: int | None, service: str = "Service"):
        self.status = status
        self.service = service
        if status is None:
            message = f"{service} request failed"
        else:
            message = f"{service} {status}"
        super().__init__(message)
